"""Unit tests for the FileSystemNode class."""

from catlr.file_system_tree.file_system_node import FileSystemNode


def test_file_system_node_defaults():
    node = FileSystemNode("main.py")
    assert node.name == "main.py"
    assert node.relative_path == ""
    assert not node.is_dir
    assert not node.is_symlink
    assert node.symlink_target is None
    assert node.parent is None


def test_file_system_node_parent_child():
    root = FileSystemNode("project", is_dir=True)
    src = FileSystemNode("src", parent=root, relative_path="src", is_dir=True)
    main = FileSystemNode("main.py", parent=src, relative_path="src/main.py")

    assert main.parent is src
    assert src.parent is root
    assert root.children == (src,)
    assert src.children == (main,)
    assert main.relative_path == "src/main.py"


def test_display_name_for_file():
    assert FileSystemNode("main.py").display_name == "main.py"


def test_display_name_for_directory():
    assert FileSystemNode("src", is_dir=True).display_name == "src/"


def test_display_name_for_symlink_with_target():
    node = FileSystemNode("current", is_symlink=True, symlink_target="releases/v2")
    assert node.display_name == "current → releases/v2 [symlink]"


def test_display_name_for_symlink_without_target():
    assert FileSystemNode("dangling", is_symlink=True).display_name == "dangling [symlink]"


def test_extra_attributes_are_passed_to_anytree():
    node = FileSystemNode("data.bin", mode=0o644)
    assert node.mode == 0o644
