"""Literal pattern matching for include/exclude filters.

Patterns are plain strings compared with substring, prefix and suffix tests. There is no
regular expression or glob engine involved: ``*`` only marks which end of the pattern is
open, and any pattern the simple forms cannot express degrades to substring containment.

Supported forms, in the order they are tried:

    ``*X*``   relative path contains ``X``
    ``*X``    relative path ends with ``X``
    ``X*``    relative path starts with ``X``
    ``a*b``   any other use of ``*``: relative path contains ``ab``
    ``dir/``  relative path is ``dir`` or lies under ``dir/``
    ``name``  filename (last path component) is exactly ``name``
    ``a/b``   relative path is exactly ``a/b``

Example:
    >>> pattern_matches("src/a.cpp", "a.cpp", "*.cpp")
    True
    >>> pattern_matches("src/a.cpp.bak", "a.cpp.bak", "*.cpp")
    False
    >>> pattern_matches("build/main.js", "main.js", "build/")
    True
    >>> pattern_matches("lib/node_modules", "node_modules", "node_modules")
    True
"""

WILDCARD = "*"
SEPARATOR = "/"


def normalize_pattern(pattern: str) -> str:
    """Convert Windows-style separators in a pattern to forward slashes.

    Args:
        pattern: Pattern as supplied by the user.

    Returns:
        The pattern with every backslash replaced by a forward slash.

    Example:
        >>> normalize_pattern("build\\\\main.js")
        'build/main.js'
    """
    return pattern.replace("\\", SEPARATOR)


def _match_wildcard(relative_path: str, pattern: str) -> bool:
    leading = pattern.startswith(WILDCARD)
    trailing = pattern.endswith(WILDCARD)
    inner = pattern[1 if leading else 0 : len(pattern) - 1 if trailing else len(pattern)]  # noqa: E203

    if WILDCARD not in inner:
        if leading and trailing and len(pattern) >= 2:
            return inner in relative_path
        if leading and not trailing:
            # endswith compares the exact tail and is False for shorter paths
            return relative_path.endswith(inner)
        if trailing and not leading:
            return relative_path.startswith(inner)

    # Everything else, including a lone "*", is plain containment of the stripped text
    return pattern.replace(WILDCARD, "") in relative_path


def pattern_matches(relative_path: str, filename: str, pattern: str) -> bool:
    """Check whether a path matches a single filter pattern.

    Matching is case-sensitive and purely literal. Malformed patterns fall through to the
    nearest applicable form; this function never raises for string input.

    Args:
        relative_path: Path relative to the traversal root, using ``/`` separators.
        filename: Final component of the path.
        pattern: Normalized filter pattern (see :func:`normalize_pattern`).

    Returns:
        True if the pattern matches the path, False otherwise.

    Example:
        >>> pattern_matches("build", "build", "build*")
        True
        >>> pattern_matches("nbuild", "nbuild", "build*")
        False
        >>> pattern_matches("xbuild/y", "y", "build/")
        False
        >>> pattern_matches("anything/at/all", "all", "*")
        True
    """
    if WILDCARD in pattern:
        return _match_wildcard(relative_path, pattern)

    if pattern.endswith(SEPARATOR):
        dir_name = pattern[:-1]
        return relative_path == dir_name or relative_path.startswith(dir_name + SEPARATOR)

    if SEPARATOR not in pattern:
        return filename == pattern

    return relative_path == pattern
