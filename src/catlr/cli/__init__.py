"""Command-line interface for catlr."""
