"""Command-line interface for taml-cli."""
