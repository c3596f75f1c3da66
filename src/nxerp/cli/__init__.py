"""Command-line shell for nxerp."""
