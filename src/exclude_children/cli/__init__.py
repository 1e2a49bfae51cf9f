"""Command-line interface for previewing the filtered admin page tree."""
