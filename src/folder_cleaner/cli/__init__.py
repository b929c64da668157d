"""Command-line interface for folder-cleaner."""
