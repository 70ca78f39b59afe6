"""Command-line interface for storeview."""
