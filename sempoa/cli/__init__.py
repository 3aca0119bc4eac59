"""Command-line interface for the sempoa trainer."""
