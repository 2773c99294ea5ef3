"""Command-line interface for blobpack."""
