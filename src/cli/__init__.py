"""Command-line interface for decoding feed documents."""
