"""Command-line interface for wscodec."""
