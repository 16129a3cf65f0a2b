"""Command-line interface for Classmap."""
