"""Command-line interface for blogger."""
