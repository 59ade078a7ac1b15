"""Command line interface for revise."""
