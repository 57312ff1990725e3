"""Command-line interface for Website Roaster."""
