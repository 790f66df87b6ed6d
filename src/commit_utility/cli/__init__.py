"""Command-line interface for commit_utility."""
