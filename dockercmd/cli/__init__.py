"""Command-line interface for dockercmd."""
