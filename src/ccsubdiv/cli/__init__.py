"""Command-line interface for ccsubdiv."""
