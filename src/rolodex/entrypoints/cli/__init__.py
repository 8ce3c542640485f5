"""Command-line interface for ROLODEX."""
