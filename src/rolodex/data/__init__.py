"""Packaged fixture data for ROLODEX."""
