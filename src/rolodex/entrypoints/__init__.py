"""Entrypoints (inbound adapters) for ROLODEX.

Expose the registry to the outside world through the command line. Parse and
validate inputs, drive the adapters, and present results.
"""
