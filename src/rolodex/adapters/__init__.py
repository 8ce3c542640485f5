"""Adapters (outbound implementations) for ROLODEX.

Concrete implementations of the contracts in `rolodex.interfaces`, plus
loaders for external fixture data.
"""
