"""ROLODEX

A small in-memory contact registry. Contacts are validated on insertion and
kept in insertion order; the surrounding test suite exercises the registry
through lifecycle hooks, parametrized fixtures and nested test groups.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
