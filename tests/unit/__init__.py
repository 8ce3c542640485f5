"""Unit tests.

Each module here targets a single source module and builds its own inputs.
"""
