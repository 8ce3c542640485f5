"""CLI helpers for ROLODEX.

Utilities used by the command-line interface: NAME=LEVEL logger option parsing
and stderr message emitters with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import success, warn

__all__ = ["parse_log_level", "success", "warn"]
