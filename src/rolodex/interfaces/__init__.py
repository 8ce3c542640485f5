"""Interfaces (application boundary) for ROLODEX.

Defines framework-free contracts (ABCs) implemented by the adapters.

Dependency rule: may import `rolodex.domain`; do not import from
`rolodex.adapters` or `rolodex.entrypoints`.
"""

from .contact_registry import ContactRegistry

__all__ = ["ContactRegistry"]
