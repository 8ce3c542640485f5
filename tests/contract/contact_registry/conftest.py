"""Pytest fixtures for contact registry contract tests.

Provided fixtures
-----------------
- **registry**: Parametrized backend fixture that returns a **fresh**
  `ContactRegistry` per test. One instance per entry of
  `rolodex.adapters.contact_registry.BACKENDS`.

- **registry_factory**: Module-scoped callable returning a fresh registry of
  the same backend; used by Hypothesis tests, which need a new instance per
  generated example.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rolodex.adapters.contact_registry import BACKENDS, make_registry
from rolodex.interfaces.contact_registry import ContactRegistry


@pytest.fixture(params=sorted(BACKENDS))
def registry(request: pytest.FixtureRequest) -> ContactRegistry:
    """Return a fresh, empty registry for the requested backend."""
    return make_registry(request.param)


@pytest.fixture(scope="module", params=sorted(BACKENDS))
def registry_factory(request: pytest.FixtureRequest) -> Callable[[], ContactRegistry]:
    """Return a factory producing fresh registries for the requested backend."""
    return lambda: make_registry(request.param)
