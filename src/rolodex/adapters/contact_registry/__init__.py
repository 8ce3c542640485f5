"""Contact registry adapters.

`BACKENDS` maps the names accepted by ``rolodex --registry-backend`` to the
registry classes that implement them.
"""

from rolodex.interfaces.contact_registry import ContactRegistry

from .memory import InMemoryContactRegistry

BACKENDS: dict[str, type[ContactRegistry]] = {"memory": InMemoryContactRegistry}
DEFAULT_BACKEND = "memory"


def make_registry(backend: str = DEFAULT_BACKEND) -> ContactRegistry:
    """Return a new, empty registry of the named backend.

    Raises:
        ValueError: If `backend` is not a key of `BACKENDS`.
    """
    try:
        registry_cls = BACKENDS[backend]
    except KeyError as e:
        raise ValueError(f"unknown registry backend: {backend}") from e
    return registry_cls()


__all__ = ["BACKENDS", "DEFAULT_BACKEND", "InMemoryContactRegistry", "make_registry"]
