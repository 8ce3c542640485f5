"""Global pytest fixtures for ROLODEX."""

pytest_plugins = [
    "tests.fixtures.contacts",
]
