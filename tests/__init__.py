"""ROLODEX test suite.

Folder taxonomy
- unit/        : One module at a time; no network, filesystem only via tmp_path.
- contract/    : ContactRegistry behavior, parametrized over every backend.
- functional/  : Scenarios a user of the library or CLI walks through.
- e2e/         : The `rolodex` command with its logging options, via CliRunner.
- fixtures/    : Shared pytest fixtures and fixture data (no tests here).

Each folder's conftest.py marks its tests (unit, contract, functional, e2e);
Hypothesis tests additionally carry @pytest.mark.property.
"""
