"""Contract tests.

Written once against `ContactRegistry` and run for every backend listed in
`contract/contact_registry/conftest.py`. Only the public interface is asserted.
"""
