"""Root conftest: load the framework's pytest plugin."""

pytest_plugins = ["e2e_framework.fixtures"]
