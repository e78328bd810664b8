"""Run-level setup and teardown."""

from .global_setup import global_setup, global_teardown

__all__ = ["global_setup", "global_teardown"]
