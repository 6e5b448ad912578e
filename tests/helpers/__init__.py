"""Test helpers for deleteproject tests.

Helpers:
    DeletionHarness: Stubbed collaborators sharing one call journal

Usage:
    from tests.helpers import DeletionHarness
"""

from tests.helpers.deletion_harness import DeletionHarness

__all__ = ["DeletionHarness"]
