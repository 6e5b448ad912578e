"""
deleteproject - Project Deletion Coordinator

Coordinates the removal (or metadata-only hiding) of a project backed by a
change database, an on-disk repository tree and an in-memory cache, and
propagates the deletion to peer nodes when the repository is replicated.

Operating rules:
- First fatal error aborts the remaining steps; completed steps stand
- Every delete invocation leaves exactly one audit record
- Local stores are mutated before peers are told
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
