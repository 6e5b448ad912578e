"""Audit adapters."""

from deleteproject.infrastructure.adapters.audit.delete_log import StructlogDeleteLog

__all__ = ["StructlogDeleteLog"]
