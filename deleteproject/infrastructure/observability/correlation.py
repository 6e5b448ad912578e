"""Per-request correlation ids.

Each delete request opens a correlation scope with start_correlation().
The id lives in a contextvar, so it follows the request across awaits. The
same id is sent to the replication daemon as the delayed-removal task id
and to peer nodes with every broadcast, which lets one grep tie together
the local log lines, the daemon's archive task and the peers' replay.

Usage:
    correlation_id = start_correlation()
    ...
    structlog.configure(processors=[..., correlation_id_processor, ...])
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """A fresh UUID4 string."""
    return str(uuid4())


def get_correlation_id() -> str:
    """The id of the current scope, or "" outside any scope."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Replace the id of the current scope ("" clears it)."""
    _correlation_id.set(correlation_id)


def start_correlation() -> str:
    """Open a new scope for the current task.

    Returns:
        The generated id, for passing to remote systems.
    """
    correlation_id = generate_correlation_id()
    _correlation_id.set(correlation_id)
    return correlation_id


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor stamping the scope's id onto each entry.

    Entries that already carry a bound correlation_id keep theirs.
    """
    correlation_id = _correlation_id.get()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
