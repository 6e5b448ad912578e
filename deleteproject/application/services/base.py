"""LoggingMixin shared by the deletion services.

A service calls ``_init_logger()`` once in ``__init__`` and then asks for an
operation logger at the top of every public method:

    class ChangeSetReplicator(LoggingMixin):
        def __init__(self, index, transport) -> None:
            ...
            self._init_logger()

        async def replicate(self, project_name, ...) -> None:
            log = self._log_operation("replicate_changes", project=project_name)
            log.info("change_deletion_broadcast")
"""

import structlog

from deleteproject.infrastructure.observability.correlation import get_correlation_id
from deleteproject.infrastructure.observability.logging import get_logger_for_service


class LoggingMixin:
    """Gives a service a logger bound to its class name and component.

    Operation loggers add ``operation``, the keyword context, and the
    correlation id of the running delete request if there is one.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "deletion") -> None:
        """Bind the service logger.

        Args:
            component: "deletion" for the request path, "presentation" for
                services that only describe actions.
        """
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Logger for one call of an operation.

        The correlation id is read when this is called. A method that opens
        a new correlation scope has to do so before asking for its logger.

        Args:
            operation: Operation name, e.g. "delete".
            **context: Extra fields, e.g. project=name.
        """
        bound = self._log.bind(operation=operation, **context)
        correlation_id = get_correlation_id()
        if correlation_id:
            bound = bound.bind(correlation_id=correlation_id)
        return bound
