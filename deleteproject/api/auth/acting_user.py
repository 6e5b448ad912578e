"""Acting user extraction.

Authentication happens upstream; the authenticated identity reaches this
service in the X-User-Id header. Whether that user may delete a project is
decided later by the precondition gate.
"""

from typing import Annotated

import structlog
from fastapi import Header, HTTPException, status

logger = structlog.get_logger(__name__)


def get_acting_user(
    x_user_id: Annotated[
        str | None,
        Header(description="Identity of the authenticated user making the request."),
    ] = None,
) -> str:
    """Extract the acting user from the X-User-Id header.

    Args:
        x_user_id: Value of the X-User-Id header.

    Returns:
        The acting user's identity.

    Raises:
        HTTPException 401: If the header is missing or blank.
    """
    if not x_user_id or not x_user_id.strip():
        logger.bind(component="acting_user").warning(
            "auth_failed", reason="missing_user_id"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header is required",
        )
    return x_user_id.strip()
