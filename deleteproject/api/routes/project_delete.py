"""Project deletion API routes.

FastAPI router for deleting projects and describing the delete action.

Error responses follow RFC 7807:
- 400: invalid project name
- 401: no acting user
- 403: precondition gate refused the delete
- 404: project repository not found
- 409: concurrent modification of the project's changes
- 500: replication configuration unreadable
- 502: replication daemon did not accept the archive request
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response

from deleteproject.api.auth.acting_user import get_acting_user
from deleteproject.api.dependencies.project_delete import (
    get_delete_action_service,
    get_deletion_coordinator,
)
from deleteproject.api.models.project_delete import (
    DeleteActionResponse,
    DeleteProjectRequest,
    ProjectDeleteErrorResponse,
)
from deleteproject.application.services.delete_action_service import (
    DeleteActionService,
)
from deleteproject.application.services.deletion_coordinator import (
    DeletionCoordinator,
)
from deleteproject.domain.errors import (
    ConcurrentModificationError,
    ConfigurationUnreadableError,
    DeletePermissionDeniedError,
    ProjectNotFoundError,
    ReplicationTransportError,
)
from deleteproject.domain.models.project import Project

router = APIRouter(prefix="/v1/projects", tags=["projects"])

ERROR_TYPE_BASE = "urn:deleteproject:error"


def _problem(
    request: Request, status_code: int, slug: str, title: str, error: Exception
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "type": f"{ERROR_TYPE_BASE}:{slug}",
            "title": title,
            "status": status_code,
            "detail": str(error),
            "instance": str(request.url),
        },
    )


def _project_from_path(request: Request, project_name: str) -> Project:
    try:
        return Project(project_name)
    except ValueError as e:
        raise _problem(
            request, status.HTTP_400_BAD_REQUEST, "invalid-project", "Invalid Project", e
        ) from None


@router.delete(
    "/{project_name:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        403: {"model": ProjectDeleteErrorResponse, "description": "Delete not allowed"},
        404: {"model": ProjectDeleteErrorResponse, "description": "Project not found"},
        409: {
            "model": ProjectDeleteErrorResponse,
            "description": "Concurrent modification",
        },
        500: {
            "model": ProjectDeleteErrorResponse,
            "description": "Replication configuration unreadable",
        },
        502: {
            "model": ProjectDeleteErrorResponse,
            "description": "Replication daemon did not accept the archive request",
        },
    },
    summary="Delete a project",
    description=(
        "Delete a project, or only its metadata when preserve is set. "
        "Replicated projects are archived by the replication daemon and the "
        "deletion is broadcast to peer nodes."
    ),
)
async def delete_project(
    project_name: str,
    request: Request,
    request_data: DeleteProjectRequest | None = None,
    user: str = Depends(get_acting_user),
    coordinator: DeletionCoordinator = Depends(get_deletion_coordinator),
) -> Response:
    """Delete a project on behalf of the acting user."""
    project = _project_from_path(request, project_name)
    options = (request_data or DeleteProjectRequest()).to_domain()

    try:
        await coordinator.delete(project, options, user)
    except ProjectNotFoundError as e:
        raise _problem(
            request, status.HTTP_404_NOT_FOUND, "project-not-found", "Project Not Found", e
        ) from None
    except ConcurrentModificationError as e:
        raise _problem(
            request,
            status.HTTP_409_CONFLICT,
            "concurrent-modification",
            "Concurrent Modification",
            e,
        ) from None
    except DeletePermissionDeniedError as e:
        raise _problem(
            request, status.HTTP_403_FORBIDDEN, "delete-denied", "Delete Not Allowed", e
        ) from None
    except ReplicationTransportError as e:
        raise _problem(
            request,
            status.HTTP_502_BAD_GATEWAY,
            "replication-transport",
            "Replication Daemon Error",
            e,
        ) from None
    except ConfigurationUnreadableError as e:
        raise _problem(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "configuration-unreadable",
            "Configuration Unreadable",
            e,
        ) from None

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{project_name:path}/delete-action",
    response_model=DeleteActionResponse,
    summary="Describe the delete action",
    description=(
        "Label, title and enabled/visible flags for the project's delete "
        "action. Replicated projects are offered as 'Clean up...'."
    ),
)
async def get_delete_action(
    project_name: str,
    request: Request,
    user: str = Depends(get_acting_user),
    service: DeleteActionService = Depends(get_delete_action_service),
) -> DeleteActionResponse:
    """Describe the delete action for the acting user."""
    project = _project_from_path(request, project_name)
    description = await service.describe(project, user)
    return DeleteActionResponse.from_domain(description)
