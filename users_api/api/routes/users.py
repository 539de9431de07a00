"""User Routes — HTTP surface for the five CRUD handlers.

Invariants:
    - Path ids and bodies reach the handlers raw (str / bytes): parsing and its
      failure codes belong to the handler set, not to FastAPI's validation
    - HTTP status comes from HandlerResult.http_status only

Design Decisions:
    - Request.body() over a typed body parameter: a bad body must answer 404 with
      the envelope, which FastAPI's RequestValidationError path cannot express
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from users_api.api.dependencies import get_user_repository
from users_api.core.envelope import HandlerResult
from users_api.core.repository_protocols import UserRepository
from users_api.services import user_handlers

router = APIRouter(tags=["users"])


def _respond(result: HandlerResult) -> JSONResponse:
    return JSONResponse(
        status_code=result.http_status, content=result.envelope.to_response(),
    )


@router.get("/")
async def list_users(repo: UserRepository = Depends(get_user_repository)):
    """List all users."""
    return _respond(await user_handlers.list_users(repo))


@router.post("/")
async def create_user(
    request: Request, repo: UserRepository = Depends(get_user_repository),
):
    """Create a user from {email, name}."""
    return _respond(await user_handlers.create_user(repo, await request.body()))


@router.get("/{user_id}")
async def get_user(
    user_id: str, repo: UserRepository = Depends(get_user_repository),
):
    """Get one user by id."""
    return _respond(await user_handlers.get_user(repo, user_id))


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: Request,
    repo: UserRepository = Depends(get_user_repository),
):
    """Replace a user's email and name."""
    return _respond(
        await user_handlers.update_user(repo, user_id, await request.body()),
    )


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, repo: UserRepository = Depends(get_user_repository),
):
    """Delete a user, returning its last values."""
    return _respond(await user_handlers.delete_user(repo, user_id))
