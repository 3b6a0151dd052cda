"""``POST /api/signup`` route."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response

from src.api.controllers.signup import SignupController
from src.api.factories import get_signup_controller
from src.api.schemas.accounts import AccountResponse, SignupRequest
from src.api.schemas.errors import ErrorResponse
from src.api.schemas.http import HttpRequest
from src.api.utils.responses import render_http_response

router = APIRouter(prefix="/api", tags=["accounts"])


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body, treating anything but a JSON object as empty.

    Raises:
        HTTPException: 400 if the body is not valid JSON.
    """
    if not await request.body():
        return {}
    try:
        payload = await request.json()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be valid JSON",
        ) from e
    return payload if isinstance(payload, dict) else {}


@router.post(
    "/signup",
    summary="Create an account",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": SignupRequest.model_json_schema()}
            },
        }
    },
    responses={
        status.HTTP_200_OK: {"model": AccountResponse},
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def signup(
    body: Annotated[dict[str, Any], Depends(read_json_object)],
    controller: Annotated[SignupController, Depends(get_signup_controller)],
) -> Response:
    """Register a new account.

    Returns the stored account with its hashed password, or an error body
    naming the first field that was missing or invalid.
    """
    http_response = await controller.handle(HttpRequest(body=body))
    return render_http_response(http_response)
