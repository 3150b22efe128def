"""Status tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field, field_validator

from checkin.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from checkin.application.usecase.status_tag import (
    CreateStatusTagRequest,
    CreateStatusTagUseCase,
    DeleteStatusTagRequest,
    DeleteStatusTagUseCase,
    ListStatusTagsRequest,
    ListStatusTagsUseCase,
    StatusTagItem,
    UpdateStatusTagRequest,
    UpdateStatusTagUseCase,
)
from checkin.domain.error import (
    DomainError,
    DuplicateKeyError,
    NotAuthorizedError,
    NotFoundError,
)
from checkin.domain.model.status_tag import TAG_FIELD_MAX_LENGTH
from checkin.domain.value.types import StatusVisibility
from checkin.interface.api.responses import DataResponse
from checkin.util.jwt import JWTError

router = APIRouter(
    prefix="/statuses/{status_id}/tags",
    tags=["status tags"],
    route_class=DishkaRoute,
)

STATUS_NOT_FOUND = "No status found for this id"
TAG_NOT_FOUND = "No StatusTag found for given arguments"
TAG_NOT_FOUND_ON_DELETE = "No StatusTag found for this arguments"
STATUS_FORBIDDEN = "User not authorized to manipulate this Status"
TAG_FORBIDDEN = "User not authorized to manipulate this StatusTag"
DUPLICATE_KEY = "StatusTag with this key already exists"


class CreateStatusTagAPIRequest(BaseModel):
    """API request for creating a status tag."""

    key: str = Field(min_length=1, max_length=TAG_FIELD_MAX_LENGTH)
    value: str = Field(min_length=1, max_length=TAG_FIELD_MAX_LENGTH)
    visibility: int | str  # Level value (0-4) or name


class UpdateStatusTagAPIRequest(BaseModel):
    """API request for updating a status tag.

    ``value`` is required on every update, the other fields are optional.
    """

    key: str | None = Field(default=None, min_length=1, max_length=TAG_FIELD_MAX_LENGTH)
    value: str = Field(min_length=1, max_length=TAG_FIELD_MAX_LENGTH)
    visibility: str | None = None  # Level name

    @field_validator("visibility")
    @classmethod
    def validate_visibility(cls, v: str | None) -> str | None:
        """Validate the visibility level name."""
        if v is not None and v.strip().lower() not in StatusVisibility.keys():
            raise ValueError(
                f"Visibility must be one of: {', '.join(StatusVisibility.keys())}"
            )
        return v


async def _resolve_user_id(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> str | None:
    """Resolve the acting user from the session cookie.

    A missing cookie means an anonymous request; a cookie that does not
    resolve to a user is rejected with 401.
    """
    if not auth_token:
        return None

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError as e:
        logfire.warn("Rejected session token", error=str(e))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except (NotFoundError, ValueError) as e:
        logfire.warn("Session token for unknown user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
    return user.user_id


@router.get("", response_model=DataResponse[list[StatusTagItem]])
async def list_status_tags(
    status_id: int,
    list_status_tags_use_case: FromDishka[ListStatusTagsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[list[StatusTagItem]]:
    """List the tags of a status visible to the caller.

    Args:
        status_id: Status ID
        list_status_tags_use_case: List status tags use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Visible tags in insertion order

    Example:
        GET /statuses/42/tags

        Response:
        {"data": [{"key": "seat", "value": "12A", "visibility": 0}]}
    """
    user_id = await _resolve_user_id(auth_token, get_current_user_use_case)

    try:
        result = await list_status_tags_use_case.execute(
            ListStatusTagsRequest(status_id=status_id, viewer_id=user_id)
        )
    except NotFoundError as e:
        logfire.warn("Status tags requested for missing status", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=STATUS_NOT_FOUND)

    return DataResponse(data=result.tags)


@router.post("", response_model=DataResponse[StatusTagItem])
async def create_status_tag(
    status_id: int,
    request: CreateStatusTagAPIRequest,
    create_status_tag_use_case: FromDishka[CreateStatusTagUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[StatusTagItem]:
    """Attach a tag to a status.

    Only the owner of the status may add tags.

    Args:
        status_id: Status ID
        request: Tag key, value and visibility
        create_status_tag_use_case: Create status tag use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created tag

    Raises:
        HTTPException: 400 on duplicate key or bad visibility, 403 if not the
            owner, 404 if the status does not exist
    """
    user_id = await _resolve_user_id(auth_token, get_current_user_use_case)

    try:
        result = await create_status_tag_use_case.execute(
            CreateStatusTagRequest(
                status_id=status_id,
                user_id=user_id,
                key=request.key,
                value=request.value,
                visibility=request.visibility,
            )
        )
    except NotFoundError as e:
        logfire.warn("Status tag creation for missing status", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=STATUS_NOT_FOUND)
    except DuplicateKeyError as e:
        logfire.warn("Duplicate status tag key", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_KEY)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized status tag creation attempt", error=str(e))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=STATUS_FORBIDDEN)
    except (DomainError, ValueError) as e:
        logfire.warn("Status tag creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating status tag", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create status tag",
        )

    return DataResponse(data=result.tag)


@router.put("/{tag_key}", response_model=DataResponse[StatusTagItem])
async def update_status_tag(
    status_id: int,
    tag_key: str,
    request: UpdateStatusTagAPIRequest,
    update_status_tag_use_case: FromDishka[UpdateStatusTagUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[StatusTagItem]:
    """Update a status tag.

    The value is always replaced; key and visibility only when given.

    Args:
        status_id: Status ID
        tag_key: Current key of the tag
        request: New value, optional new key and visibility name
        update_status_tag_use_case: Update status tag use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Updated tag
    """
    user_id = await _resolve_user_id(auth_token, get_current_user_use_case)

    try:
        result = await update_status_tag_use_case.execute(
            UpdateStatusTagRequest(
                status_id=status_id,
                tag_key=tag_key,
                user_id=user_id,
                value=request.value,
                key=request.key,
                visibility=request.visibility,
            )
        )
    except NotFoundError as e:
        logfire.warn("Status tag update for missing tag", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TAG_NOT_FOUND)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized status tag update attempt", error=str(e))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=TAG_FORBIDDEN)
    except DuplicateKeyError as e:
        logfire.warn("Status tag renamed to taken key", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_KEY)
    except (DomainError, ValueError) as e:
        logfire.warn("Status tag update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating status tag", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update status tag",
        )

    return DataResponse(data=result.tag)


@router.delete("/{tag_key}", response_model=DataResponse[None])
async def delete_status_tag(
    status_id: int,
    tag_key: str,
    delete_status_tag_use_case: FromDishka[DeleteStatusTagUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[None]:
    """Delete a status tag.

    Args:
        status_id: Status ID
        tag_key: Key of the tag to delete
        delete_status_tag_use_case: Delete status tag use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Empty success envelope
    """
    user_id = await _resolve_user_id(auth_token, get_current_user_use_case)

    try:
        await delete_status_tag_use_case.execute(
            DeleteStatusTagRequest(status_id=status_id, tag_key=tag_key, user_id=user_id)
        )
    except NotFoundError as e:
        logfire.warn("Status tag deletion for missing tag", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TAG_NOT_FOUND_ON_DELETE)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized status tag deletion attempt", error=str(e))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=TAG_FORBIDDEN)
    except Exception as e:
        logfire.error("Unexpected error deleting status tag", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete status tag",
        )

    return DataResponse(data=None)
