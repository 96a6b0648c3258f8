# app/adapters/inbound/api/v1/endpoints/user_endpoint.py (async version)

import logging
from typing import List
from fastapi import APIRouter, Depends, status, HTTPException, Path, Request, Response

from app.application.use_cases.user_use_cases import AsyncUserService
from app.adapters.inbound.api.deps import get_user_service
from app.shared.utils.input_validation import InputValidator
from app.application.dtos.user_dto import (
    UserCreate,
    UserUpdate,
    UserOutput,
    UserCountByGroupOutput,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_RESPONSE = {
    404: {
        "description": "User not found",
        "content": {
            "application/json": {
                "example": {"detail": "User with ID 42 not found"}
            }
        }
    }
}


@router.get(
    "",
    response_model=List[UserOutput],
    summary="List Users - List all users",
    description="Returns every user with its groups and the permissions granted to them.",
)
async def list_users(service: AsyncUserService = Depends(get_user_service)):
    return await service.list_users()


# The count routes must be declared before "/{user_id}"
@router.get(
    "/count",
    response_model=int,
    summary="Count Users - Total number of users",
)
async def count_users(service: AsyncUserService = Depends(get_user_service)):
    return await service.count_users()


@router.get(
    "/count-by-group",
    response_model=List[UserCountByGroupOutput],
    summary="Count Users by Group - Number of users in each group",
    description="Returns one entry per group, including groups without members.",
)
async def count_users_by_group(service: AsyncUserService = Depends(get_user_service)):
    return await service.count_users_by_group()


@router.get(
    "/{user_id}",
    name="get_user",
    response_model=UserOutput,
    summary="Get User - Get a user by ID",
    responses=NOT_FOUND_RESPONSE,
)
async def get_user(
        user_id: int = Path(..., ge=1, le=InputValidator.MAX_ID, description="ID of the user"),
        service: AsyncUserService = Depends(get_user_service),
):
    user = await service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found"
        )
    return user


@router.post(
    "",
    response_model=UserOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create User - Create a new user",
    description=(
        "Creates an active user and its group memberships. "
        "The Location header points to the new user."
    ),
    responses={
        400: {"description": "Invalid data or email already in use"},
        404: {"description": "One of the requested groups does not exist"},
    },
)
async def create_user(
        user_data: UserCreate,
        request: Request,
        response: Response,
        service: AsyncUserService = Depends(get_user_service),
):
    """
    Creates a user. Domain errors (duplicate email, unknown group) are
    turned into responses by the exception middleware.
    """
    user = await service.create_user(user_data)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.put(
    "/{user_id}",
    response_model=UserOutput,
    summary="Update User - Update a user and its groups",
    description="Overwrites the user's data; `groupIds` replaces the whole membership.",
    responses={
        400: {"description": "Invalid data or email already in use"},
        404: {"description": "User or group not found"},
    },
)
async def update_user(
        user_id: int = Path(..., ge=1, le=InputValidator.MAX_ID, description="ID of the user to update"),
        update_data: UserUpdate = ...,
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.update_user(user_id=user_id, data=update_data)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete User - Permanently delete a user",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_user(
        user_id: int = Path(..., ge=1, le=InputValidator.MAX_ID, description="ID of the user to delete"),
        service: AsyncUserService = Depends(get_user_service),
):
    if not await service.delete_user(user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
