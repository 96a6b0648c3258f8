# app/adapters/inbound/api/v1/endpoints/group_endpoint.py (async version)

from typing import List
from fastapi import APIRouter, Depends, status, HTTPException, Path

from app.application.use_cases.group_use_cases import AsyncGroupService
from app.adapters.inbound.api.deps import get_group_service
from app.shared.utils.input_validation import InputValidator
from app.application.dtos.group_dto import GroupOutput

router = APIRouter()


@router.get(
    "",
    response_model=List[GroupOutput],
    summary="List Groups - List all groups with their permissions",
)
async def list_groups(service: AsyncGroupService = Depends(get_group_service)):
    return await service.list_groups()


@router.get(
    "/{group_id}",
    response_model=GroupOutput,
    summary="Get Group - Get a group by ID",
    responses={404: {"description": "Group not found"}},
)
async def get_group(
        group_id: int = Path(..., ge=1, le=InputValidator.MAX_ID, description="ID of the group"),
        service: AsyncGroupService = Depends(get_group_service),
):
    group = await service.get_group(group_id)
    if group is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Group with ID {group_id} not found"
        )
    return group
