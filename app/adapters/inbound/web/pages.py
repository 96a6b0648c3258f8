# app/adapters/inbound/web/pages.py

"""
Server-rendered pages for managing users.

These pages call the same services as the JSON API and render
Jinja2 templates from app/templates.
"""

import logging
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Path, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError as PydanticValidationError

from app.adapters.inbound.api.deps import get_user_service, get_group_service
from app.application.dtos.user_dto import UserCreate, UserUpdate
from app.application.use_cases.user_use_cases import AsyncUserService
from app.application.use_cases.group_use_cases import AsyncGroupService
from app.domain.exceptions import ResourceAlreadyExistsException, ResourceNotFoundException
from app.shared.utils.input_validation import InputValidator

# Configure logger
logger = logging.getLogger(__name__)

router = APIRouter()

# Templates for the HTML pages
templates = Jinja2Templates(directory=FilePath(__file__).resolve().parents[3] / "templates")


def _validation_messages(exc: PydanticValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        messages.append(f"{field}: {message}" if field else message)
    return messages


async def _render_form(
        request: Request,
        groups: AsyncGroupService,
        *,
        form: Dict[str, Any],
        selected_group_ids: List[int],
        errors: List[str],
        user_id: Optional[int] = None,
        status_code: int = status.HTTP_200_OK,
):
    """
    Render user_form.html for creation, or for editing when `user_id` is given.
    """
    return templates.TemplateResponse(
        request,
        "user_form.html",
        {
            "groups": await groups.list_groups(),
            "form": form,
            "selected_group_ids": selected_group_ids,
            "errors": errors,
            "user_id": user_id,
            "heading": "Edit user" if user_id else "New user",
            "action": f"/web/users/{user_id}/edit" if user_id else "/web/users/new",
        },
        status_code=status_code,
    )


@router.get("/users", response_class=HTMLResponse)
async def users_page(
        request: Request,
        users: AsyncUserService = Depends(get_user_service),
):
    """
    Table of users with the total count and the count per group.
    """
    return templates.TemplateResponse(request, "users.html", {
        "users": await users.list_users(),
        "total": await users.count_users(),
        "group_counts": await users.count_users_by_group(),
    })


@router.get("/users/new", response_class=HTMLResponse)
async def new_user_form(
        request: Request,
        groups: AsyncGroupService = Depends(get_group_service),
):
    return await _render_form(request, groups, form={}, selected_group_ids=[], errors=[])


@router.post("/users/new", response_class=HTMLResponse)
async def create_user_from_form(
        request: Request,
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        phone_number: Optional[str] = Form(None),
        group_ids: List[int] = Form([]),
        users: AsyncUserService = Depends(get_user_service),
        groups: AsyncGroupService = Depends(get_group_service),
):
    """
    Create a user from the form fields.

    Redirects to the user table on success; otherwise the form is rendered
    again with the submitted values and the error messages.
    """
    form = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone_number": phone_number or "",
    }

    try:
        data = UserCreate(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            group_ids=group_ids,
        )
        user = await users.create_user(data)
    except PydanticValidationError as e:
        errors = _validation_messages(e)
        logger.warning(f"Invalid user form submitted: {errors}")
    except (ResourceAlreadyExistsException, ResourceNotFoundException) as e:
        errors = [str(e)]
        logger.warning(f"User form rejected: {str(e)}")
    else:
        logger.info(f"User created from web form: ID {user.id}")
        return RedirectResponse(url="/web/users", status_code=status.HTTP_303_SEE_OTHER)

    return await _render_form(
        request, groups,
        form=form,
        selected_group_ids=group_ids,
        errors=errors,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/users/{user_id}/edit", response_class=HTMLResponse)
async def edit_user_form(
        request: Request,
        user_id: int = Path(..., ge=1, le=InputValidator.MAX_ID),
        users: AsyncUserService = Depends(get_user_service),
        groups: AsyncGroupService = Depends(get_group_service),
):
    """
    Form pre-filled with the user's current data and groups.
    """
    user = await users.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found"
        )

    form = {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "phone_number": user.phone_number or "",
        "is_active": user.is_active,
    }
    return await _render_form(
        request, groups,
        form=form,
        selected_group_ids=[group.id for group in user.groups],
        errors=[],
        user_id=user_id,
    )


@router.post("/users/{user_id}/edit", response_class=HTMLResponse)
async def update_user_from_form(
        request: Request,
        user_id: int = Path(..., ge=1, le=InputValidator.MAX_ID),
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        phone_number: Optional[str] = Form(None),
        is_active: bool = Form(False),
        group_ids: List[int] = Form([]),
        users: AsyncUserService = Depends(get_user_service),
        groups: AsyncGroupService = Depends(get_group_service),
):
    """
    Overwrite a user with the form fields; the checked groups replace its membership.

    An unchecked "active" box deactivates the user.
    """
    form = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone_number": phone_number or "",
        "is_active": is_active,
    }

    try:
        data = UserUpdate(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            is_active=is_active,
            group_ids=group_ids,
        )
        await users.update_user(user_id, data)
    except PydanticValidationError as e:
        errors = _validation_messages(e)
        logger.warning(f"Invalid edit form submitted for user {user_id}: {errors}")
    except (ResourceAlreadyExistsException, ResourceNotFoundException) as e:
        errors = [str(e)]
        logger.warning(f"Edit form rejected for user {user_id}: {str(e)}")
    else:
        logger.info(f"User updated from web form: ID {user_id}")
        return RedirectResponse(url="/web/users", status_code=status.HTTP_303_SEE_OTHER)

    return await _render_form(
        request, groups,
        form=form,
        selected_group_ids=group_ids,
        errors=errors,
        user_id=user_id,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.post("/users/{user_id}/delete")
async def delete_user_from_page(
        user_id: int = Path(..., ge=1, le=InputValidator.MAX_ID),
        users: AsyncUserService = Depends(get_user_service),
):
    # Deleting an unknown user leaves the table unchanged
    await users.delete_user(user_id)
    return RedirectResponse(url="/web/users", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/groups", response_class=HTMLResponse)
async def groups_page(
        request: Request,
        groups: AsyncGroupService = Depends(get_group_service),
):
    return templates.TemplateResponse(request, "groups.html", {
        "groups": await groups.list_groups(),
    })
