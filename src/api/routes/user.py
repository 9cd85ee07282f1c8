from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field, model_validator

from src.api.error import raise_for_error
from src.api.utils.cookies import clear_auth_cookies
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.users import (
    GetProfileUseCase,
    ManageUsersUseCase,
    ProfileResponse,
    UpdateUserCommand,
    UserDetails,
    UserListResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


class UpdateUserRequest(BaseModel):
    """PUT /users/{id} payload; at least one field is required"""

    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)

    @model_validator(mode="after")
    def require_one_field(self):
        if self.name is None and self.email is None and self.password is None:
            raise ValueError("At least one field must be provided for update")
        return self


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user with their 5 most recent blogs and active sessions"""
    result = await GetProfileUseCase(uow).execute(current_user.user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/users", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageUsersUseCase(uow).list_all()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDetails)
async def get_user(
    user_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageUsersUseCase(uow).get(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDetails)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Raises:
        - 403 Forbidden: Not the caller's own account
        - 404 Not Found: User not found
        - 409 Conflict: Email already in use
    """
    command = UpdateUserCommand(
        name=request.name, email=request.email, password=request.password
    )
    result = await ManageUsersUseCase(uow).update(current_user.user_id, user_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User

    Removes the account with its sessions, blogs, likes and saved blogs.
    """
    result = await ManageUsersUseCase(uow).delete(current_user.user_id, user_id)
    if result.is_err():
        raise_for_error(result.error)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_auth_cookies(response)
    return response
