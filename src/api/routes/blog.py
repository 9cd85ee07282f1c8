from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.blogs import (
    BlogCommand,
    BlogInfo,
    BlogListResponse,
    ManageBlogsUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/blogs", tags=["Blogs"])


class BlogRequest(BaseModel):
    """Create/update blog payload"""

    title: str = Field(..., min_length=5, description="Title (min 5 chars)")
    content: str = Field(..., min_length=20, description="Content (min 20 chars)")


@router.get("", status_code=status.HTTP_200_OK, response_model=BlogListResponse)
async def list_blogs(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All blogs, newest first (public)"""
    result = await ManageBlogsUseCase(uow).list_all()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogInfo)
async def get_blog(blog_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ManageBlogsUseCase(uow).get(blog_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BlogInfo)
async def create_blog(
    request: BlogRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = BlogCommand(title=request.title, content=request.content)
    result = await ManageBlogsUseCase(uow).create(current_user.user_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogInfo)
async def update_blog(
    blog_id: int,
    request: BlogRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Blog

    Raises:
        - 403 Forbidden: Caller is not the author
        - 404 Not Found: Blog not found
    """
    command = BlogCommand(title=request.title, content=request.content)
    result = await ManageBlogsUseCase(uow).update(current_user.user_id, blog_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageBlogsUseCase(uow).delete(current_user.user_id, blog_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
