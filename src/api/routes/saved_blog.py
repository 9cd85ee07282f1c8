from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.blogs import BlogListResponse, BlogStatusResponse, SaveBlogsUseCase
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/saved", tags=["Saved Blogs"])


@router.get("", status_code=status.HTTP_200_OK, response_model=BlogListResponse)
async def list_saved_blogs(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Blogs saved by the caller, most recently saved first"""
    result = await SaveBlogsUseCase(uow).list_saved(current_user.user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{blog_id}", status_code=status.HTTP_201_CREATED, response_model=BlogStatusResponse)
async def save_blog(
    blog_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SaveBlogsUseCase(uow).save(current_user.user_id, blog_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogStatusResponse)
async def unsave_blog(
    blog_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SaveBlogsUseCase(uow).unsave(current_user.user_id, blog_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{blog_id}/status", status_code=status.HTTP_200_OK, response_model=BlogStatusResponse
)
async def save_status(
    blog_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SaveBlogsUseCase(uow).status(current_user.user_id, blog_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
