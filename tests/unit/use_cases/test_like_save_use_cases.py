import pytest

from src.app.use_cases.blogs import LikeBlogsUseCase, SaveBlogsUseCase
from src.domain.entities import Blog, Like, SavedBlog, User


@pytest.fixture
def blog():
    return Blog(id=10, title="First post", content="c" * 20, author_id=1)


@pytest.mark.asyncio
async def test_like_blog(mock_uow, blog):
    mock_uow.blogs.get_by_id.return_value = blog

    result = await LikeBlogsUseCase(mock_uow).like(2, 10)

    assert result.is_ok()
    assert result.value.active is True
    created = mock_uow.likes.create.call_args.args[0]
    assert (created.user_id, created.blog_id) == (2, 10)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_like_missing_blog(mock_uow):
    result = await LikeBlogsUseCase(mock_uow).like(2, 10)

    assert result.is_err()
    assert result.error.code == "BLOG_NOT_FOUND"


@pytest.mark.asyncio
async def test_like_twice(mock_uow, blog):
    mock_uow.blogs.get_by_id.return_value = blog
    mock_uow.likes.get.return_value = Like(id=1, user_id=2, blog_id=10)

    result = await LikeBlogsUseCase(mock_uow).like(2, 10)

    assert result.is_err()
    assert result.error.code == "ALREADY_LIKED"
    mock_uow.likes.create.assert_not_called()


@pytest.mark.asyncio
async def test_unlike_not_liked(mock_uow):
    result = await LikeBlogsUseCase(mock_uow).unlike(2, 10)

    assert result.is_err()
    assert result.error.code == "NOT_LIKED"


@pytest.mark.asyncio
async def test_list_liked_keeps_like_order(mock_uow):
    author = User(id=1, email="ada@example.com", name="Ada", password_hash="x")
    mock_uow.likes.list_by_user.return_value = [
        Like(id=2, user_id=2, blog_id=11),
        Like(id=1, user_id=2, blog_id=10),
    ]
    mock_uow.blogs.get_by_ids.return_value = [
        Blog(id=10, title="Ten", content="c" * 20, author_id=1),
        Blog(id=11, title="Eleven", content="c" * 20, author_id=1),
    ]
    mock_uow.users.get_by_ids.return_value = [author]

    result = await LikeBlogsUseCase(mock_uow).list_liked(2)

    assert result.is_ok()
    assert [b.id for b in result.value.blogs] == [11, 10]


@pytest.mark.asyncio
async def test_save_and_status(mock_uow, blog):
    mock_uow.blogs.get_by_id.return_value = blog

    saved = await SaveBlogsUseCase(mock_uow).save(2, 10)
    assert saved.is_ok()
    assert saved.value.active is True

    mock_uow.saved_blogs.get.return_value = SavedBlog(id=1, user_id=2, blog_id=10)
    status = await SaveBlogsUseCase(mock_uow).status(2, 10)
    assert status.value.active is True


@pytest.mark.asyncio
async def test_save_twice(mock_uow, blog):
    mock_uow.blogs.get_by_id.return_value = blog
    mock_uow.saved_blogs.get.return_value = SavedBlog(id=1, user_id=2, blog_id=10)

    result = await SaveBlogsUseCase(mock_uow).save(2, 10)

    assert result.is_err()
    assert result.error.code == "ALREADY_SAVED"


@pytest.mark.asyncio
async def test_unsave_not_saved(mock_uow):
    result = await SaveBlogsUseCase(mock_uow).unsave(2, 10)

    assert result.is_err()
    assert result.error.code == "NOT_SAVED"
