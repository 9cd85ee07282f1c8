from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from .dtos import ProfileBlog, ProfileResponse, ProfileSession
from .manage_users_use_case import to_user_details

RECENT_BLOG_LIMIT = 5


class GetProfileUseCase:
    """Load the current user with their most recent blogs and active sessions"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(self, user_id: int) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            blogs = await self.uow.blogs.list_by_author(user_id, limit=RECENT_BLOG_LIMIT)
            sessions = await self.uow.sessions.find_active_by_user(user_id)

            return Return.ok(
                ProfileResponse(
                    user=to_user_details(user),
                    blogs=[
                        ProfileBlog(id=b.id, title=b.title, created_at=b.created_at)
                        for b in blogs
                    ],
                    sessions=[
                        ProfileSession(
                            id=str(s.id), user_agent=s.user_agent, created_at=s.created_at
                        )
                        for s in sessions
                    ],
                )
            )
