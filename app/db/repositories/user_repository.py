"""
User repository - encapsulates all user data access.
"""

from sqlalchemy import select

from app.db.models.user import User
from app.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email - used for authentication."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_identity(self, id: str):
        """Public projection of a user (no credential columns). Returns a Row or None."""
        result = await self.session.execute(
            select(User.id, User.name, User.email, User.is_active).where(User.id == id)
        )
        return result.one_or_none()
