"""
Base repository - generic async data access shared by the model repositories.
Repositories flush but never commit; the request-scoped session commits.
"""

from typing import Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


def search_term(search: str | None) -> str | None:
    """Normalize an optional search term. Blank terms mean no filter."""
    if search is None:
        return None
    term = search.strip()
    return term or None


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific queries."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: str) -> ModelType | None:
        """Fetch single entity by primary key. Always hits the database."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    def filter_by_name(self, stmt: Select, search: str | None) -> Select:
        """Case-insensitive literal substring match on name (LIKE wildcards escaped)."""
        term = search_term(search)
        if term is not None:
            stmt = stmt.where(self.model.name.icontains(term, autoescape=True))
        return stmt

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller's session commits."""
        self.session.add(entity)
        await self.session.flush()  # Get ID and defaults without committing
        await self.session.refresh(entity)
        return entity

    async def save(self, entity: ModelType) -> ModelType:
        """Flush pending changes on an already persistent entity."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Remove entity from DB."""
        await self.session.delete(entity)
        await self.session.flush()
