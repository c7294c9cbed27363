"""
Inventory repository - owner-scoped inventory queries.
"""

from sqlalchemy import select

from app.db.models.inventory import Inventory
from app.db.repositories.base_repository import BaseRepository


class InventoryRepository(BaseRepository[Inventory]):
    def __init__(self, session):
        super().__init__(session, Inventory)

    async def list_for_owner(self, owner_id: str, search: str | None = None) -> list[Inventory]:
        """All inventories of one owner, newest first, optionally filtered by name."""
        stmt = select(Inventory).where(Inventory.owner_id == owner_id)
        stmt = self.filter_by_name(stmt, search)
        result = await self.session.execute(stmt.order_by(Inventory.created_at.desc()))
        return list(result.scalars().all())
