"""
Item repository - items are always queried through their parent inventory id.
"""

from sqlalchemy import delete, select

from app.db.models.item import Item
from app.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    def __init__(self, session):
        super().__init__(session, Item)

    async def list_for_inventory(self, inventory_id: str, search: str | None = None) -> list[Item]:
        """Items of one inventory, newest first, optionally filtered by name."""
        stmt = select(Item).where(Item.inventory_id == inventory_id)
        stmt = self.filter_by_name(stmt, search)
        result = await self.session.execute(stmt.order_by(Item.created_at.desc()))
        return list(result.scalars().all())

    async def delete_for_inventory(self, inventory_id: str) -> int:
        """Bulk-delete the items of an inventory. Returns the number of rows removed."""
        result = await self.session.execute(
            delete(Item)
            .where(Item.inventory_id == inventory_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0
