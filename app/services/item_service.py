"""
Item service - item use cases, authorized through the parent inventory.
Design: The parent inventory is re-read on every call; nothing about ownership is cached.
"""

import logging

from app.core.errors import ValidationError
from app.db.models.item import Item
from app.db.repositories.inventory_repository import InventoryRepository
from app.db.repositories.item_repository import ItemRepository
from app.schemas.item import ItemCreate, ItemUpdate
from app.services.ownership import PARENT_NOT_FOUND, OwnershipGuard

logger = logging.getLogger(__name__)

NOT_FOUND = "Item not found."


class ItemService:
    """Handles item use cases: list/search, create, get, update, delete."""

    def __init__(self, item_repo: ItemRepository, inventory_repo: InventoryRepository):
        self.item_repo = item_repo
        self.inventory_repo = inventory_repo
        self.guard = OwnershipGuard(inventory_repo)

    async def _require_parent(self, inventory_id: str, owner_id: str, action: str) -> None:
        inventory = await self.inventory_repo.get_by_id(inventory_id)
        await self.guard.require(
            inventory, owner_id, kind="inventory", action=action, not_found=PARENT_NOT_FOUND
        )

    async def list_items(
        self, inventory_id: str | None, owner_id: str, search: str | None = None
    ) -> list[Item]:
        if not inventory_id:
            raise ValidationError("inventoryId query parameter is required.")
        await self._require_parent(inventory_id, owner_id, "view items for")
        return await self.item_repo.list_for_inventory(inventory_id, search)

    async def create(self, owner_id: str, data: ItemCreate) -> Item:
        """Create an item. quantity and price default to 0 only when omitted."""
        if not data.inventory_id:
            raise ValidationError("inventoryId is required to create an item.")
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Item name is required.")
        await self._require_parent(data.inventory_id, owner_id, "add items to")
        item = Item(
            inventory_id=data.inventory_id,
            name=name,
            sku=(data.sku or "").strip(),
            quantity=data.quantity if data.quantity is not None else 0,
            price=data.price if data.price is not None else 0,
        )
        item = await self.item_repo.add(item)
        logger.info("item created: id=%s inventory=%s", item.id, item.inventory_id)
        return item

    async def get_by_id(self, id: str, owner_id: str, *, action: str = "view") -> Item:
        item = await self.item_repo.get_by_id(id)
        await self.guard.require(
            item, owner_id, kind="item", action=action, not_found=NOT_FOUND
        )
        return item

    async def update(self, id: str, owner_id: str, data: ItemUpdate) -> Item:
        """Apply only the fields present in the request; explicit 0 overwrites numbers."""
        item = await self.get_by_id(id, owner_id, action="update")
        supplied = data.model_fields_set
        if "name" in supplied and data.name and data.name.strip():
            item.name = data.name.strip()
        if "sku" in supplied:
            item.sku = (data.sku or "").strip()
        if "quantity" in supplied and data.quantity is not None:
            item.quantity = data.quantity
        if "price" in supplied and data.price is not None:
            item.price = data.price
        return await self.item_repo.save(item)

    async def delete(self, id: str, owner_id: str) -> None:
        item = await self.get_by_id(id, owner_id, action="delete")
        await self.item_repo.delete(item)
        logger.info("item deleted: id=%s inventory=%s", id, item.inventory_id)
