"""
Inventory service - owner-scoped inventory use cases.
Design: Every read and write goes through the ownership guard; validation runs before any write.
"""

import logging

from app.core.errors import ValidationError
from app.db.models.inventory import Inventory
from app.db.repositories.inventory_repository import InventoryRepository
from app.db.repositories.item_repository import ItemRepository
from app.schemas.inventory import InventoryCreate, InventoryUpdate
from app.services.ownership import OwnershipGuard

logger = logging.getLogger(__name__)

NOT_FOUND = "Inventory not found."


class InventoryService:
    """Handles inventory use cases: list/search, create, get, update, delete."""

    def __init__(self, inventory_repo: InventoryRepository, item_repo: ItemRepository):
        self.inventory_repo = inventory_repo
        self.item_repo = item_repo
        self.guard = OwnershipGuard(inventory_repo)

    async def list_inventories(self, owner_id: str, search: str | None = None) -> list[Inventory]:
        return await self.inventory_repo.list_for_owner(owner_id, search)

    async def create(self, owner_id: str, data: InventoryCreate) -> Inventory:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Name is required to create an inventory item.")
        inventory = Inventory(
            name=name,
            description=(data.description or "").strip(),
            owner_id=owner_id,
        )
        inventory = await self.inventory_repo.add(inventory)
        logger.info("inventory created: id=%s owner=%s", inventory.id, owner_id)
        return inventory

    async def get_by_id(self, id: str, owner_id: str, *, action: str = "view") -> Inventory:
        inventory = await self.inventory_repo.get_by_id(id)
        await self.guard.require(
            inventory, owner_id, kind="inventory", action=action, not_found=NOT_FOUND
        )
        return inventory

    async def update(self, id: str, owner_id: str, data: InventoryUpdate) -> Inventory:
        """Apply only the fields present in the request.

        A blank name is ignored; description is replaced whenever it was sent, even as "".
        """
        inventory = await self.get_by_id(id, owner_id, action="update")
        supplied = data.model_fields_set
        if "name" in supplied and data.name and data.name.strip():
            inventory.name = data.name.strip()
        if "description" in supplied:
            inventory.description = (data.description or "").strip()
        return await self.inventory_repo.save(inventory)

    async def delete(self, id: str, owner_id: str) -> None:
        """Delete an inventory together with its items."""
        inventory = await self.get_by_id(id, owner_id, action="delete")
        removed = await self.item_repo.delete_for_inventory(inventory.id)
        await self.inventory_repo.delete(inventory)
        logger.info("inventory deleted: id=%s owner=%s items=%d", id, owner_id, removed)
