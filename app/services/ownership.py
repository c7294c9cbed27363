"""
Ownership guard - the single authorization rule for inventories and items.

An inventory belongs to its owner_id. An item belongs to whoever owns its parent
inventory, resolved from the database on every call. Existence is decided before
ownership so a missing record always reads as 404, whoever asks; only a record
that exists and belongs to someone else reads as 403.
"""

import enum
import logging

from app.core.errors import ForbiddenError, NotFoundError
from app.core.metrics import AUTHORIZATION_DECISIONS
from app.db.models.inventory import Inventory
from app.db.models.item import Item
from app.db.repositories.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

PARENT_NOT_FOUND = "Parent inventory not found."


class Decision(enum.Enum):
    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"
    MISSING = "missing"


class OwnershipGuard:
    """Decides ALLOWED / FORBIDDEN / MISSING for a resource and an acting user.

    Callers name the resource kind ("inventory" or "item") so a missing record is
    still counted and reported under its kind.
    """

    def __init__(self, inventory_repo: InventoryRepository):
        self.inventory_repo = inventory_repo

    async def owning_inventory(self, resource: Inventory | Item) -> Inventory | None:
        """The inventory whose owner_id governs access to resource."""
        if isinstance(resource, Inventory):
            return resource
        if isinstance(resource, Item):
            return await self.inventory_repo.get_by_id(resource.inventory_id)
        raise TypeError(f"unsupported resource type: {type(resource).__name__}")

    async def authorize(
        self, resource: Inventory | Item | None, user_id: str, *, kind: str
    ) -> Decision:
        if resource is None:
            decision = Decision.MISSING
        else:
            inventory = await self.owning_inventory(resource)
            if inventory is None:
                decision = Decision.MISSING
            elif inventory.owner_id == user_id:
                decision = Decision.ALLOWED
            else:
                decision = Decision.FORBIDDEN
        AUTHORIZATION_DECISIONS.labels(resource=kind, decision=decision.value).inc()
        return decision

    async def require(
        self,
        resource: Inventory | Item | None,
        user_id: str,
        *,
        kind: str,
        action: str = "access",
        not_found: str = "Not found",
    ) -> None:
        """Raise NotFoundError / ForbiddenError unless user_id may act on resource.

        Missing messages distinguish the record itself from an item's parent inventory.
        """
        decision = await self.authorize(resource, user_id, kind=kind)
        if decision is Decision.ALLOWED:
            return
        if decision is Decision.MISSING:
            if resource is None:
                raise NotFoundError(not_found)
            raise NotFoundError(PARENT_NOT_FOUND)
        logger.info(
            "ownership denied: user=%s %s=%s action=%s", user_id, kind, resource.id, action
        )
        raise ForbiddenError(f"Not authorized to {action} this {kind}.")
