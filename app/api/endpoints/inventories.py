"""
Inventory endpoints - owner-scoped CRUD and search.
Design: Thin controller; the service applies validation and the ownership guard.
"""

from fastapi import APIRouter, Query, status

from app.core.dependencies import CurrentUser
from app.db.repositories.inventory_repository import InventoryRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.session import DbSession
from app.schemas.base import MessageResponse
from app.schemas.inventory import InventoryCreate, InventoryResponse, InventoryUpdate
from app.services.inventory_service import InventoryService

router = APIRouter()


def _get_inventory_service(session: DbSession) -> InventoryService:
    return InventoryService(InventoryRepository(session), ItemRepository(session))


@router.get("", response_model=list[InventoryResponse])
async def list_inventories(
    session: DbSession,
    user: CurrentUser,
    search: str | None = Query(None),
):
    """Inventories of the current user, newest first. ?search= filters by name."""
    svc = _get_inventory_service(session)
    return await svc.list_inventories(user.id, search)


@router.post("", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory(session: DbSession, user: CurrentUser, data: InventoryCreate):
    svc = _get_inventory_service(session)
    return await svc.create(user.id, data)


@router.get("/{inventory_id}", response_model=InventoryResponse)
async def get_inventory(session: DbSession, user: CurrentUser, inventory_id: str):
    svc = _get_inventory_service(session)
    return await svc.get_by_id(inventory_id, user.id)


@router.put("/{inventory_id}", response_model=InventoryResponse)
async def update_inventory(
    session: DbSession,
    user: CurrentUser,
    inventory_id: str,
    data: InventoryUpdate | None = None,
):
    """Partial update: only fields present in the body change. No body changes nothing."""
    svc = _get_inventory_service(session)
    return await svc.update(inventory_id, user.id, data or InventoryUpdate())


@router.delete("/{inventory_id}", response_model=MessageResponse)
async def delete_inventory(session: DbSession, user: CurrentUser, inventory_id: str):
    """Delete the inventory and its items."""
    svc = _get_inventory_service(session)
    await svc.delete(inventory_id, user.id)
    return MessageResponse(message="Inventory removed")
