"""
Item CRUD endpoints - every call is authorized through the item's parent inventory.
"""

from fastapi import APIRouter, Query, status

from app.core.dependencies import CurrentUser
from app.db.repositories.inventory_repository import InventoryRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.session import DbSession
from app.schemas.base import MessageResponse
from app.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from app.services.item_service import ItemService

router = APIRouter()


def _get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection."""
    return ItemService(ItemRepository(session), InventoryRepository(session))


@router.get("", response_model=list[ItemResponse])
async def list_items(
    session: DbSession,
    user: CurrentUser,
    inventory_id: str | None = Query(None, alias="inventoryId"),
    search: str | None = Query(None),
):
    """Items of one inventory. REST: GET /items?inventoryId=...&search=..."""
    svc = _get_item_service(session)
    return await svc.list_items(inventory_id, user.id, search)


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(session: DbSession, user: CurrentUser, data: ItemCreate):
    svc = _get_item_service(session)
    return await svc.create(user.id, data)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(session: DbSession, user: CurrentUser, item_id: str):
    svc = _get_item_service(session)
    return await svc.get_by_id(item_id, user.id)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    session: DbSession, user: CurrentUser, item_id: str, data: ItemUpdate | None = None
):
    svc = _get_item_service(session)
    return await svc.update(item_id, user.id, data or ItemUpdate())


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(session: DbSession, user: CurrentUser, item_id: str):
    svc = _get_item_service(session)
    await svc.delete(item_id, user.id)
    return MessageResponse(message="Item removed")
