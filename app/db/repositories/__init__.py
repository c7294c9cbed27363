# Repository pattern: data access kept out of services and endpoints

from app.db.repositories.inventory_repository import InventoryRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "InventoryRepository", "ItemRepository"]
