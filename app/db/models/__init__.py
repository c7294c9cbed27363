from app.db.models.user import User
from app.db.models.inventory import Inventory
from app.db.models.item import Item

__all__ = ["User", "Inventory", "Item"]
