"""ORM Models: SQLAlchemy declarative models for users, orders and items.

Invariants:
    - All models inherit from Base (db/base.py)
    - Order is the aggregate root for Item; User stands alone

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() references
      resolve and Base.metadata is complete before create_all() runs
"""

from orders_api.models.user import User  # noqa: F401
from orders_api.models.order import Order  # noqa: F401
from orders_api.models.item import Item  # noqa: F401
