"""Order ORM: the aggregate root that owns its line items.

Invariants:
    - order_id is a server-assigned integer primary key
    - items are ordered by item_id and deleted with the order

Design Decisions:
    - cascade="all, delete-orphan" at the ORM level plus ON DELETE CASCADE on
      items.order_id, so both ORM deletes and bulk DELETE statements cascade
    - lazy="selectin": items load eagerly without async lazy-load errors
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orders_api.db.base import Base


class Order(Base):
    """Order aggregate root."""
    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    ordered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    items: Mapped[list["Item"]] = relationship(
        "Item", back_populates="order",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Item.item_id", passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Order(order_id={self.order_id}, customer_name={self.customer_name!r})>"
