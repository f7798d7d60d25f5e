"""Item ORM: one line of an order.

Invariants:
    - Always belongs to an Order (order_id FK, non-nullable)
    - quantity is a non-negative integer
"""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orders_api.db.base import Base


class Item(Base):
    """Line item entity."""
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="items_quantity_non_negative"),
    )

    item_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    item_code: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    order_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("orders.order_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False, index=True,
    )

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    def __repr__(self) -> str:
        return f"<Item(item_id={self.item_id}, order_id={self.order_id}, quantity={self.quantity})>"
