"""User ORM: a standalone account record.

Invariants:
    - id is a server-assigned integer primary key, never updated
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from orders_api.db.base import Base


class User(Base):
    """User entity."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r})>"
