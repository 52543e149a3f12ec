"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogger.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from blogger_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from blogger_identity.infrastructure.persistence.sqlalchemy.models.linked_account_model import (  # noqa: E501
    LinkedAccountModel,
)


class UserModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    ``password_hash`` is NULL for users that only ever signed in
    through an OAuth provider.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)

    accounts: Mapped[list[LinkedAccountModel]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
