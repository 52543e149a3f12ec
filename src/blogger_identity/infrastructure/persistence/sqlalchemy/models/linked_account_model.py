"""SQLAlchemy model for provider accounts linked to a user."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogger.domain.shared.time import utc_now
from blogger_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase

if TYPE_CHECKING:
    from blogger_identity.infrastructure.persistence.sqlalchemy.models.user_model import (  # noqa: E501
        UserModel,
    )


class LinkedAccountModel(IdentityBase):
    """SQLAlchemy model for linked provider accounts."""

    __tablename__ = "linked_accounts"
    __table_args__ = (
        UniqueConstraint(
            "provider",
            "provider_account_id",
            name="uq_linked_accounts_provider_account",
        ),
        UniqueConstraint("user_id", "provider", name="uq_linked_accounts_user_provider"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    provider: Mapped[str] = mapped_column(String(50), nullable=False)
    provider_account_id: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    user: Mapped[UserModel] = relationship(back_populates="accounts")

    def __repr__(self) -> str:
        return (
            f"<LinkedAccountModel(provider={self.provider}, "
            f"provider_account_id={self.provider_account_id})>"
        )
