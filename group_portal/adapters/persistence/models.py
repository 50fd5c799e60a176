# group_portal/adapters/persistence/models.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

from group_portal.core.domain.models import MembershipState

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class AccountRecord(Base):
    """A registered user account."""

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)


class ContentRecord(Base):
    """
    A content item. Only rows with a non-NULL `og_group` column are groups.
    """

    __tablename__ = "content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    entity_type_id: Mapped[str] = mapped_column(String(64), nullable=False, default="node")
    bundle: Mapped[str] = mapped_column(String(64), nullable=False, default="group")
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("accounts.id"), nullable=True
    )
    og_group: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class MembershipRecord(Base):
    """
    A (group, account) membership. The unique constraint keeps one row per pair.
    """

    __tablename__ = "og_membership"
    __table_args__ = (
        UniqueConstraint("entity_type_id", "group_id", "uid", name="uq_og_membership_group_uid"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    entity_type_id: Mapped[str] = mapped_column(String(64), nullable=False)
    group_id: Mapped[int] = mapped_column(Integer, ForeignKey("content.id"), index=True)
    uid: Mapped[int] = mapped_column(Integer, ForeignKey("accounts.id"), index=True)
    membership_type: Mapped[str] = mapped_column(String(64), nullable=False, default="default")
    state: Mapped[MembershipState] = mapped_column(
        SQLEnum(
            MembershipState,
            name="og_membership_state_enum",
            values_callable=lambda enum_cls: [m.value for m in enum_cls],
        ),
        nullable=False,
        default=MembershipState.ACTIVE,
    )
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
