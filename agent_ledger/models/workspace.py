"""
Workspace Model
===============

Workspaces are the tenant boundary for agent events.
"""

from typing import List, TYPE_CHECKING

from sqlalchemy import String, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agent_ledger.models.base import Base, UUIDMixin, TimestampMixin, JSONType

if TYPE_CHECKING:
    from agent_ledger.models.agent_event import AgentEvent
    from agent_ledger.models.user import User


class Workspace(Base, UUIDMixin, TimestampMixin):
    """
    Workspace owned by a single user.

    Attributes:
        owner_id: Owning user
        name: Display name
        settings: Workspace-specific settings (JSON)
    """

    __tablename__ = "workspaces"

    owner_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Owning user",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Workspace display name",
    )
    settings: Mapped[dict] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
        doc="Workspace-specific settings (JSON)",
    )

    owner: Mapped["User"] = relationship("User", back_populates="workspaces")
    agent_events: Mapped[List["AgentEvent"]] = relationship(
        "AgentEvent",
        back_populates="workspace",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
