"""Agent event storage.

Each row records one action taken (or attempted) by an automated agent
inside a workspace: what it was asked (input), what it produced (output)
and where it is in its lifecycle (status).

Rows are append-only from the point of view of this service.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

from sqlalchemy import String, DateTime, ForeignKey, Index, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agent_ledger.models.base import Base, UUIDMixin, JSONType, utc_now

if TYPE_CHECKING:
    from agent_ledger.models.workspace import Workspace


class AgentEventStatus(str, Enum):
    """Lifecycle tag of an agent event."""

    DRAFT = "draft"
    EXECUTED = "executed"
    ERROR = "error"


class AgentEvent(Base, UUIDMixin):
    __tablename__ = "agent_events"

    workspace_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        doc="Workspace this event belongs to",
    )

    agent: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        doc="Producing agent (task_creator, reminder_scheduler, ...)",
    )

    action: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        doc="Action performed by the agent",
    )

    input: Mapped[dict[str, Any]] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
        doc="Action input (JSON)",
    )

    output: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSONType,
        nullable=True,
        default=dict,
        doc="Action output (JSON)",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=AgentEventStatus.DRAFT.value,
        index=True,
        doc="Lifecycle status (draft|executed|error)",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        doc="Event timestamp (UTC)",
    )

    workspace: Mapped["Workspace"] = relationship("Workspace", back_populates="agent_events")

    __table_args__ = (
        Index(
            "ix_agent_events_workspace_recent",
            "workspace_id",
            "created_at",
        ),
    )
