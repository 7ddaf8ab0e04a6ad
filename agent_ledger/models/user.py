"""
User Model
==========

Owners of workspaces. Each user carries their preferred timezone and
the LLM provider/model their agents run against.
"""

from typing import List, TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agent_ledger.models.base import Base, UUIDMixin, TimestampMixin

if TYPE_CHECKING:
    from agent_ledger.models.workspace import Workspace


class User(Base, UUIDMixin, TimestampMixin):
    """
    User account.

    Attributes:
        email: Unique login email
        display_name: Name shown in the UI
        timezone: IANA timezone name used for scheduling
        llm_provider: Provider backing this user's agents
        llm_model: Model name at that provider
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        doc="Login email",
    )
    display_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Display name",
    )
    timezone: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        default="UTC",
        doc="IANA timezone name",
    )
    llm_provider: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        doc="LLM provider (openai, anthropic, ...)",
    )
    llm_model: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        doc="LLM model name",
    )

    workspaces: Mapped[List["Workspace"]] = relationship(
        "Workspace",
        back_populates="owner",
        cascade="all, delete-orphan",
    )
