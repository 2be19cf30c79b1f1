"""Prompt ORM model. Only rows with status 'published' are publicly visible."""

from datetime import datetime

from sqlalchemy import (
    ARRAY,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.ai_model import AiModel
from app.infrastructure.persistence.models.mixins import EntityModel


class Prompt(EntityModel, Base):
    """Table: prompt. slug and prompt_code (4 digits) are unique."""

    __tablename__ = "prompt"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    prompt_code: Mapped[str] = mapped_column(String(4), nullable=False, unique=True)
    prompt_text: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)
    image_alt: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("category.id", ondelete="SET NULL"), nullable=True, index=True
    )
    model_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("ai_model.id", ondelete="SET NULL"), nullable=True, index=True
    )
    aspect_ratio: Mapped[str | None] = mapped_column(String(20), nullable=True)
    style: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default=text("'draft'")
    )
    view_count: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0")
    )
    like_count: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0")
    )
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_keywords: Mapped[list[str] | None] = mapped_column(ARRAY(String), nullable=True)
    created_by: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    ai_model: Mapped[AiModel | None] = relationship(lazy="joined")

    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'published', 'archived')", name="ck_prompt_status"
        ),
        CheckConstraint("prompt_code ~ '^[0-9]{4}$'", name="ck_prompt_code_format"),
        Index("ix_prompt_status_view_count", "status", "view_count"),
    )
