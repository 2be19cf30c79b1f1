"""Category ORM model. Placement flags control where a category is shown."""

from sqlalchemy import Boolean, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import EntityModel


class Category(EntityModel, Base):
    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    show_in_header: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    show_in_footer: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    show_in_showcase: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    show_in_featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    sort_order: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0"), index=True
    )
