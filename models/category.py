from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import relationship

from enums.gender import Gender
from models.base import Base, DTO


class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    slug = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    gender = Column(SQLEnum(Gender), nullable=True)
    parent_id = Column(Integer, ForeignKey('categories.id'), nullable=True)
    created_at = Column(DateTime, default=datetime.now)

    # Relationships
    parent = relationship('Category', remote_side=[id], back_populates='children')
    children = relationship('Category', back_populates='parent', order_by='Category.name')
    products = relationship('Product', back_populates='category')


class CategoryDTO(DTO):
    id: int | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    image_url: str | None = None
    gender: Gender | None = None
    parent_id: int | None = None
    created_at: datetime | None = None


class CategoryTreeDTO(CategoryDTO):
    product_count: int = 0
    children: list[CategoryTreeDTO] = []
