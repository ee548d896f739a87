from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text, CheckConstraint, func, select
from sqlalchemy.orm import relationship, column_property

from models.base import Base, DTO
from models.product import Product, ProductDTO


class Review(Base):
    __tablename__ = 'reviews'

    id = Column(Integer, primary_key=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    # Relationships
    product = relationship('Product', back_populates='reviews')
    user = relationship('User')

    __table_args__ = (
        CheckConstraint('rating >= 1 AND rating <= 5', name='check_review_rating_range'),
    )


# Rating aggregates ride along with every Product select
Product.review_count = column_property(
    select(func.count(Review.id))
    .where(Review.product_id == Product.id)
    .correlate_except(Review)
    .scalar_subquery()
)
Product.average_rating = column_property(
    select(func.avg(Review.rating))
    .where(Review.product_id == Product.id)
    .correlate_except(Review)
    .scalar_subquery()
)


class ReviewerDTO(DTO):
    name: str | None = None


class ReviewDTO(DTO):
    id: int | None = None
    rating: int | None = None
    comment: str | None = None
    product_id: int | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    user: ReviewerDTO | None = None


class ProductDetailDTO(ProductDTO):
    reviews: list[ReviewDTO] = []
