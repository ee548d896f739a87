import math

from sqlalchemy import select, update, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload

from db import session_execute, session_flush
from enums.sort_order import SortOrder
from models.product import Product, ProductDTO, ProductFilterDTO, ProductPageDTO
from models.review import Review, ProductDetailDTO


class ProductRepository:

    @staticmethod
    def _apply_filters(stmt, product_filter: ProductFilterDTO):
        stmt = stmt.where(Product.is_active == True)
        if product_filter.category_id is not None:
            stmt = stmt.where(Product.category_id == product_filter.category_id)
        if product_filter.gender is not None:
            stmt = stmt.where(Product.gender == product_filter.gender)
        if product_filter.brand:
            stmt = stmt.where(Product.brand.ilike(f"%{product_filter.brand}%"))
        if product_filter.is_featured is not None:
            stmt = stmt.where(Product.is_featured == product_filter.is_featured)
        if product_filter.seller_id is not None:
            stmt = stmt.where(Product.seller_id == product_filter.seller_id)
        if product_filter.search:
            pattern = f"%{product_filter.search}%"
            stmt = stmt.where(or_(
                Product.name.ilike(pattern),
                Product.description.ilike(pattern),
                Product.brand.ilike(pattern)
            ))
        return stmt

    @staticmethod
    async def search(product_filter: ProductFilterDTO, session: AsyncSession | Session) -> ProductPageDTO:
        """
        Paginated, filtered and sorted listing of active products.

        All filters are AND-ed; `search` matches name, description or brand.
        Sorting and paging are delegated to the database.

        Args:
            product_filter: Listing criteria (page is 1-based)
            session: Database session

        Returns:
            ProductPageDTO with the page of products and totals
        """
        sort_column = getattr(Product, product_filter.sort_by.column_name)
        order_by = sort_column.asc() if product_filter.order == SortOrder.ASC else sort_column.desc()
        skip = (product_filter.page - 1) * product_filter.limit

        products_stmt = (ProductRepository._apply_filters(select(Product), product_filter)
                         .options(selectinload(Product.category))
                         .order_by(order_by, Product.id.asc())
                         .offset(skip)
                         .limit(product_filter.limit)
                         .execution_options(populate_existing=True))
        count_stmt = ProductRepository._apply_filters(select(func.count(Product.id)), product_filter)

        products = await session_execute(products_stmt, session)
        products = [ProductDTO.model_validate(product, from_attributes=True) for product in products.scalars().all()]
        total = await session_execute(count_stmt, session)
        total = total.scalar_one()

        return ProductPageDTO(
            products=products,
            page=product_filter.page,
            limit=product_filter.limit,
            total=total,
            pages=math.ceil(total / product_filter.limit)
        )

    @staticmethod
    async def get_by_id(product_id: int, session: AsyncSession | Session) -> ProductDTO | None:
        stmt = (select(Product)
                .where(Product.id == product_id)
                .options(selectinload(Product.category))
                .execution_options(populate_existing=True))
        product = await session_execute(stmt, session)
        product = product.scalar()
        if product is None:
            return None
        return ProductDTO.model_validate(product, from_attributes=True)

    @staticmethod
    async def get_detail(product_id: int, session: AsyncSession | Session) -> ProductDetailDTO | None:
        stmt = (select(Product)
                .where(Product.id == product_id)
                .options(selectinload(Product.category),
                         selectinload(Product.reviews).selectinload(Review.user))
                .execution_options(populate_existing=True))
        product = await session_execute(stmt, session)
        product = product.scalar()
        if product is None:
            return None
        return ProductDetailDTO.model_validate(product, from_attributes=True)

    @staticmethod
    async def create(product_dto: ProductDTO, session: AsyncSession | Session) -> int:
        product = Product(**product_dto.model_dump(
            exclude={'id', 'category', 'review_count', 'average_rating', 'created_at', 'updated_at'},
            exclude_none=True
        ))
        session.add(product)
        await session_flush(session)
        return product.id

    @staticmethod
    async def update(product_id: int, values: dict, session: AsyncSession | Session) -> None:
        stmt = (update(Product)
                .where(Product.id == product_id)
                .values(**values)
                .execution_options(synchronize_session=False))
        await session_execute(stmt, session)

    @staticmethod
    async def decrement_stock(product_id: int, quantity: int, session: AsyncSession | Session) -> None:
        # Relative update in SQL; the row is not locked and the new value is not checked
        stmt = (update(Product)
                .where(Product.id == product_id)
                .values(stock=Product.stock - quantity)
                .execution_options(synchronize_session=False))
        await session_execute(stmt, session)
