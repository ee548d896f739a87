from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload

from db import session_execute, session_flush
from enums.gender import Gender
from models.category import Category, CategoryDTO


class CategoryRepository:
    @staticmethod
    async def exists(category_id: int, session: AsyncSession | Session) -> bool:
        stmt = select(Category.id).where(Category.id == category_id)
        result = await session_execute(stmt, session)
        return result.scalar() is not None

    @staticmethod
    async def get_entity_with_relations(category_id: int, session: AsyncSession | Session) -> Category | None:
        """
        Load a category with parent and direct children.

        Returns the ORM entity (not a DTO) because callers shape it together
        with a product page; relations are eager loaded so nothing lazy-loads later.
        """
        stmt = (select(Category)
                .where(Category.id == category_id)
                .options(selectinload(Category.parent), selectinload(Category.children))
                .execution_options(populate_existing=True))
        category = await session_execute(stmt, session)
        return category.scalar()

    @staticmethod
    async def get_roots_with_descendants(gender: Gender | None, session: AsyncSession | Session) -> list[Category]:
        """
        Root categories (no parent) with two levels of children eager loaded.

        Args:
            gender: Optional filter applied to the root categories only
            session: Database session

        Returns:
            Root Category entities ordered by name
        """
        stmt = (select(Category)
                .where(Category.parent_id.is_(None))
                .options(selectinload(Category.children).selectinload(Category.children))
                .order_by(Category.name.asc())
                .execution_options(populate_existing=True))
        if gender is not None:
            stmt = stmt.where(Category.gender == gender)
        categories = await session_execute(stmt, session)
        return list(categories.scalars().all())

    @staticmethod
    async def exists_by_name_or_slug(name: str, slug: str, session: AsyncSession | Session) -> bool:
        stmt = select(Category.id).where(or_(Category.name == name, Category.slug == slug)).limit(1)
        result = await session_execute(stmt, session)
        return result.scalar() is not None

    @staticmethod
    async def create(category_dto: CategoryDTO, session: AsyncSession | Session) -> int:
        category = Category(**category_dto.model_dump(exclude={'id', 'created_at'}))
        session.add(category)
        await session_flush(session)
        return category.id
