from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

import config
from db import session_commit
from enums.gender import Gender
from enums.product_sort_field import ProductSortField
from enums.sort_order import SortOrder
from exceptions import CategoryNotFoundException, CategoryAlreadyExistsException
from models.category import Category, CategoryDTO, CategoryTreeDTO
from models.product import CategoryDetailDTO, ProductFilterDTO
from repositories.category import CategoryRepository
from repositories.product import ProductRepository

# root -> children -> grandchildren
CATEGORY_TREE_DEPTH = 2


def _build_tree(category: Category, depth: int) -> CategoryTreeDTO:
    node = CategoryTreeDTO.model_validate(CategoryDTO.model_validate(category, from_attributes=True).model_dump())
    node.product_count = category.product_count or 0
    if depth > 0:
        node.children = [_build_tree(child, depth - 1) for child in category.children]
    return node


def _build_detail(category: Category) -> CategoryDetailDTO:
    return CategoryDetailDTO(
        **CategoryDTO.model_validate(category, from_attributes=True).model_dump(),
        parent=CategoryDTO.model_validate(category.parent, from_attributes=True) if category.parent else None,
        children=[CategoryDTO.model_validate(child, from_attributes=True) for child in category.children],
        product_count=category.product_count or 0
    )


class CategoryService:

    @staticmethod
    async def get_tree(gender: Gender | None, session: AsyncSession | Session) -> list[CategoryTreeDTO]:
        roots = await CategoryRepository.get_roots_with_descendants(gender, session)
        return [_build_tree(root, CATEGORY_TREE_DEPTH) for root in roots]

    @staticmethod
    async def get_detail(category_id: int,
                         page: int,
                         limit: int | None,
                         sort_by: ProductSortField,
                         order: SortOrder,
                         session: AsyncSession | Session) -> CategoryDetailDTO:
        """
        Category with parent, children and one page of its active products.

        Args:
            category_id: Category to load
            page: 1-based page of products
            limit: Page size (defaults to config.CATEGORY_PRODUCTS_PAGE_SIZE)
            sort_by: Product column to sort by
            order: asc/desc
            session: Database session

        Raises:
            CategoryNotFoundException: If the category does not exist
        """
        category = await CategoryRepository.get_entity_with_relations(category_id, session)
        if category is None:
            raise CategoryNotFoundException(category_id)
        # Shape before the product query, which reloads the same Category rows
        category_detail = _build_detail(category)

        products_page = await ProductRepository.search(ProductFilterDTO(
            category_id=category_id,
            sort_by=sort_by,
            order=order,
            page=page,
            limit=limit or config.CATEGORY_PRODUCTS_PAGE_SIZE
        ), session)

        category_detail.products = products_page.products
        return category_detail

    @staticmethod
    async def create(category_dto: CategoryDTO, session: AsyncSession | Session) -> CategoryDetailDTO:
        if await CategoryRepository.exists_by_name_or_slug(category_dto.name, category_dto.slug, session):
            raise CategoryAlreadyExistsException(category_dto.name, category_dto.slug)
        if category_dto.parent_id is not None and not await CategoryRepository.exists(category_dto.parent_id, session):
            raise CategoryNotFoundException(category_dto.parent_id)

        category_id = await CategoryRepository.create(category_dto, session)
        await session_commit(session)
        category = await CategoryRepository.get_entity_with_relations(category_id, session)

        return _build_detail(category)
