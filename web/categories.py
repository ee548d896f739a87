from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

import config
from enums.gender import Gender
from enums.product_sort_field import ProductSortField
from enums.sort_order import SortOrder
from models.category import CategoryDTO, CategoryTreeDTO
from models.product import CategoryDetailDTO
from models.user import UserDTO
from services.category import CategoryService
from web.dependencies import get_session, gender_query, require_admin
from web.schemas import CreateCategoryRequest

categories_router = APIRouter(prefix="/api/categories", tags=["categories"])


@categories_router.get("")
async def get_categories(gender: Gender | None = Depends(gender_query),
                         session: AsyncSession = Depends(get_session)) -> list[CategoryTreeDTO]:
    return await CategoryService.get_tree(gender, session)


@categories_router.get("/{category_id}")
async def get_category(category_id: int,
                       page: int = Query(default=1, ge=1),
                       limit: int = Query(default=config.CATEGORY_PRODUCTS_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
                       sort_by: ProductSortField = Query(default=ProductSortField.CREATED_AT, alias="sortBy"),
                       order: SortOrder = Query(default=SortOrder.DESC),
                       session: AsyncSession = Depends(get_session)) -> CategoryDetailDTO:
    return await CategoryService.get_detail(category_id, page, limit, sort_by, order, session)


@categories_router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(payload: CreateCategoryRequest,
                          user: UserDTO = Depends(require_admin),
                          session: AsyncSession = Depends(get_session)) -> CategoryDetailDTO:
    return await CategoryService.create(CategoryDTO.model_validate(payload.model_dump()), session)
