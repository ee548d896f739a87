from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

import config
from enums.gender import Gender
from enums.product_sort_field import ProductSortField
from enums.sort_order import SortOrder
from models.product import ProductDTO, ProductFilterDTO
from models.review import ProductDetailDTO
from models.user import UserDTO
from services.product import ProductService
from web.dependencies import get_session, gender_query, require_admin, require_seller_or_admin
from web.schemas import CreateProductRequest, UpdateProductRequest

products_router = APIRouter(prefix="/api/products", tags=["products"])


@products_router.get("")
async def get_products(page: int = Query(default=1, ge=1),
                       limit: int = Query(default=config.PRODUCTS_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
                       category: int | None = Query(default=None),
                       search: str | None = Query(default=None),
                       gender: Gender | None = Depends(gender_query),
                       brand: str | None = Query(default=None),
                       is_featured: bool | None = Query(default=None, alias="isFeatured"),
                       seller_id: int | None = Query(default=None, alias="sellerId"),
                       sort_by: ProductSortField = Query(default=ProductSortField.CREATED_AT, alias="sortBy"),
                       order: SortOrder = Query(default=SortOrder.DESC),
                       session: AsyncSession = Depends(get_session)):
    products_page = await ProductService.get_products(ProductFilterDTO(
        category_id=category,
        search=search,
        gender=gender,
        brand=brand,
        is_featured=is_featured,
        seller_id=seller_id,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit
    ), session)
    return {
        "products": products_page.products,
        "pagination": {
            "page": products_page.page,
            "limit": products_page.limit,
            "total": products_page.total,
            "pages": products_page.pages
        }
    }


@products_router.get("/{product_id}")
async def get_product(product_id: int, session: AsyncSession = Depends(get_session)) -> ProductDetailDTO:
    return await ProductService.get_product(product_id, session)


@products_router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(payload: CreateProductRequest,
                         user: UserDTO = Depends(require_seller_or_admin),
                         session: AsyncSession = Depends(get_session)) -> ProductDTO:
    product_dto = ProductDTO.model_validate(payload.model_dump())
    return await ProductService.create(product_dto, user, session)


@products_router.put("/{product_id}")
async def update_product(product_id: int,
                         payload: UpdateProductRequest,
                         user: UserDTO = Depends(require_admin),
                         session: AsyncSession = Depends(get_session)) -> ProductDTO:
    return await ProductService.update(product_id, payload.model_dump(exclude_unset=True, exclude_none=True), session)
