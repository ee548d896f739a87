import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from enums.role import Role
from exceptions import ProductNotFoundException, CategoryNotFoundException
from models.product import ProductDTO, ProductFilterDTO, ProductPageDTO
from models.review import ProductDetailDTO
from models.user import UserDTO
from repositories.category import CategoryRepository
from repositories.product import ProductRepository


class ProductService:

    @staticmethod
    async def get_products(product_filter: ProductFilterDTO, session: AsyncSession | Session) -> ProductPageDTO:
        return await ProductRepository.search(product_filter, session)

    @staticmethod
    async def get_product(product_id: int, session: AsyncSession | Session) -> ProductDetailDTO:
        """Product with category, reviews and rating aggregates. Inactive products are still returned."""
        product = await ProductRepository.get_detail(product_id, session)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    async def create(product_dto: ProductDTO, user: UserDTO, session: AsyncSession | Session) -> ProductDTO:
        """
        Create a product owned by the calling seller.

        Sellers always own what they create; an admin may assign any seller
        (or none) through seller_id.

        Raises:
            CategoryNotFoundException: If category_id does not exist
        """
        if not await CategoryRepository.exists(product_dto.category_id, session):
            raise CategoryNotFoundException(product_dto.category_id)

        if user.role == Role.SELLER:
            product_dto.seller_id = user.id

        product_id = await ProductRepository.create(product_dto, session)
        await session_commit(session)
        logging.info(f"🛍 Product {product_id} created by user {user.id} ({user.role.value})")
        return await ProductRepository.get_by_id(product_id, session)

    @staticmethod
    async def update(product_id: int, values: dict, session: AsyncSession | Session) -> ProductDTO:
        """
        Partially update a product. Only keys present in values are written.

        Raises:
            ProductNotFoundException: If the product does not exist
            CategoryNotFoundException: If values moves it to an unknown category
        """
        if await ProductRepository.get_by_id(product_id, session) is None:
            raise ProductNotFoundException(product_id)
        if values.get('category_id') is not None and not await CategoryRepository.exists(values['category_id'], session):
            raise CategoryNotFoundException(values['category_id'])

        if values:
            await ProductRepository.update(product_id, values, session)
            await session_commit(session)
            logging.info(f"Product {product_id} updated: {', '.join(sorted(values.keys()))}")
        return await ProductRepository.get_by_id(product_id, session)
