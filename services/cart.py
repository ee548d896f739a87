import logging
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from exceptions import ProductNotFoundException, CartItemNotFoundException, InsufficientStockException
from models.cartItem import CartItemDTO, CartSummaryDTO
from repositories.cartItem import CartItemRepository
from repositories.product import ProductRepository

CENT = Decimal("0.01")


def calculate_total(cart_items: list[CartItemDTO]) -> Decimal:
    total = sum((item.product.price * item.quantity for item in cart_items), Decimal("0"))
    return total.quantize(CENT)


class CartService:

    @staticmethod
    async def get_cart(user_id: int, session: AsyncSession | Session) -> CartSummaryDTO:
        cart_items = await CartItemRepository.get_by_user_id(user_id, session)
        return CartSummaryDTO(
            items=cart_items,
            total=calculate_total(cart_items),
            item_count=sum(item.quantity for item in cart_items)
        )

    @staticmethod
    async def add_to_cart(user_id: int, product_id: int, quantity: int,
                          session: AsyncSession | Session) -> CartItemDTO:
        """
        Add a product to the cart, merging into an existing line for the same product.

        Stock is checked against the requested quantity only, not against the
        merged line total; the definitive check happens at checkout.

        Raises:
            ProductNotFoundException: If the product does not exist
            InsufficientStockException: If stock < quantity
        """
        product = await ProductRepository.get_by_id(product_id, session)
        if product is None:
            raise ProductNotFoundException(product_id)
        if product.stock < quantity:
            raise InsufficientStockException(product_id, None, quantity, product.stock)

        cart_item = await CartItemRepository.get_by_user_and_product(user_id, product_id, session)
        if cart_item is not None:
            await CartItemRepository.update_quantity(cart_item.id, cart_item.quantity + quantity, session)
            cart_item_id = cart_item.id
        else:
            cart_item_id = await CartItemRepository.create(
                CartItemDTO(user_id=user_id, product_id=product_id, quantity=quantity), session
            )
        await session_commit(session)
        logging.debug(f"Cart of user {user_id}: +{quantity} x product {product_id}")
        return await CartItemRepository.get_by_id(cart_item_id, user_id, session)

    @staticmethod
    async def update_quantity(user_id: int, cart_item_id: int, quantity: int,
                              session: AsyncSession | Session) -> CartItemDTO:
        # No stock check here, checkout re-validates
        cart_item = await CartItemRepository.get_by_id(cart_item_id, user_id, session)
        if cart_item is None:
            raise CartItemNotFoundException(cart_item_id)
        await CartItemRepository.update_quantity(cart_item_id, quantity, session)
        await session_commit(session)
        return await CartItemRepository.get_by_id(cart_item_id, user_id, session)

    @staticmethod
    async def remove(user_id: int, cart_item_id: int, session: AsyncSession | Session) -> None:
        deleted = await CartItemRepository.delete(cart_item_id, user_id, session)
        if deleted == 0:
            raise CartItemNotFoundException(cart_item_id)
        await session_commit(session)
