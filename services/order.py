import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from exceptions import EmptyCartException, InsufficientStockException, OrderNotFoundException
from models.order import OrderDTO
from models.orderItem import OrderItemDTO
from repositories.cartItem import CartItemRepository
from repositories.order import OrderRepository
from repositories.orderItem import OrderItemRepository
from repositories.product import ProductRepository
from services.cart import calculate_total
from utils.transaction_manager import TransactionManager


class OrderService:

    @staticmethod
    async def create_order(user_id: int, session: AsyncSession | Session) -> OrderDTO:
        """
        Convert the user's cart into an order.

        Every line is checked against current stock before anything is written.
        Then, in one transaction: the order and its items are inserted with the
        unit price of the moment, stock is decremented and the cart is emptied.

        Args:
            user_id: Buyer
            session: Database session

        Returns:
            The new PENDING order with items and products

        Raises:
            EmptyCartException: If the cart has no lines
            InsufficientStockException: First line whose quantity exceeds stock;
                nothing is written in that case
        """
        cart_items = await CartItemRepository.get_by_user_id(user_id, session)
        if len(cart_items) == 0:
            raise EmptyCartException(user_id)

        for cart_item in cart_items:
            if cart_item.product.stock < cart_item.quantity:
                logging.warning(f"Checkout of user {user_id} rejected: product {cart_item.product_id} "
                                f"has {cart_item.product.stock}, requested {cart_item.quantity}")
                raise InsufficientStockException(
                    cart_item.product_id, cart_item.product.name, cart_item.quantity, cart_item.product.stock
                )

        total = calculate_total(cart_items)

        # The stock check above runs outside the transaction and no row is locked:
        # two concurrent checkouts can both pass it and drive stock negative.
        async with TransactionManager.atomic_transaction(session):
            order_id = await OrderRepository.create(user_id, total, session)
            await OrderItemRepository.create_many(order_id, [
                OrderItemDTO(product_id=cart_item.product_id,
                             quantity=cart_item.quantity,
                             price=cart_item.product.price)
                for cart_item in cart_items
            ], session)
            for cart_item in cart_items:
                await ProductRepository.decrement_stock(cart_item.product_id, cart_item.quantity, session)
            await CartItemRepository.delete_by_user_id(user_id, session)

        # Drop identities loaded before the bulk updates so the re-read sees new stock
        session.expunge_all()
        logging.info(f"📦 Order {order_id} created for user {user_id}: {len(cart_items)} item(s), total {total}")
        return await OrderRepository.get_by_id(order_id, user_id, session)

    @staticmethod
    async def list_orders(user_id: int, session: AsyncSession | Session) -> list[OrderDTO]:
        return await OrderRepository.get_by_user_id(user_id, session)

    @staticmethod
    async def get_order(order_id: int, user_id: int, session: AsyncSession | Session) -> OrderDTO:
        # Orders of other users are reported as missing
        order = await OrderRepository.get_by_id(order_id, user_id, session)
        if order is None:
            raise OrderNotFoundException(order_id)
        return order
