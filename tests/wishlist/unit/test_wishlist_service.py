"""
Unit Tests: WishlistService

Tests for services/wishlist.py covering:
- add() - product existence, duplicate rejection
- remove() - by (user, product), missing items
- get_wishlist() - newest first
"""

import pytest

from exceptions import ProductNotFoundException, WishlistItemAlreadyExistsException, WishlistItemNotFoundException
from services.wishlist import WishlistService


class TestWishlistService:

    @pytest.mark.asyncio
    async def test_add(self, session, make_user, make_product):
        user_id = make_user().id
        product_id = make_product(name="Clog").id

        item = await WishlistService.add(user_id, product_id, session)

        assert item.product_id == product_id
        assert item.product.name == "Clog"

    @pytest.mark.asyncio
    async def test_duplicate_add_leaves_wishlist_unchanged(self, session, make_user, make_product):
        user_id = make_user().id
        product_id = make_product().id
        await WishlistService.add(user_id, product_id, session)

        with pytest.raises(WishlistItemAlreadyExistsException) as exc_info:
            await WishlistService.add(user_id, product_id, session)

        assert exc_info.value.message == "Product already in wishlist"
        assert len(await WishlistService.get_wishlist(user_id, session)) == 1

    @pytest.mark.asyncio
    async def test_add_unknown_product(self, session, make_user):
        with pytest.raises(ProductNotFoundException):
            await WishlistService.add(make_user().id, 12345, session)

    @pytest.mark.asyncio
    async def test_remove(self, session, make_user, make_product):
        user_id = make_user().id
        product_id = make_product().id
        await WishlistService.add(user_id, product_id, session)

        await WishlistService.remove(user_id, product_id, session)

        assert await WishlistService.get_wishlist(user_id, session) == []

    @pytest.mark.asyncio
    async def test_remove_missing(self, session, make_user, make_product):
        with pytest.raises(WishlistItemNotFoundException):
            await WishlistService.remove(make_user().id, make_product().id, session)

    @pytest.mark.asyncio
    async def test_list_is_scoped_and_newest_first(self, session, make_user, make_product):
        user_id = make_user(email="a@example.com").id
        other_id = make_user(email="b@example.com").id
        older_id = make_product(name="Older").id
        newer_id = make_product(name="Newer").id
        await WishlistService.add(user_id, older_id, session)
        await WishlistService.add(user_id, newer_id, session)
        await WishlistService.add(other_id, older_id, session)

        items = await WishlistService.get_wishlist(user_id, session)

        assert [item.product_id for item in items] == [newer_id, older_id]
