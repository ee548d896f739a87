"""
Integration Tests: accounts and catalog over HTTP

Covers /api/auth, /api/users, /api/products and /api/categories, including
role guards and request validation.
"""

from enums.gender import Gender
from enums.role import Role


class TestAuthApi:

    def test_register_and_me(self, client):
        response = client.post("/api/auth/register",
                               json={"email": "jane@example.com", "password": "secret123", "name": "Jane"})

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "jane@example.com"
        assert body["user"]["role"] == "USER"
        assert "passwordHash" not in body["user"]

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.json()["id"] == body["user"]["id"]

    def test_register_duplicate(self, client, make_user):
        make_user(email="jane@example.com")

        response = client.post("/api/auth/register", json={"email": "jane@example.com", "password": "secret123"})

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    def test_register_validation(self, client):
        response = client.post("/api/auth/register", json={"email": "not-an-email", "password": "123"})

        assert response.status_code == 400
        paths = {error["path"] for error in response.json()["errors"]}
        assert paths == {"email", "password"}

    def test_login(self, client, make_user):
        make_user(email="jane@example.com", password="secret123")

        ok = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "secret123"})
        bad = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "nope"})

        assert ok.status_code == 200
        assert ok.json()["token"]
        assert bad.status_code == 400
        assert bad.json() == {"error": "Invalid credentials"}


class TestUsersApi:

    def test_profile(self, client, make_user, auth_headers):
        user = make_user(name="Jane")

        response = client.get("/api/users/profile", headers=auth_headers(user))

        assert response.status_code == 200
        assert response.json()["name"] == "Jane"
        assert "createdAt" in response.json()

    def test_become_seller(self, client, make_user, auth_headers):
        headers = auth_headers(make_user())

        response = client.post("/api/users/become-seller", headers=headers)
        again = client.post("/api/users/become-seller", headers=headers)

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "SELLER"
        assert again.status_code == 400
        assert again.json() == {"error": "User is already a seller"}


class TestProductsApi:

    def test_list_shape_and_pagination(self, client, make_product):
        for index in range(3):
            make_product(name=f"P{index}")

        response = client.get("/api/products", params={"limit": 2, "sortBy": "name", "order": "asc"})

        assert response.status_code == 200
        body = response.json()
        assert [product["name"] for product in body["products"]] == ["P0", "P1"]
        assert body["pagination"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}
        assert body["products"][0]["reviewCount"] == 0
        assert body["products"][0]["averageRating"] is None

    def test_list_filters(self, client, make_product):
        make_product(name="Featured", gender=Gender.WOMEN, is_featured=True)
        make_product(name="Plain", gender=Gender.WOMEN)

        response = client.get("/api/products", params={"gender": "women", "isFeatured": "true"})

        assert [product["name"] for product in response.json()["products"]] == ["Featured"]

    def test_invalid_query(self, client):
        assert client.get("/api/products", params={"limit": 101}).status_code == 400
        assert client.get("/api/products", params={"sortBy": "password"}).status_code == 400
        assert client.get("/api/products", params={"gender": "ALIENS"}).status_code == 400

    def test_detail_missing(self, client):
        response = client.get("/api/products/12345")

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_create_as_seller(self, client, make_user, make_category, auth_headers):
        seller = make_user(email="seller@example.com", role=Role.SELLER)
        seller_id = seller.id
        category_id = make_category().id

        response = client.post("/api/products", headers=auth_headers(seller), json={
            "name": "Derby", "price": "25", "stock": 3, "categoryId": category_id, "gender": "men"
        })

        assert response.status_code == 201
        product = response.json()
        assert product["price"] == "25.00"
        assert product["sellerId"] == seller_id
        assert product["gender"] == "MEN"
        assert product["category"]["id"] == category_id

    def test_create_as_user_is_forbidden(self, client, make_user, make_category, auth_headers):
        response = client.post("/api/products", headers=auth_headers(make_user()), json={
            "name": "Derby", "price": "25", "stock": 3, "categoryId": make_category().id
        })

        assert response.status_code == 403
        assert response.json() == {"error": "Access denied. Admin or Seller only."}

    def test_create_validation(self, client, make_user, auth_headers):
        response = client.post("/api/products", headers=auth_headers(make_user(role=Role.ADMIN)), json={
            "name": "", "price": "0", "stock": -1
        })

        assert response.status_code == 400
        paths = {error["path"] for error in response.json()["errors"]}
        assert {"name", "price", "stock", "categoryId"} <= paths

    def test_update_requires_admin(self, client, make_user, make_product, auth_headers):
        product_id = make_product(name="Original", price="10.00").id
        seller = make_user(email="seller@example.com", role=Role.SELLER)

        response = client.put(f"/api/products/{product_id}", headers=auth_headers(seller),
                              json={"name": "Hijacked", "price": "1.00"})

        assert response.status_code == 403
        assert response.json() == {"error": "Access denied. Admin only."}
        product = client.get(f"/api/products/{product_id}").json()
        assert product["name"] == "Original"
        assert product["price"] == "10.00"

    def test_update_as_admin(self, client, make_user, make_product, auth_headers):
        product_id = make_product(name="Original", stock=1).id
        admin = make_user(email="admin@example.com", role=Role.ADMIN)

        response = client.put(f"/api/products/{product_id}", headers=auth_headers(admin),
                              json={"stock": 50, "isFeatured": True})

        assert response.status_code == 200
        assert response.json()["stock"] == 50
        assert response.json()["isFeatured"] is True
        assert response.json()["name"] == "Original"


class TestCategoriesApi:

    def test_tree(self, client, make_category):
        root_id = make_category(name="Kids", gender=Gender.KIDS).id
        make_category(name="Toddler", parent_id=root_id)

        response = client.get("/api/categories", params={"gender": "kids"})

        assert response.status_code == 200
        tree = response.json()
        assert [node["name"] for node in tree] == ["Kids"]
        assert tree[0]["children"][0]["name"] == "Toddler"
        assert tree[0]["productCount"] == 0

    def test_detail(self, client, make_category, make_product):
        category_id = make_category(name="Boots").id
        make_product(name="Chelsea", category_id=category_id)

        response = client.get(f"/api/categories/{category_id}")

        assert response.status_code == 200
        assert response.json()["productCount"] == 1
        assert [product["name"] for product in response.json()["products"]] == ["Chelsea"]

    def test_create_requires_admin(self, client, make_user, auth_headers):
        response = client.post("/api/categories", headers=auth_headers(make_user()),
                               json={"name": "Bags", "slug": "bags"})

        assert response.status_code == 403
        assert response.json() == {"error": "Access denied. Admin only."}

    def test_create(self, client, make_user, auth_headers):
        headers = auth_headers(make_user(role=Role.ADMIN))

        created = client.post("/api/categories", headers=headers, json={"name": "Bags", "slug": "bags", "gender": "WOMEN"})
        duplicate = client.post("/api/categories", headers=headers, json={"name": "Bags", "slug": "bags-2"})
        orphan = client.post("/api/categories", headers=headers, json={"name": "Totes", "slug": "totes", "parentId": 999})

        assert created.status_code == 201
        assert created.json()["slug"] == "bags"
        assert created.json()["parent"] is None
        assert duplicate.status_code == 400
        assert orphan.status_code == 404
