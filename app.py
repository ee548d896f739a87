import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from db import create_db_and_tables, engine
from middleware.body_limit import BodySizeLimitMiddleware
from middleware.security_headers import SecurityHeadersMiddleware
from web.auth import auth_router
from web.cart import cart_router
from web.categories import categories_router
from web.error_handlers import register_exception_handlers
from web.orders import orders_router
from web.products import products_router
from web.users import users_router
from web.wishlist import wishlist_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_db_and_tables()
    logging.info(f"🚀 E-commerce API started ({config.RUNTIME_ENVIRONMENT.value})")
    yield
    await engine.dispose()
    logging.info("E-commerce API stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="E-commerce API", lifespan=lifespan)

    # Last added runs first: CORS wraps everything, then the body limit
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=config.MAX_BODY_SIZE_BYTES)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials="*" not in config.CORS_ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for router in (auth_router, users_router, products_router, categories_router,
                   orders_router, cart_router, wishlist_router):
        app.include_router(router)

    @app.get("/api/health", tags=["health"])
    async def health():
        return {"status": "OK", "message": "E-commerce API is running!"}

    return app


app = create_app()
