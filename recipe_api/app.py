import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import ingredients, recipes
from .config import Settings, redact_url
from .db import Store
from .errors import register_error_handlers
from .reset import reset_to_base_seed

logger = logging.getLogger(__name__)


def create_app(store: Store | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the API around an explicit store.

    Without a store one is opened from settings at startup and disposed at
    shutdown. A store passed in belongs to the caller.
    """
    settings = settings or Settings.from_env()
    owns_store = store is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_store:
            app.state.store = Store(settings.store_url)
        logger.info(
            "Recipe App starting (env=%s, database=%s)",
            settings.env, redact_url(app.state.store.url),
        )
        app.state.store.create_all()
        if settings.seed_at_bootstrap:
            reset_to_base_seed(app.state.store)
        yield
        if owns_store:
            app.state.store.dispose()
            logger.info("Database connection closed")

    app = FastAPI(title="Recipe API", lifespan=lifespan)
    if store is not None:
        app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/")
    def read_root() -> dict:
        return {"message": "Recipe App API is running"}

    app.include_router(ingredients.router)
    app.include_router(recipes.router)
    return app
