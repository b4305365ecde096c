import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, settings as default_settings
from core.errors import register_exception_handlers
from core.log_config import configure_logging
from services.contact_store import ContactStore, build_contact_store
from services.github_service import GitHubService

from api import contact, github

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 App starting up...")
    app.state.contact_store.init_schema()
    yield
    logger.info("🛑 App shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    contact_store: Optional[ContactStore] = None,
    github_service: Optional[GitHubService] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(lifespan=lifespan, title=settings.APP_NAME)
    app.state.settings = settings
    app.state.contact_store = contact_store or build_contact_store(settings)
    app.state.github_service = github_service or GitHubService(settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    # Routers
    app.include_router(contact.router)
    app.include_router(github.router)

    @app.get("/")
    def read_root():
        return {"message": "Backend running!"}

    return app


app = create_app()
