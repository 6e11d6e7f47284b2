from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salon_dashboard.config import get_settings
from salon_dashboard.dependencies.services import get_backend_client_cached

from salon_dashboard.health import router as health_router
from salon_dashboard.report_view import router as report_view_router
from salon_dashboard.routes.appointment import router as appointment_router
from salon_dashboard.routes.auth import router as auth_router
from salon_dashboard.routes.catalog import router as catalog_router
from salon_dashboard.routes.reports import router as reports_router
from salon_dashboard.routes.shop_config import router as shop_config_router


def configure_logging() -> None:
    """Ensure application logs use the INFO level by default."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    else:
        root_logger.setLevel(logging.INFO)

# Configure logging as soon as the module is loaded
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    settings_snapshot = settings.model_dump(
        exclude={"jwt_secret", "admin_password"},
    )
    logger.info("Application settings on startup: %s", settings_snapshot)

    client = get_backend_client_cached()
    logger.info(
        "Serving data from %s",
        "the in-memory store" if client.use_local_store else settings.backend_base_url,
    )

    try:
        yield
    finally:
        logger.info("Closing salon backend client.")
        await client.close()
        get_backend_client_cached.cache_clear()
        logger.info("Application shutdown complete.")


settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan,
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, tags=["auth"])
app.include_router(shop_config_router, prefix="/config", tags=["config"])
app.include_router(appointment_router, prefix="/agendamentos", tags=["agendamentos"])
app.include_router(catalog_router, prefix="/servicos", tags=["servicos"])
app.include_router(reports_router, tags=["relatorios"])
app.include_router(report_view_router, tags=["relatorios"])
app.include_router(health_router)
