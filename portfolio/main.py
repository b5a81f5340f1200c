import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.core.config import settings
from portfolio.core.logging import configure_logging
from portfolio.core.exceptions import register_exception_handlers
from portfolio.core.database import init_db, dispose_engine
from portfolio.middleware import AdminGuardMiddleware, CorrelationIdMiddleware

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

# Middleware: last added runs first
app.add_middleware(AdminGuardMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(CorrelationIdMiddleware)

# Route imports
from portfolio.api.health import router as health_router
from portfolio.api import auth as auth_router
from portfolio.api import admin as admin_router
from portfolio.api import projects as projects_router
from portfolio.api import blog as blog_router
from portfolio.api import gallery as gallery_router
from portfolio.api import contact as contact_router

# Register routers
app.include_router(health_router, prefix="/api")
app.include_router(auth_router.router, prefix="/api")
app.include_router(projects_router.router, prefix="/api")
app.include_router(blog_router.router, prefix="/api")
app.include_router(gallery_router.router, prefix="/api")
app.include_router(contact_router.router, prefix="/api")
app.include_router(admin_router.router, prefix=settings.ADMIN_PREFIX)


# Exception handlers
register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    logger.info("Starting app", extra={"app": settings.APP_NAME})

    if settings.MIGRATE_ON_START:
        logger.info("MIGRATE_ON_START enabled: creating tables")
        await init_db()


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("Shutting down")
    await dispose_engine()
