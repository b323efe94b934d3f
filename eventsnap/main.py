from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from eventsnap.api.v1.routes import (
    auth as auth_router,
    users as users_router,
    themes as themes_router,
    events as events_router,
    programs as programs_router,
    contacts as contacts_router,
    uploads as uploads_router,
    guest as guest_router,
    health as health_router,
)
from eventsnap.db.session import engine, Base
from eventsnap.core.config import settings
from eventsnap.core.logging import logger
from eventsnap.core.rate_limit import setup_rate_limiting
from eventsnap.cache.redis_client import token_store
import eventsnap.db.models  # noqa: F401  registers every table on Base.metadata

app = FastAPI(title="EventSnap")

setup_rate_limiting(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth_router.router)
api_router.include_router(users_router.router)
api_router.include_router(themes_router.router)
api_router.include_router(events_router.router)
api_router.include_router(programs_router.router)
api_router.include_router(contacts_router.router)
api_router.include_router(uploads_router.router)
api_router.include_router(guest_router.router)
api_router.include_router(health_router.router)

app.include_router(api_router)

@app.on_event("startup")
async def on_startup():
    # Alembic owns the schema in deployed environments
    if settings.ENVIRONMENT == "development":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    logger.info(f"EventSnap API started ({settings.ENVIRONMENT})")

@app.on_event("shutdown")
async def on_shutdown():
    await token_store.close()
    await engine.dispose()
