"""
FastAPI app assembly: logging, middleware, error mapping and router wiring.
"""
import logging
import os
from fastapi import FastAPI, Depends
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


from ucsb_records.db.database import get_db
from ucsb_records.db import schemas
from ucsb_records.errors import EntityNotFoundError
from ucsb_records.api.help_requests import router as help_requests_router
from ucsb_records.api.recommendation_requests import router as recommendation_requests_router
from ucsb_records.api.menu_item_reviews import router as menu_item_reviews_router
from ucsb_records.api.articles import router as articles_router
from ucsb_records.api.dining_commons import router as dining_commons_router
from ucsb_records.api.organizations import router as organizations_router
from ucsb_records.api.users import router as users_router
from ucsb_records.api.support import router as support_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="UCSB Records Service",
    description="API for help requests, recommendation requests, menu item reviews, articles, dining commons menu items and student organizations.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8080",
]


def _cors_origins():
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [entry.strip() for entry in raw.split(",") if entry.strip()]
    return origins or DEFAULT_ORIGINS


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    logger.info("entity_not_found: path=%s message=%s", request.url.path, exc.message)
    return JSONResponse(
        schemas.ErrorResponse(type=exc.type_name, message=exc.message).model_dump(),
        status_code=404,
    )


app.include_router(users_router)
app.include_router(support_router)
app.include_router(help_requests_router)
app.include_router(recommendation_requests_router)
app.include_router(menu_item_reviews_router)
app.include_router(articles_router)
app.include_router(dining_commons_router)
app.include_router(organizations_router)


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ok"}
