import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.helpers.exception_handler import setup_exception_handlers

from . import models  # noqa: F401 registers every table on Base
from .router.catalog import (
    category_router, manufacturer_router, presentation_router, product_router)
from .router.locations import branch_router, city_router, country_router, state_router
from .router.marketing import coupon_router, promo_router
from .router.users import auth_router, email_template_router, user_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s]: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pharmacy Service API")

# Create all tables
Base.metadata.create_all(bind=engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(auth_router.router)
app.include_router(user_router.router)
app.include_router(email_template_router.router)
app.include_router(country_router.router)
app.include_router(state_router.router)
app.include_router(city_router.router)
app.include_router(branch_router.router)
app.include_router(category_router.router)
app.include_router(manufacturer_router.router)
app.include_router(presentation_router.router)
app.include_router(product_router.router)
app.include_router(coupon_router.router)
app.include_router(promo_router.router)


@app.get("/health")
def health():
    return {"status": "healthy"}
