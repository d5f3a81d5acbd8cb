from fastapi import APIRouter

from app.api.v1.routers import payments as payments_router
from app.api.v1.routers import pages as pages_router

router = APIRouter()

# payment routes, paths match what the storefront checkout calls
router.include_router(payments_router.router)

# static shell pages
router.include_router(pages_router.router)
