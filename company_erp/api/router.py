"""
API router aggregating every endpoint group.
"""
from fastapi import APIRouter

from company_erp.api.routes import auth, health, leaves, subscriptions

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(auth.router)
router.include_router(leaves.router)
router.include_router(subscriptions.router)
router.include_router(health.router)
