from fastapi import APIRouter

from .analytics import analytics_router
from .health import health_router
from .transactions import transaction_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(transaction_router, tags=["Transactions"])
router.include_router(analytics_router, tags=["Analytics"])
