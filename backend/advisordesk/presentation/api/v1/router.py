"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from advisordesk.presentation.api.v1.endpoints.health import router as health_router
from advisordesk.presentation.api.v1.endpoints.auth import router as auth_router
from advisordesk.presentation.api.v1.endpoints.users import router as users_router
from advisordesk.presentation.api.v1.endpoints.clients import router as clients_router
from advisordesk.presentation.api.v1.endpoints.recommendations import (
    router as recommendations_router,
)
from advisordesk.presentation.api.v1.endpoints.subscriptions import (
    router as subscriptions_router,
)
from advisordesk.presentation.api.v1.endpoints.access_requests import (
    router as access_requests_router,
)
from advisordesk.presentation.api.v1.endpoints.notifications import (
    router as notifications_router,
)

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(clients_router)
router.include_router(recommendations_router)
router.include_router(subscriptions_router)
router.include_router(access_requests_router)
router.include_router(notifications_router)
