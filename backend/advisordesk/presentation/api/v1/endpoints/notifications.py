"""Fire-and-forget notification broadcast."""

from fastapi import APIRouter, Depends

from advisordesk.application.schemas.notification import NotificationAck, NotificationCreate
from advisordesk.application.services import NotificationService
from advisordesk.infrastructure.dependencies import get_notification_service

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.post("", response_model=NotificationAck)
async def broadcast(
    data: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationAck:
    """Always succeeds; delivery problems are only logged."""
    await service.publish(data.event, data.payload, data.recipient_ids)
    return NotificationAck()
