"""First-run provisioning of the records the system cannot work without."""

import logging

from advisordesk.application.services.identity_service import IdentityService
from advisordesk.application.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)


async def seed_defaults(
    identity: IdentityService,
    subscriptions: SubscriptionService,
    *,
    admin_name: str,
    admin_email: str,
    admin_password: str,
) -> None:
    """Ensure the main admin and the default subscription exist.

    Idempotent — safe to call on every startup.
    """
    await identity.ensure_main_admin(admin_name, admin_email, admin_password)
    await subscriptions.ensure_default()
    logger.debug("Default records present")
