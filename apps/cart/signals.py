"""
Auth signal receivers that drive cart identity transitions.
"""
import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import receiver

from .infrastructure.factories import build_identity_transition_handler, cart_session_key

logger = logging.getLogger(__name__)


@receiver(user_logged_in, dispatch_uid='cart_transition_on_login')
def transition_cart_on_login(sender, request, user, **kwargs):
    """
    Django keeps session data across the key rotation done by login(), so the
    anonymous cart id is still readable here. It is dropped afterwards: the
    caller is now identified by the customer id.
    """
    if request is None or not hasattr(request, 'session'):
        return
    anonymous_session_id = request.session.pop(cart_session_key(), None)
    try:
        build_identity_transition_handler().on_login(str(user.pk), anonymous_session_id)
    except Exception as e:
        # A cart problem must not block the login itself.
        logger.error(f"Cart transition failed at login of customer {user.pk}: {e}", exc_info=True)


@receiver(user_logged_out, dispatch_uid='cart_transition_on_logout')
def transition_cart_on_logout(sender, request, user, **kwargs):
    # The session flush that follows drops the anonymous id; the stored
    # customer cart stays for the next login.
    if user is not None:
        logger.info(f"Customer {user.pk} logged out; cart kept for the next login")
