"""
Cart identity resolution from an HTTP request.
"""
from uuid import uuid4

from ..domain.value_objects.cart_identity import CartIdentity
from ..infrastructure.factories import cart_session_key


def resolve_cart_identity(request, issue_anonymous: bool = False) -> CartIdentity:
    """
    Customer id for an authenticated caller, otherwise the anonymous id kept
    in the session. With issue_anonymous a fresh anonymous id is stored when
    the session has none.
    """
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return CartIdentity.for_customer(str(user.pk))

    session = getattr(request, 'session', None)
    if session is None:
        return CartIdentity()

    session_id = session.get(cart_session_key())
    if not session_id and issue_anonymous:
        session_id = uuid4().hex
        session[cart_session_key()] = session_id
    return CartIdentity.resolve(session_id=session_id)
