"""
HTTP client for the cart and customer endpoints.
"""
import logging
from typing import Any, Optional

import requests

from .exceptions import CartApiError, CartSyncError

logger = logging.getLogger(__name__)

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')
CSRF_COOKIE_NAME = 'csrftoken'
CSRF_HEADER_NAME = 'X-CSRFToken'


class CartApiClient:
    """
    Thin wrapper over a ``requests.Session``.

    Cookies of the session carry the server side identity (session cookie)
    and the CSRF token sent back on unsafe methods. Every call takes a
    timeout; the instance default is used when none is given.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 5.0,
    ):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    # Cart

    def get_cart(self, timeout: Optional[float] = None) -> dict:
        return self._request('GET', '/api/v1/cart/', timeout=timeout)

    def modify_cart(
        self,
        action: str,
        product_id: str,
        quantity: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> dict:
        body = {'action': action, 'product_id': product_id}
        if quantity is not None:
            body['quantity'] = quantity
        return self._request('POST', '/api/v1/cart/', json=body, timeout=timeout)

    def clear_cart(self, timeout: Optional[float] = None) -> dict:
        return self._request('DELETE', '/api/v1/cart/', timeout=timeout)

    # Customers

    def login(self, username: str, password: str, timeout: Optional[float] = None) -> dict:
        return self._request(
            'POST',
            '/api/v1/customers/login/',
            json={'username': username, 'password': password},
            timeout=timeout,
        )

    def logout(self, timeout: Optional[float] = None) -> dict:
        return self._request('POST', '/api/v1/customers/logout/', timeout=timeout)

    def me(self, timeout: Optional[float] = None) -> dict:
        return self._request('GET', '/api/v1/customers/me/', timeout=timeout)

    def reset_session(self) -> None:
        """Forget every cookie, and with them the server side identity."""
        self.session.cookies.clear()

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        headers = {'Accept': 'application/json'}
        if method not in SAFE_METHODS:
            token = self.session.cookies.get(CSRF_COOKIE_NAME)
            if token:
                headers[CSRF_HEADER_NAME] = token

        try:
            response = self.session.request(
                method,
                url,
                json=json,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.Timeout as e:
            raise CartSyncError(f"{method} {path} timed out: {e}") from e
        except requests.RequestException as e:
            raise CartSyncError(f"{method} {path} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise CartSyncError(
                f"{method} {path} returned a non JSON body (HTTP {response.status_code})"
            ) from e

        if not isinstance(payload, dict) or 'success' not in payload:
            raise CartSyncError(f"{method} {path} returned an unexpected body (HTTP {response.status_code})")

        if not payload['success']:
            error = payload.get('error') or {}
            raise CartApiError(
                code=error.get('code', 'UNKNOWN_ERROR'),
                message=error.get('message', ''),
                status=response.status_code,
            )

        logger.debug(f"{method} {path} -> {response.status_code}")
        return payload.get('data')
