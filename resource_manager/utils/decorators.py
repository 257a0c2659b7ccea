import logging
from functools import wraps

from flask import g, request

from resource_manager.exceptions import AuthenticationError
from resource_manager.utils.security import decode_token

logger = logging.getLogger(__name__)


def get_bearer_token():
    auth_header = request.headers.get('Authorization', '')
    if auth_header.startswith('Bearer '):
        return auth_header[len('Bearer '):].strip() or None
    return None


def token_required(fn):
    """Reject the request with 401 unless it carries a valid bearer token.

    The decoded claim is exposed to the view as ``g.current_user``.
    """
    @wraps(fn)
    def decorated(*args, **kwargs):
        token = get_bearer_token()
        if token is None:
            logger.warning("Rejected %s %s: no bearer token", request.method, request.path)
            raise AuthenticationError("Authentication required please provide a token")

        try:
            payload = decode_token(token)
        except AuthenticationError:
            logger.warning("Rejected %s %s: invalid or expired token", request.method, request.path)
            raise

        g.current_user = {'id': payload['id'], 'email': payload['email']}
        return fn(*args, **kwargs)
    return decorated
