from .session import Session
from .api import ApiClientError, PermissionDenied, ResourceClient, SessionExpired

__all__ = ['Session', 'ResourceClient', 'ApiClientError', 'SessionExpired', 'PermissionDenied']
