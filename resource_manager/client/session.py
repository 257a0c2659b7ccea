"""
Client-side session.

Holds the identity returned by login and decides, from the token itself,
whether the caller is still signed in. Nothing is read from ambient global
state; callers pass a ``Session`` to the client explicitly.
"""

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Union

from jose import JWTError, jwt

logger = logging.getLogger(__name__)


@dataclass
class Session:
    token: Optional[str] = None
    user_id: Optional[int] = None
    name: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_login(cls, data: dict) -> 'Session':
        """Build a session from the ``data`` of a login response"""
        return cls(
            token=data.get('token'),
            user_id=data.get('userId'),
            name=data.get('name'),
            role=data.get('role'),
        )

    def expires_at(self) -> Optional[float]:
        """The token's ``exp`` claim, read without verifying the signature"""
        if not self.token:
            return None
        try:
            claims = jwt.get_unverified_claims(self.token)
        except JWTError:
            return None
        exp = claims.get('exp')
        return float(exp) if exp is not None else None

    def is_authenticated(self, now: Optional[float] = None) -> bool:
        expires_at = self.expires_at()
        if expires_at is None:
            return False
        return expires_at > (time.time() if now is None else now)

    @property
    def is_manager(self) -> bool:
        return self.role == 'manager'

    def invalidate(self) -> None:
        self.token = None
        self.user_id = None
        self.name = None
        self.role = None

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self)), encoding='utf-8')

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Session':
        """Load a saved session; a missing or corrupt file gives an empty one"""
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except ValueError:
            data = None
        if not isinstance(data, dict):
            logger.warning("Ignoring unreadable session file %s", path)
            return cls()
        return cls(**{key: data.get(key) for key in ('token', 'user_id', 'name', 'role')})
