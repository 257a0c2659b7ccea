from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from flask import current_app
from jose import JWTError, jwt

from resource_manager.exceptions import AuthenticationError
from resource_manager.extensions import bcrypt


def get_password_hash(password: str) -> str:
    """Salted bcrypt hash, rounds from BCRYPT_LOG_ROUNDS"""
    return bcrypt.generate_password_hash(password).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.check_password_hash(hashed_password, plain_password)


def create_access_token(user_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a ``{id, email}`` claim that expires after JWT_EXPIRATION_HOURS"""
    if expires_delta is None:
        expires_delta = timedelta(hours=current_app.config['JWT_EXPIRATION_HOURS'])

    to_encode = {
        'id': user_id,
        'email': email,
        'exp': datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(
        to_encode,
        current_app.config['JWT_SECRET_KEY'],
        algorithm=current_app.config['JWT_ALGORITHM'],
    )


def decode_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry and return the claim"""
    try:
        payload = jwt.decode(
            token,
            current_app.config['JWT_SECRET_KEY'],
            algorithms=[current_app.config['JWT_ALGORITHM']],
        )
    except JWTError:
        raise AuthenticationError("Invalid or expired token, please try again")

    if 'id' not in payload or 'email' not in payload:
        raise AuthenticationError("Invalid or expired token, please try again")

    return payload
