import logging

from flask import Blueprint, g, request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from resource_manager.exceptions import NotFoundError
from resource_manager.extensions import db
from resource_manager.logging_config import log_auth_event
from resource_manager.models import User
from resource_manager.services import ProfileUpdate
from resource_manager.utils import (
    respond, validate_required_fields, validate_email_format, validate_user_role
)
from resource_manager.utils.decorators import token_required
from resource_manager.utils.security import (
    create_access_token, get_password_hash, verify_password
)

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

def _normalize_email(email):
    return email.strip().lower()

def _current_user_or_404():
    user = db.session.get(User, g.current_user['id'])
    if user is None:
        raise NotFoundError("User not found")
    return user

@auth_bp.route('/api/auth/signup', methods=['POST'])
def signup():
    """Register a new engineer or manager"""
    data = request.get_json(silent=True)

    is_valid, error = validate_required_fields(data, ['name', 'email', 'password', 'role'])
    if not is_valid:
        return respond(400, error)

    for field in ('name', 'email', 'password'):
        if not isinstance(data[field], str):
            return respond(400, f"{field} must be a string")

    email = _normalize_email(data['email'])
    is_valid, error = validate_email_format(email)
    if not is_valid:
        return respond(400, error)

    is_valid, role = validate_user_role(data['role'])
    if not is_valid:
        return respond(400, role)

    # Check if user already exists
    existing = User.query.filter_by(email=email).first()
    if existing:
        log_auth_event(logger, 'signup', False, email, 'duplicate email')
        return respond(400, "User already exists, you can login")

    user = User(
        name=data['name'].strip(),
        email=email,
        password_hash=get_password_hash(data['password']),
        role=role
    )

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        log_auth_event(logger, 'signup', False, email, 'duplicate email')
        return respond(400, "User already exists, you can login")
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create user %s", email)
        return respond(500, "Internal Server Error")

    log_auth_event(logger, 'signup', True, email)
    return respond(201, "Account created successfully", user.to_summary())

@auth_bp.route('/api/auth/login', methods=['POST'])
def login():
    """Exchange email and password for a bearer token"""
    data = request.get_json(silent=True)

    is_valid, error = validate_required_fields(data, ['email', 'password'])
    if not is_valid:
        return respond(400, error)

    if not isinstance(data['email'], str) or not isinstance(data['password'], str):
        return respond(400, "email and password must be strings")

    email = _normalize_email(data['email'])
    user = User.query.filter_by(email=email).first()
    if not user:
        log_auth_event(logger, 'login', False, email, 'unknown email')
        return respond(404, "User not found")

    if not verify_password(data['password'], user.password_hash):
        log_auth_event(logger, 'login', False, email, 'incorrect password')
        return respond(401, "Incorrect password")

    token = create_access_token(user.id, user.email)
    log_auth_event(logger, 'login', True, email)
    return respond(200, "Login Successfully", {
        'token': token,
        'userId': user.id,
        'name': user.name,
        'role': user.role.value,
        'profileImage': None
    })

@auth_bp.route('/api/auth/logout', methods=['POST'])
def logout():
    """Tokens are stateless; the client simply drops its copy"""
    return respond(200, "Logout Successfully")

@auth_bp.route('/api/auth/profile', methods=['GET'])
@token_required
def get_profile():
    """Get the authenticated user's own record"""
    user = _current_user_or_404()
    return respond(200, "Profile fetched successfully", user.to_dict())

@auth_bp.route('/api/auth/profile', methods=['PUT'])
@token_required
def update_profile():
    """Apply a sparse update to the authenticated user's profile"""
    update = ProfileUpdate.from_payload(request.get_json(silent=True))
    user = _current_user_or_404()

    update.apply_to(user)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to update profile of user %s", user.id)
        return respond(500, "Internal server error")

    logger.info("Profile of user %s updated: %s", user.id, sorted(update.changes()))
    return respond(200, "Profile updated successfully", user.to_dict())
