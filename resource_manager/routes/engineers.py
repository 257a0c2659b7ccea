from flask import Blueprint

from resource_manager.models import User, UserRole
from resource_manager.services import get_engineer_capacity
from resource_manager.utils import respond
from resource_manager.utils.decorators import token_required

engineers_bp = Blueprint('engineers', __name__)

@engineers_bp.route('/api/engineers', methods=['GET'])
@token_required
def get_engineers():
    """Get all users with the engineer role"""
    engineers = User.query.filter_by(role=UserRole.ENGINEER).order_by(User.id).all()
    return respond(200, "engineer fetched successfully", [e.to_dict() for e in engineers])

@engineers_bp.route('/api/engineers/<int:engineer_id>/capacity', methods=['GET'])
@token_required
def get_capacity(engineer_id):
    """Get an engineer's remaining capacity"""
    report = get_engineer_capacity(engineer_id)
    return respond(200, "Engineer capacity fetched successfully", report.to_dict())
