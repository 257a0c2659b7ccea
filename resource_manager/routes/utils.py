from flask import Blueprint
from resource_manager.models import UserRole, Seniority, ProjectStatus
from resource_manager.utils import respond

utils_bp = Blueprint('utils', __name__)

@utils_bp.route('/api/enums', methods=['GET'])
def get_enums():
    """Get all available enum values for frontend"""
    return respond(200, "Enums fetched successfully", {
        'user_roles': [e.value for e in UserRole],
        'seniorities': [e.value for e in Seniority],
        'project_statuses': [e.value for e in ProjectStatus]
    })
