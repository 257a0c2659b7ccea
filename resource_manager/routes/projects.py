import logging

from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from resource_manager.extensions import db
from resource_manager.models import Project, User
from resource_manager.utils import (
    respond, validate_required_fields, validate_date_format, validate_date_range,
    validate_id, validate_string_list, validate_positive_int, validate_project_status
)
from resource_manager.utils.decorators import token_required

logger = logging.getLogger(__name__)

projects_bp = Blueprint('projects', __name__)

@projects_bp.route('/api/projects', methods=['POST'])
@token_required
def create_project():
    """Create a new project"""
    data = request.get_json(silent=True)

    is_valid, _ = validate_required_fields(data, ['name', 'startDate', 'managerId'])
    if not is_valid:
        return respond(400, "Project name, start date & managerId are required")

    if not isinstance(data['name'], str):
        return respond(400, "name must be a string")

    is_valid, start_date = validate_date_format(data['startDate'])
    if not is_valid:
        return respond(400, start_date)

    end_date = None
    if data.get('endDate') is not None:
        is_valid, end_date = validate_date_format(data['endDate'])
        if not is_valid:
            return respond(400, end_date)

    is_valid, error = validate_date_range(start_date, end_date)
    if not is_valid:
        return respond(400, error)

    is_valid, manager_id = validate_id(data['managerId'], 'managerId')
    if not is_valid:
        return respond(400, manager_id)

    manager = db.session.get(User, manager_id)
    if manager is None or not manager.is_manager:
        return respond(400, "managerId must reference an existing manager")

    project = Project(
        name=data['name'].strip(),
        start_date=start_date,
        end_date=end_date,
        manager_id=manager_id
    )

    description = data.get('description')
    if description is not None:
        if not isinstance(description, str):
            return respond(400, "description must be a string")
        project.description = description

    if data.get('requiredSkills') is not None:
        is_valid, skills = validate_string_list(data['requiredSkills'], 'requiredSkills')
        if not is_valid:
            return respond(400, skills)
        project.required_skills = skills

    if data.get('teamSize') is not None:
        is_valid, team_size = validate_positive_int(data['teamSize'], 'teamSize')
        if not is_valid:
            return respond(400, team_size)
        project.team_size = team_size

    if data.get('status') is not None:
        is_valid, status = validate_project_status(data['status'])
        if not is_valid:
            return respond(400, status)
        project.status = status

    try:
        db.session.add(project)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create project %r", data['name'])
        return respond(500, "internal server error")

    logger.info("Project %s created by manager %s", project.id, manager_id)
    return respond(201, "Project created successfully", project.to_dict())

@projects_bp.route('/api/projects', methods=['GET'])
@token_required
def get_projects():
    """Get all projects"""
    projects = Project.query.order_by(Project.id).all()
    if not projects:
        return respond(404, "No projects found")

    return respond(200, "Projects fetched successfully", [p.to_dict() for p in projects])

@projects_bp.route('/api/projects/<int:project_id>', methods=['GET'])
@token_required
def get_project(project_id):
    """Get a single project"""
    project = db.session.get(Project, project_id)
    if project is None:
        return respond(404, "Project not found")

    return respond(200, "Project fetched successfully", project.to_dict())
