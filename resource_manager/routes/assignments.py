import logging

from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from resource_manager.extensions import db
from resource_manager.models import Assignment, Project, User
from resource_manager.services import AssignmentUpdate
from resource_manager.utils import (
    respond, validate_required_fields, validate_allocation_percentage,
    validate_date_format, validate_date_range, validate_id
)
from resource_manager.utils.decorators import token_required

logger = logging.getLogger(__name__)

assignments_bp = Blueprint('assignments', __name__)

REQUIRED_FIELDS = ['engineerId', 'projectId', 'allocationPercentage', 'startDate', 'role']

def _check_references(engineer_id=None, project_id=None):
    """Return an error response if a referenced engineer or project is missing"""
    if engineer_id is not None and db.session.get(User, engineer_id) is None:
        return respond(404, "Engineer not found")
    if project_id is not None and db.session.get(Project, project_id) is None:
        return respond(404, "Project not found")
    return None

@assignments_bp.route('/api/assignments', methods=['GET'])
@token_required
def get_assignments():
    """Get all assignments with engineer and project expanded"""
    assignments = Assignment.query.order_by(Assignment.id).all()
    return respond(200, "Assignments fetched successfully",
                   [a.to_dict(expand=True) for a in assignments])

@assignments_bp.route('/api/assignments/<int:assignment_id>', methods=['GET'])
@token_required
def get_assignment(assignment_id):
    """Get a single assignment with engineer and project expanded"""
    assignment = db.session.get(Assignment, assignment_id)
    if assignment is None:
        return respond(404, "Assignment not found")

    return respond(200, "Assignment fetched successfully", assignment.to_dict(expand=True))

@assignments_bp.route('/api/assignments', methods=['POST'])
@token_required
def create_assignment():
    """Assign an engineer to a project"""
    data = request.get_json(silent=True)

    is_valid, _ = validate_required_fields(data, REQUIRED_FIELDS)
    if not is_valid:
        return respond(400, "All Fields are mandatory please check it out properly")

    is_valid, engineer_id = validate_id(data['engineerId'], 'engineerId')
    if not is_valid:
        return respond(400, engineer_id)

    is_valid, project_id = validate_id(data['projectId'], 'projectId')
    if not is_valid:
        return respond(400, project_id)

    is_valid, allocation = validate_allocation_percentage(data['allocationPercentage'])
    if not is_valid:
        return respond(400, allocation)

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

    if not isinstance(data['role'], str):
        return respond(400, "role must be a string")

    missing = _check_references(engineer_id, project_id)
    if missing is not None:
        return missing

    assignment = Assignment(
        engineer_id=engineer_id,
        project_id=project_id,
        allocation_percentage=allocation,
        start_date=start_date,
        end_date=end_date,
        role=data['role'].strip()
    )

    try:
        db.session.add(assignment)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create assignment for engineer %s", engineer_id)
        return respond(500, "failed to create the assignment")

    logger.info("Assignment %s created: engineer %s on project %s at %s%%",
                assignment.id, engineer_id, project_id, allocation)

    # Re-fetch so the response carries the expanded references
    created = db.session.get(Assignment, assignment.id)
    return respond(201, "assignment created successfully", created.to_dict(expand=True))

@assignments_bp.route('/api/assignments/<int:assignment_id>', methods=['PATCH'])
@token_required
def update_assignment(assignment_id):
    """Partially update an assignment"""
    assignment = db.session.get(Assignment, assignment_id)
    if assignment is None:
        return respond(404, "Assignment not found")

    update = AssignmentUpdate.from_payload(request.get_json(silent=True))
    update.check_dates(assignment)

    missing = _check_references(update.engineer_id or None, update.project_id or None)
    if missing is not None:
        return missing

    update.apply_to(assignment)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to update assignment %s", assignment_id)
        return respond(500, "failed to update the assignment")

    logger.info("Assignment %s updated: %s", assignment_id, sorted(update.changes()))
    return respond(200, "assignment updated successfully", assignment.to_dict(expand=True))

@assignments_bp.route('/api/assignments/<int:assignment_id>', methods=['DELETE'])
@token_required
def delete_assignment(assignment_id):
    """Delete an assignment"""
    assignment = db.session.get(Assignment, assignment_id)
    if assignment is None:
        return respond(404, "Assignment not found")

    try:
        db.session.delete(assignment)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete assignment %s", assignment_id)
        return respond(500, "failed to delete the assignment")

    logger.info("Assignment %s deleted", assignment_id)
    return respond(200, "Assignment deleted successfully")
