import re
from datetime import datetime
from resource_manager.models import UserRole, Seniority, ProjectStatus

def validate_required_fields(data, required_fields):
    """Validate that required fields are present in data.

    ``0`` and ``False`` count as supplied; ``None`` and blank strings do not.
    """
    if not data or not isinstance(data, dict):
        return False, "No data provided"

    for field in required_fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            return False, f"{field} is required"

    return True, ""

def validate_date_format(date_string):
    """Validate a YYYY-MM-DD date; a full ISO timestamp is truncated to its date"""
    if not isinstance(date_string, str):
        return False, "Invalid date format. Use YYYY-MM-DD"
    try:
        return True, datetime.strptime(date_string, '%Y-%m-%d').date()
    except ValueError:
        pass
    try:
        return True, datetime.fromisoformat(date_string.replace('Z', '+00:00')).date()
    except ValueError:
        return False, "Invalid date format. Use YYYY-MM-DD"

def validate_date_range(start_date, end_date):
    """Validate that end_date is not before start_date"""
    if start_date is not None and end_date is not None and end_date < start_date:
        return False, "endDate cannot be before startDate"
    return True, ""

def _as_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None

def validate_allocation_percentage(value):
    """Validate allocation percentage is an integer between 0 and 100"""
    number = _as_int(value)
    if number is None:
        return False, "allocationPercentage must be an integer"

    if number < 0 or number > 100:
        return False, "allocationPercentage must be between 0 and 100"

    return True, number

def validate_non_negative_int(value, field):
    number = _as_int(value)
    if number is None or number < 0:
        return False, f"{field} must be a non-negative integer"
    return True, number

def validate_positive_int(value, field):
    number = _as_int(value)
    if number is None or number < 1:
        return False, f"{field} must be a positive integer"
    return True, number

def validate_id(value, field):
    """Validate a reference to another record's integer id"""
    number = _as_int(value)
    if number is None or number < 1:
        return False, f"{field} must be a valid id"
    return True, number

def validate_string_list(value, field):
    """Validate a list of strings, dropping blanks and surrounding whitespace"""
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return False, f"{field} must be a list of strings"
    return True, [item.strip() for item in value if item.strip()]

def validate_user_role(role_str):
    """Validate user role enum"""
    try:
        return True, UserRole(role_str)
    except ValueError:
        return False, "Invalid role. Use engineer or manager"

def validate_seniority(seniority_str):
    """Validate seniority enum"""
    try:
        return True, Seniority(seniority_str)
    except ValueError:
        return False, "Invalid seniority. Use junior, mid or senior"

def validate_project_status(status_str):
    """Validate project status enum"""
    try:
        return True, ProjectStatus(status_str)
    except ValueError:
        return False, "Invalid project status"

def validate_email_format(email):
    """Basic email format validation"""
    email_pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    if isinstance(email, str) and re.match(email_pattern, email):
        return True, ""
    return False, "Invalid email format"
