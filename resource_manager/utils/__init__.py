from .validators import (
    validate_required_fields, validate_date_format, validate_date_range,
    validate_allocation_percentage, validate_non_negative_int, validate_positive_int,
    validate_id, validate_string_list, validate_user_role, validate_seniority,
    validate_project_status, validate_email_format
)
from .response import respond

__all__ = [
    'validate_required_fields', 'validate_date_format', 'validate_date_range',
    'validate_allocation_percentage', 'validate_non_negative_int', 'validate_positive_int',
    'validate_id', 'validate_string_list', 'validate_user_role', 'validate_seniority',
    'validate_project_status', 'validate_email_format', 'respond'
]
