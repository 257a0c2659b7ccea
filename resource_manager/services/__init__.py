from .capacity import CapacityReport, calculate_capacity, get_engineer_capacity
from .updates import UNSET, ProfileUpdate, AssignmentUpdate

__all__ = [
    'CapacityReport', 'calculate_capacity', 'get_engineer_capacity',
    'UNSET', 'ProfileUpdate', 'AssignmentUpdate'
]
