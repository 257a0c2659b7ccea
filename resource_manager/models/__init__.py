from .enums import UserRole, Seniority, ProjectStatus
from .user import User
from .project import Project
from .assignment import Assignment

__all__ = [
    'UserRole', 'Seniority', 'ProjectStatus',
    'User', 'Project', 'Assignment'
]
