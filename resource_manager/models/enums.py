from enum import Enum

class UserRole(Enum):
    ENGINEER = "engineer"
    MANAGER = "manager"

class Seniority(Enum):
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"

class ProjectStatus(Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
