from typing import Iterable, NamedTuple

from resource_manager.exceptions import NotFoundError
from resource_manager.extensions import db
from resource_manager.models import Assignment, User


class CapacityReport(NamedTuple):
    engineer_name: str
    max_capacity: int
    allocated: int
    available: int

    def to_dict(self):
        return {
            'engineer': self.engineer_name,
            'availableCapacity': self.available,
            'maxCapacity': self.max_capacity,
            'allocatedCapacity': self.allocated,
        }


def calculate_capacity(engineer: User, assignments: Iterable[Assignment]) -> CapacityReport:
    """Subtract the summed allocation of ``assignments`` from the engineer's maxCapacity.

    Every assignment counts regardless of its end date, and the result is not
    clamped: an over-allocated engineer has negative available capacity.
    """
    allocated = sum(a.allocation_percentage for a in assignments)
    return CapacityReport(
        engineer_name=engineer.name,
        max_capacity=engineer.max_capacity,
        allocated=allocated,
        available=engineer.max_capacity - allocated,
    )


def get_engineer_capacity(engineer_id: int) -> CapacityReport:
    engineer = db.session.get(User, engineer_id)
    if engineer is None:
        raise NotFoundError("Engineer not found")

    assignments = Assignment.query.filter_by(engineer_id=engineer_id).all()
    return calculate_capacity(engineer, assignments)
