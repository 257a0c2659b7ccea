"""
Partial updates.

A partial update is built from a JSON payload and remembers exactly which
fields the caller supplied. Fields that were not supplied stay ``UNSET`` and
are never written, so a sparse payload cannot blank out existing values.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, NamedTuple, Optional

from resource_manager.exceptions import ValidationError
from resource_manager.utils.validators import (
    validate_allocation_percentage, validate_date_format, validate_date_range,
    validate_id, validate_non_negative_int, validate_seniority, validate_string_list,
)


class _Unset:
    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False


UNSET = _Unset()


class FieldSpec(NamedTuple):
    key: str                                      # wire name in the payload
    validate: Callable[[Any], tuple]              # returns (ok, value_or_error)
    nullable: bool = False


def _non_blank_string(field):
    def validate(value):
        if not isinstance(value, str) or not value.strip():
            return False, f"{field} must be a non-empty string"
        return True, value.strip()
    return validate


def _optional_string(field):
    def validate(value):
        if not isinstance(value, str):
            return False, f"{field} must be a string"
        return True, value.strip()
    return validate


class PartialUpdate:
    """Base class; subclasses are dataclasses whose fields carry a FieldSpec"""

    SPECS: Dict[str, FieldSpec] = {}

    @classmethod
    def from_payload(cls, data: Optional[dict]):
        """Validate every supplied key; unknown keys are ignored"""
        if data is None:
            raise ValidationError("No data provided")
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        values = {}
        for attr, spec in cls.SPECS.items():
            if spec.key not in data:
                continue
            raw = data[spec.key]
            if raw is None:
                if not spec.nullable:
                    raise ValidationError(f"{spec.key} cannot be null")
                values[attr] = None
                continue
            ok, result = spec.validate(raw)
            if not ok:
                raise ValidationError(result)
            values[attr] = result
        return cls(**values)

    def changes(self) -> Dict[str, Any]:
        """Only the fields that were supplied, keyed by model attribute"""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, instance) -> None:
        for attr, value in self.changes().items():
            setattr(instance, attr, value)


@dataclass
class ProfileUpdate(PartialUpdate):
    name: Any = UNSET
    skills: Any = UNSET
    seniority: Any = UNSET
    max_capacity: Any = UNSET
    department: Any = UNSET

    SPECS = {
        'name': FieldSpec('name', _non_blank_string('name')),
        'skills': FieldSpec('skills', lambda v: validate_string_list(v, 'skills')),
        'seniority': FieldSpec('seniority', validate_seniority, nullable=True),
        'max_capacity': FieldSpec('maxCapacity', lambda v: validate_non_negative_int(v, 'maxCapacity')),
        'department': FieldSpec('department', _optional_string('department'), nullable=True),
    }


@dataclass
class AssignmentUpdate(PartialUpdate):
    engineer_id: Any = UNSET
    project_id: Any = UNSET
    allocation_percentage: Any = UNSET
    start_date: Any = UNSET
    end_date: Any = UNSET
    role: Any = UNSET

    SPECS = {
        'engineer_id': FieldSpec('engineerId', lambda v: validate_id(v, 'engineerId')),
        'project_id': FieldSpec('projectId', lambda v: validate_id(v, 'projectId')),
        'allocation_percentage': FieldSpec('allocationPercentage', validate_allocation_percentage),
        'start_date': FieldSpec('startDate', validate_date_format),
        'end_date': FieldSpec('endDate', validate_date_format, nullable=True),
        'role': FieldSpec('role', _non_blank_string('role')),
    }

    def check_dates(self, assignment) -> None:
        """Validate the date range the assignment would have after the update"""
        start = assignment.start_date if self.start_date is UNSET else self.start_date
        end = assignment.end_date if self.end_date is UNSET else self.end_date
        ok, error = validate_date_range(start, end)
        if not ok:
            raise ValidationError(error)
