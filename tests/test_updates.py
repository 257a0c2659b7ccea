from datetime import date
from types import SimpleNamespace

import pytest

from resource_manager.exceptions import ValidationError
from resource_manager.models import Seniority
from resource_manager.services import UNSET, AssignmentUpdate, ProfileUpdate


def test_profile_update_keeps_only_supplied_fields():
    update = ProfileUpdate.from_payload({'maxCapacity': 60, 'email': 'ignored@example.com'})

    assert update.changes() == {'max_capacity': 60}
    assert update.name is UNSET


def test_profile_update_converts_values():
    update = ProfileUpdate.from_payload({'seniority': 'mid', 'skills': [' Go ', '', 'SQL'], 'name': ' Eli '})

    assert update.seniority is Seniority.MID
    assert update.skills == ['Go', 'SQL']
    assert update.name == 'Eli'


def test_apply_leaves_unset_attributes_alone():
    user = SimpleNamespace(name='Eli', department='Platform', max_capacity=100)

    ProfileUpdate.from_payload({'department': None}).apply_to(user)

    assert user.department is None
    assert user.name == 'Eli'
    assert user.max_capacity == 100


@pytest.mark.parametrize('payload', [None, [], {'name': ''}, {'maxCapacity': 'full'}, {'skills': None}])
def test_profile_update_rejects_bad_payloads(payload):
    with pytest.raises(ValidationError):
        ProfileUpdate.from_payload(payload)


def test_empty_payload_is_an_empty_update():
    assert ProfileUpdate.from_payload({}).is_empty()


def test_assignment_update_checks_resulting_date_range():
    assignment = SimpleNamespace(start_date=date(2025, 3, 1), end_date=None)

    AssignmentUpdate.from_payload({'endDate': '2025-04-01'}).check_dates(assignment)

    with pytest.raises(ValidationError):
        AssignmentUpdate.from_payload({'endDate': '2025-02-01'}).check_dates(assignment)

    with pytest.raises(ValidationError):
        AssignmentUpdate.from_payload({'startDate': '2025-05-01', 'endDate': '2025-04-01'}).check_dates(assignment)


def test_assignment_update_allocation_bounds():
    assert AssignmentUpdate.from_payload({'allocationPercentage': 100}).allocation_percentage == 100
    with pytest.raises(ValidationError):
        AssignmentUpdate.from_payload({'allocationPercentage': 100.5})
