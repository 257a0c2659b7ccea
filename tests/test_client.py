import time
from datetime import timedelta

import httpx
import pytest

from resource_manager.client import (
    ApiClientError, PermissionDenied, ResourceClient, Session, SessionExpired
)
from resource_manager.utils.security import create_access_token

PASSWORD = 'password123'


@pytest.fixture
def api(app):
    client = ResourceClient('http://testserver/api', transport=httpx.WSGITransport(app=app))
    yield client
    client.close()


def test_signup_then_login_builds_session(api):
    created = api.signup('Nora Engineer', 'nora@example.com', 'secret-pass', 'engineer')

    session = api.login('nora@example.com', 'secret-pass')

    assert session.user_id == created['id']
    assert session.role == 'engineer'
    assert session.is_authenticated()
    assert api.get_profile()['email'] == 'nora@example.com'


def test_protected_call_without_session_is_refused_locally(api):
    with pytest.raises(SessionExpired):
        api.list_engineers()


def test_server_rejection_invalidates_session(api, app, engineer):
    with app.app_context():
        token = create_access_token(engineer['id'], engineer['email'])
    # Valid expiry, wrong signature
    api.session = Session(token=token[:-4] + 'abcd', user_id=engineer['id'], name='Eli', role='engineer')

    with pytest.raises(SessionExpired):
        api.get_profile()
    assert api.session.token is None


def test_error_envelope_raises_with_message(api):
    with pytest.raises(ApiClientError) as excinfo:
        api.login('ghost@example.com', 'nope')

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == 'User not found'


def test_empty_project_list_is_empty(api, manager):
    api.login(manager['email'], PASSWORD)
    assert api.list_projects() == []


def test_engineer_cannot_manage_assignments(api, engineer, project):
    api.login(engineer['email'], PASSWORD)

    with pytest.raises(PermissionDenied):
        api.create_assignment(engineer['id'], project['id'], 50, '2025-01-01', 'Developer')
    with pytest.raises(PermissionDenied):
        api.delete_assignment(1)
    with pytest.raises(PermissionDenied):
        api.create_project('Side Quest', '2025-01-01')


def test_manager_workflow(api, manager, engineer):
    api.login(manager['email'], PASSWORD)

    project = api.create_project('Billing Revamp', '2025-03-01', requiredSkills=['Python'])
    assert project['managerId'] == manager['id']

    assignment = api.create_assignment(engineer['id'], project['id'], 30, '2025-03-01', 'Developer')
    api.create_assignment(engineer['id'], project['id'], 50, '2025-03-01', 'Reviewer')
    assert api.get_engineer_capacity(engineer['id'])['availableCapacity'] == 20

    updated = api.update_assignment(assignment['id'], allocationPercentage=10)
    assert updated['allocationPercentage'] == 10
    assert api.get_engineer_capacity(engineer['id'])['availableCapacity'] == 40

    api.delete_assignment(assignment['id'])
    assert len(api.list_assignments()) == 1
    assert [p['name'] for p in api.list_projects()] == ['Billing Revamp']


def test_my_assignments_filters_to_session_user(api, make_user, engineer, project, make_assignment):
    other = make_user('Ava Engineer', 'ava@example.com')
    make_assignment(engineer['id'], project['id'], 30)
    make_assignment(other['id'], project['id'], 40)

    api.login(engineer['email'], PASSWORD)
    mine = api.my_assignments()

    assert [a['allocationPercentage'] for a in mine] == [30]


def test_logout_clears_session(api, engineer):
    api.login(engineer['email'], PASSWORD)

    api.logout()

    assert not api.session.is_authenticated()
    assert api.session.user_id is None


def test_session_expiry_is_read_from_token(app, engineer):
    with app.app_context():
        fresh = create_access_token(engineer['id'], engineer['email'])
        stale = create_access_token(engineer['id'], engineer['email'], expires_delta=timedelta(seconds=-1))

    assert Session(token=fresh).is_authenticated()
    assert not Session(token=fresh).is_authenticated(now=time.time() + 25 * 3600)
    assert not Session(token=stale).is_authenticated()
    assert not Session(token='garbage').is_authenticated()
    assert not Session().is_authenticated()


def test_session_survives_save_and_load(tmp_path):
    path = tmp_path / 'session.json'
    Session(token='t', user_id=7, name='Eli', role='manager').save(path)

    loaded = Session.load(path)

    assert loaded == Session(token='t', user_id=7, name='Eli', role='manager')
    assert Session.load(tmp_path / 'missing.json') == Session()


def test_search_engineers_by_name_or_skill(api, make_user, manager, engineer):
    make_user('Ava Frontend', 'ava@example.com', skills=['React', 'TypeScript'])
    api.login(manager['email'], PASSWORD)

    assert [e['name'] for e in api.search_engineers('eli')] == ['Eli Engineer']
    assert [e['name'] for e in api.search_engineers('REACT')] == ['Ava Frontend']
    assert [e['name'] for e in api.search_engineers('flask')] == ['Eli Engineer']
    assert len(api.search_engineers('')) == 2
    assert api.search_engineers('cobol') == []


def test_session_load_ignores_non_object_json(tmp_path):
    path = tmp_path / 'session.json'
    path.write_text('[]', encoding='utf-8')

    assert Session.load(path) == Session()

    path.write_text('{not json', encoding='utf-8')
    assert Session.load(path) == Session()
