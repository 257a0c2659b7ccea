"""
Test configuration and fixtures
"""
from datetime import date

import pytest

from resource_manager import create_app
from resource_manager.extensions import db
from resource_manager.models import Assignment, Project, User, UserRole
from resource_manager.utils.security import create_access_token, get_password_hash

PASSWORD = 'password123'


@pytest.fixture
def app():
    """Fresh application with an in-memory database for each test"""
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Insert a user directly and return ``{'id', 'email'}``"""
    def _make_user(name, email, role=UserRole.ENGINEER, **fields):
        with app.app_context():
            user = User(
                name=name,
                email=email,
                password_hash=get_password_hash(PASSWORD),
                role=role,
                **fields
            )
            db.session.add(user)
            db.session.commit()
            return {'id': user.id, 'email': user.email}
    return _make_user


@pytest.fixture
def auth_headers_for(app):
    def _headers(user):
        with app.app_context():
            token = create_access_token(user['id'], user['email'])
        return {'Authorization': f'Bearer {token}'}
    return _headers


@pytest.fixture
def manager(make_user):
    return make_user('Maya Manager', 'manager@example.com', role=UserRole.MANAGER)


@pytest.fixture
def engineer(make_user):
    return make_user('Eli Engineer', 'eli@example.com', skills=['Python', 'Flask'])


@pytest.fixture
def manager_headers(manager, auth_headers_for):
    return auth_headers_for(manager)


@pytest.fixture
def engineer_headers(engineer, auth_headers_for):
    return auth_headers_for(engineer)


@pytest.fixture
def project(app, manager):
    with app.app_context():
        project = Project(name='Capacity Dashboard', start_date=date(2025, 1, 1), manager_id=manager['id'])
        db.session.add(project)
        db.session.commit()
        return {'id': project.id, 'name': project.name}


@pytest.fixture
def make_assignment(app):
    def _make_assignment(engineer_id, project_id, allocation, role='Developer', **fields):
        with app.app_context():
            assignment = Assignment(
                engineer_id=engineer_id,
                project_id=project_id,
                allocation_percentage=allocation,
                start_date=fields.pop('start_date', date(2025, 1, 1)),
                role=role,
                **fields
            )
            db.session.add(assignment)
            db.session.commit()
            return assignment.id
    return _make_assignment


@pytest.fixture
def assignment_count(app):
    def _count():
        with app.app_context():
            return Assignment.query.count()
    return _count
