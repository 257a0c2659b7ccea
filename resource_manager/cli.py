import logging
from datetime import date

import click
from flask.cli import with_appcontext

from resource_manager.extensions import db
from resource_manager.models import (
    Assignment, Project, ProjectStatus, Seniority, User, UserRole
)
from resource_manager.utils.security import get_password_hash

logger = logging.getLogger(__name__)

DEMO_PASSWORD = 'password123'

DEMO_USERS = [
    {'name': 'Maya Manager', 'email': 'manager@example.com', 'role': UserRole.MANAGER,
     'department': 'Delivery'},
    {'name': 'Eli Engineer', 'email': 'eli@example.com', 'role': UserRole.ENGINEER,
     'skills': ['Python', 'Flask', 'PostgreSQL'], 'seniority': Seniority.SENIOR,
     'department': 'Platform'},
    {'name': 'Ava Engineer', 'email': 'ava@example.com', 'role': UserRole.ENGINEER,
     'skills': ['React', 'TypeScript'], 'seniority': Seniority.MID, 'max_capacity': 50,
     'department': 'Frontend'},
]


def _get_or_create_user(spec):
    user = User.query.filter_by(email=spec['email']).first()
    if user:
        return user, False
    user = User(password_hash=get_password_hash(DEMO_PASSWORD), **spec)
    db.session.add(user)
    return user, True


@click.command('seed-demo')
@with_appcontext
def seed_demo_command():
    """Create a demo manager, two engineers, a project and two assignments."""
    created = 0
    users = []
    for spec in DEMO_USERS:
        user, is_new = _get_or_create_user(dict(spec))
        users.append(user)
        created += int(is_new)
    db.session.flush()

    manager, eli, ava = users
    project = Project.query.filter_by(name='Capacity Dashboard').first()
    if project is None:
        project = Project(
            name='Capacity Dashboard',
            description='Internal tool for tracking engineer allocation.',
            start_date=date.today(),
            required_skills=['Python', 'React'],
            team_size=2,
            status=ProjectStatus.ACTIVE,
            manager_id=manager.id
        )
        db.session.add(project)
        db.session.flush()
        db.session.add_all([
            Assignment(engineer_id=eli.id, project_id=project.id, allocation_percentage=60,
                       start_date=date.today(), role='Backend Developer'),
            Assignment(engineer_id=ava.id, project_id=project.id, allocation_percentage=30,
                       start_date=date.today(), role='Frontend Developer'),
        ])

    db.session.commit()
    logger.info("Demo data seeded (%s new users)", created)
    click.echo(f"Seeded {created} new users. Demo password: {DEMO_PASSWORD}")
