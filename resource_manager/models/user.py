from resource_manager.extensions import db
from resource_manager.models._time import utcnow, isoformat
from resource_manager.models.enums import UserRole, Seniority

class User(db.Model):
    """Account holder; a user with role ``engineer`` is an Engineer"""
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    password_hash = db.Column(db.String(128), nullable=False)
    role = db.Column(db.Enum(UserRole), nullable=False)
    skills = db.Column(db.JSON, nullable=False, default=list)
    seniority = db.Column(db.Enum(Seniority), nullable=True)
    max_capacity = db.Column(db.Integer, nullable=False, default=100)  # percentage
    department = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    assignments = db.relationship('Assignment', backref='engineer', lazy=True)
    managed_projects = db.relationship('Project', backref='manager', lazy=True)

    @property
    def is_manager(self):
        return self.role == UserRole.MANAGER

    def to_summary(self):
        """Non-sensitive projection returned on signup"""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role.value,
        }

    def to_dict(self):
        """Full record minus the credential"""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role.value,
            'skills': list(self.skills or []),
            'seniority': self.seniority.value if self.seniority else None,
            'maxCapacity': self.max_capacity,
            'department': self.department,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
