from resource_manager.extensions import db
from resource_manager.models._time import utcnow, isoformat
from resource_manager.models.enums import ProjectStatus

class Project(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)
    required_skills = db.Column(db.JSON, nullable=False, default=list)  # ordered
    team_size = db.Column(db.Integer, nullable=False, default=1)
    status = db.Column(db.Enum(ProjectStatus), nullable=False, default=ProjectStatus.PLANNING)
    manager_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    assignments = db.relationship('Assignment', backref='project', lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'startDate': isoformat(self.start_date),
            'endDate': isoformat(self.end_date),
            'requiredSkills': list(self.required_skills or []),
            'teamSize': self.team_size,
            'status': self.status.value,
            'managerId': self.manager_id,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
