from resource_manager.extensions import db
from resource_manager.models._time import utcnow, isoformat

class Assignment(db.Model):
    """Allocation of part of an engineer's time to a project"""
    id = db.Column(db.Integer, primary_key=True)
    engineer_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    project_id = db.Column(db.Integer, db.ForeignKey('project.id'), nullable=False)
    allocation_percentage = db.Column(db.Integer, nullable=False)  # 0 to 100
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)
    role = db.Column(db.String(100), nullable=False)  # Engineer's role on this project
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        db.CheckConstraint('allocation_percentage >= 0 AND allocation_percentage <= 100',
                           name='allocation_percentage_range'),
    )

    def to_dict(self, expand=False):
        """Serialize the assignment.

        With ``expand`` the engineer and project references are resolved into
        ``engineer`` and ``project`` summaries next to the raw ids; without it
        only the ids are returned.
        """
        data = {
            'id': self.id,
            'engineerId': self.engineer_id,
            'projectId': self.project_id,
            'allocationPercentage': self.allocation_percentage,
            'startDate': isoformat(self.start_date),
            'endDate': isoformat(self.end_date),
            'role': self.role,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
        if expand:
            data['engineer'] = {
                'id': self.engineer.id,
                'name': self.engineer.name,
                'skills': list(self.engineer.skills or []),
            } if self.engineer else None
            data['project'] = {
                'id': self.project.id,
                'name': self.project.name,
            } if self.project else None
        return data
