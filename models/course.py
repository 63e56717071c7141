"""
Course and hole layout models.
"""
from database import db


class Course(db.Model):
    """Represents a golf course with an ordered set of holes."""

    __tablename__ = 'courses'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)

    # Relationships
    holes = db.relationship('CourseHole', backref='course', lazy='dynamic',
                            cascade='all, delete-orphan', order_by='CourseHole.hole_number')
    events = db.relationship('Event', backref='course', lazy='dynamic')

    def __repr__(self):
        return f'<Course {self.name}>'

    @property
    def par(self) -> int:
        """Return the course par (sum of hole pars)."""
        return sum(hole.par for hole in self.holes.all())

    def get_holes_sorted(self):
        return self.holes.order_by(CourseHole.hole_number).all()


class CourseHole(db.Model):
    """Represents a single hole and its par."""

    __tablename__ = 'course_holes'
    __table_args__ = (
        db.UniqueConstraint('course_id', 'hole_number', name='uq_course_hole_number'),
    )

    id = db.Column(db.Integer, primary_key=True)
    course_id = db.Column(db.Integer, db.ForeignKey('courses.id'), nullable=False)
    hole_number = db.Column(db.Integer, nullable=False)  # 1-18
    par = db.Column(db.Integer, nullable=False)  # 3, 4 or 5

    def __repr__(self):
        return f'<CourseHole {self.hole_number} par {self.par}>'

    def to_dict(self) -> dict:
        return {'hole_number': self.hole_number, 'par': self.par}
