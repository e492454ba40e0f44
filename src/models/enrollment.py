"""
Enrollment 数据模型
学生和课程的多对多关联表（选课记录）
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, PrimaryKeyConstraint
from datetime import datetime
from . import Base


class Enrollment(Base):
    """选课表"""
    __tablename__ = 'enrollments'

    student_id = Column(String(20), ForeignKey('students.id'), nullable=False)
    course_id = Column(String(20), ForeignKey('courses.id'), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint('student_id', 'course_id', name='pk_enrollment'),
    )

    def __repr__(self):
        return f"<Enrollment {self.student_id} → {self.course_id}>"
