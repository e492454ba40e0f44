"""
Course 数据模型
"""
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, CheckConstraint
from datetime import datetime
from . import Base

CREDIT_MIN = 1
CREDIT_MAX = 10


class Course(Base):
    """课程表"""
    __tablename__ = 'courses'

    # 主键：课程编号
    id = Column(String(20), primary_key=True)

    name = Column(String(100), nullable=False)
    credit = Column(Integer, nullable=False)

    # 外键：授课教师，新增课程前由 service 层校验存在
    teacher_id = Column(String(20), ForeignKey('teachers.id'), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        CheckConstraint(
            f'credit BETWEEN {CREDIT_MIN} AND {CREDIT_MAX}',
            name='ck_course_credit_range'
        ),
    )

    def __repr__(self):
        return f"<Course {self.id}: {self.name} ({self.credit})>"

    def __str__(self):
        return f"{self.id} - {self.name}"
