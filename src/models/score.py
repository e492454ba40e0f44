"""
Score 数据模型
成绩只能依附于已存在的选课记录：(student_id, course_id) 复合外键指向 enrollments
"""
from sqlalchemy import (
    Column, String, Double, DateTime,
    PrimaryKeyConstraint, ForeignKeyConstraint, CheckConstraint
)
from datetime import datetime
from . import Base

SCORE_MIN = 0
SCORE_MAX = 100


class Score(Base):
    """成绩表"""
    __tablename__ = 'scores'

    student_id = Column(String(20), nullable=False)
    course_id = Column(String(20), nullable=False)
    score = Column(Double, nullable=False)  # MySQL 上为 DOUBLE

    # 时间戳（成绩可被覆盖更新）
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint('student_id', 'course_id', name='pk_score'),
        ForeignKeyConstraint(
            ['student_id', 'course_id'],
            ['enrollments.student_id', 'enrollments.course_id'],
            name='fk_score_enrollment'
        ),
        CheckConstraint(
            f'score >= {SCORE_MIN} AND score <= {SCORE_MAX}',
            name='ck_score_range'
        ),
    )

    def __repr__(self):
        return f"<Score {self.student_id}/{self.course_id}: {self.score}>"
