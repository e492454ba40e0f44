"""
Student 数据模型
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime
from . import Base


class Student(Base):
    """学生表"""
    __tablename__ = 'students'

    # 主键：学号
    id = Column(String(20), primary_key=True)

    name = Column(String(100), nullable=False)
    major = Column(String(100), nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    def __repr__(self):
        return f"<Student {self.id}: {self.name}>"

    def __str__(self):
        return f"{self.name}({self.id})"
