"""
Teacher 数据模型
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime
from . import Base


class Teacher(Base):
    """教师表"""
    __tablename__ = 'teachers'

    # 主键：工号
    id = Column(String(20), primary_key=True)

    name = Column(String(100), nullable=False)
    department = Column(String(100), nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    def __repr__(self):
        return f"<Teacher {self.id}: {self.name}>"

    def __str__(self):
        return f"{self.name}({self.id})"
