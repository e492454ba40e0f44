"""
数据模型包
"""
from sqlalchemy.orm import declarative_base

# 创建 ORM 基类
Base = declarative_base()

# 导出所有模型：实体
from .student import Student
from .teacher import Teacher
from .course import Course

# 导出所有模型：关联
from .enrollment import Enrollment
from .score import Score

__all__ = [
    'Base',
    # 实体
    'Student',
    'Teacher',
    'Course',
    # 关联
    'Enrollment',
    'Score',
]
