"""
数据访问层（Repository）包
每个 repository 封装一张表的查询，共享同一个数据库会话
"""
from .base_repository import BaseRepository
from .student_repository import StudentRepository
from .teacher_repository import TeacherRepository
from .course_repository import CourseRepository
from .enrollment_repository import EnrollmentRepository
from .score_repository import ScoreRepository

__all__ = [
    'BaseRepository',
    'StudentRepository',
    'TeacherRepository',
    'CourseRepository',
    'EnrollmentRepository',
    'ScoreRepository',
]
