"""
业务逻辑层（Service）包
"""
from .student_service import StudentService
from .teacher_service import TeacherService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .score_service import ScoreService
from .app_services import AppServices
from .roster_service import RosterService
from .integrity_service import DataIntegrityChecker

__all__ = [
    'StudentService',
    'TeacherService',
    'CourseService',
    'EnrollmentService',
    'ScoreService',
    'AppServices',
    'RosterService',
    'DataIntegrityChecker',
]
