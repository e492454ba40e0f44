"""
服务装配
由同一个数据库会话构建所有 repository 和 service
"""
from repositories import (
    StudentRepository, TeacherRepository, CourseRepository,
    EnrollmentRepository, ScoreRepository
)
from .student_service import StudentService
from .teacher_service import TeacherService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .score_service import ScoreService


class AppServices:
    """持有共享会话和全部业务服务"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.session = session

        student_repo = StudentRepository(session)
        teacher_repo = TeacherRepository(session)
        course_repo = CourseRepository(session)
        enrollment_repo = EnrollmentRepository(session)
        score_repo = ScoreRepository(session)

        self.students = StudentService(student_repo)
        self.teachers = TeacherService(teacher_repo)
        self.courses = CourseService(course_repo, teacher_repo)
        self.enrollments = EnrollmentService(enrollment_repo, student_repo, course_repo)
        self.scores = ScoreService(score_repo, student_repo, course_repo)

    def close(self):
        self.session.close()
