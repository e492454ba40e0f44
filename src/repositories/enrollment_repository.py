"""
Enrollment 数据访问层
选课 / 退课 / 查询已选课程
"""
from errors import AlreadyEnrolledError, NotEnrolledError, NoEnrollmentsError
from models import Course, Enrollment, Score
from .base_repository import BaseRepository


class EnrollmentRepository(BaseRepository):
    """Enrollment 数据访问类"""

    def _find(self, student_id, course_id):
        return self.session.query(Enrollment).filter(
            Enrollment.student_id == student_id,
            Enrollment.course_id == course_id
        ).first()

    def is_enrolled(self, student_id, course_id):
        """检查学生是否已选该课程"""
        with self.transaction("查询选课记录"):
            return self._find(student_id, course_id) is not None

    def enroll(self, student_id, course_id):
        """
        选课

        Raises:
            AlreadyEnrolledError: 该学生已选过这门课
        """
        with self.transaction("选课"):
            if self._find(student_id, course_id) is not None:
                raise AlreadyEnrolledError(student_id, course_id)
            enrollment = Enrollment(student_id=student_id, course_id=course_id)
            self.session.add(enrollment)
        return enrollment

    def drop(self, student_id, course_id):
        """
        退课，同一事务内先删除该课程成绩再删除选课记录

        Raises:
            NotEnrolledError: 学生未选该课程
        """
        with self.transaction("退课"):
            if self._find(student_id, course_id) is None:
                raise NotEnrolledError(student_id, course_id)
            self.session.query(Score).filter(
                Score.student_id == student_id,
                Score.course_id == course_id
            ).delete()
            self.session.query(Enrollment).filter(
                Enrollment.student_id == student_id,
                Enrollment.course_id == course_id
            ).delete()

    def list_enrolled_courses(self, student_id):
        """
        获取学生已选的所有课程（完整 Course 记录），按课程编号升序

        Raises:
            NoEnrollmentsError: 该学生没有任何选课记录
        """
        with self.transaction("查询选课记录"):
            courses = self.session.query(Course).join(
                Enrollment, Enrollment.course_id == Course.id
            ).filter(
                Enrollment.student_id == student_id
            ).order_by(Course.id).all()
        if not courses:
            raise NoEnrollmentsError(student_id)
        return courses

