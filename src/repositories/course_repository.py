"""
Course 数据访问层
负责所有与 courses 表相关的数据库操作
"""
from errors import CourseNotFoundError
from models import Course, Enrollment, Score
from .base_repository import BaseRepository


class CourseRepository(BaseRepository):
    """Course 数据访问类"""

    def _find(self, course_id):
        return self.session.query(Course).filter(Course.id == course_id).first()

    def add(self, course):
        """
        新增课程，课程编号已存在时跳过
        授课教师是否存在由 service 层在调用前校验

        Args:
            course: Course 对象

        Returns:
            bool: 是否新插入
        """
        with self.transaction("新增课程"):
            if self._find(course.id) is not None:
                return False
            self.session.add(course)
            return True

    def get_by_id(self, course_id):
        """
        根据 ID 获取课程

        Args:
            course_id: 课程编号 (如 "C1")

        Returns:
            Course 对象

        Raises:
            CourseNotFoundError: 课程不存在
        """
        with self.transaction("查询课程"):
            course = self._find(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    def get_all(self):
        """
        获取所有课程

        Returns:
            Course 对象列表，按课程编号升序
        """
        with self.transaction("查询所有课程"):
            return self.session.query(Course).order_by(Course.id).all()

    def exists(self, course_id):
        """
        检查课程是否存在

        Args:
            course_id: 课程编号

        Returns:
            bool: 是否存在
        """
        with self.transaction("查询课程"):
            return self.session.query(Course).filter(Course.id == course_id).count() > 0

    def delete(self, course_id):
        """
        删除课程，同一事务内依次删除该课程的成绩、选课记录和课程本身

        Raises:
            CourseNotFoundError: 课程不存在
        """
        with self.transaction("删除课程"):
            if self._find(course_id) is None:
                raise CourseNotFoundError(course_id)
            self.session.query(Score).filter(Score.course_id == course_id).delete()
            self.session.query(Enrollment).filter(Enrollment.course_id == course_id).delete()
            self.session.query(Course).filter(Course.id == course_id).delete()
