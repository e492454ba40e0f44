"""
Student 数据访问层
负责所有与 students 表相关的数据库操作
"""
from errors import StudentNotFoundError
from models import Student, Enrollment, Score
from .base_repository import BaseRepository


class StudentRepository(BaseRepository):
    """Student 数据访问类"""

    def _find(self, student_id):
        return self.session.query(Student).filter(Student.id == student_id).first()

    def add(self, student):
        """
        新增学生，学号已存在时不做任何修改

        Args:
            student: Student 对象

        Returns:
            bool: True 表示新插入，False 表示学号已存在被跳过
        """
        with self.transaction("新增学生"):
            if self._find(student.id) is not None:
                return False
            self.session.add(student)
            return True

    def get_by_id(self, student_id):
        """
        根据学号获取学生

        Raises:
            StudentNotFoundError: 学号不存在
        """
        with self.transaction("查询学生"):
            student = self._find(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def get_all(self):
        """获取所有学生，按学号升序"""
        with self.transaction("查询所有学生"):
            return self.session.query(Student).order_by(Student.id).all()

    def exists(self, student_id):
        with self.transaction("查询学生"):
            return self.session.query(Student).filter(Student.id == student_id).count() > 0

    def delete(self, student_id):
        """
        删除学生，同一事务内依次删除其成绩、选课记录和学生本身

        Raises:
            StudentNotFoundError: 学号不存在
        """
        with self.transaction("删除学生"):
            if self._find(student_id) is None:
                raise StudentNotFoundError(student_id)
            self.session.query(Score).filter(Score.student_id == student_id).delete()
            self.session.query(Enrollment).filter(Enrollment.student_id == student_id).delete()
            self.session.query(Student).filter(Student.id == student_id).delete()
