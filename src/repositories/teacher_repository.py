"""
Teacher 数据访问层
"""
from errors import TeacherNotFoundError
from models import Teacher
from .base_repository import BaseRepository


class TeacherRepository(BaseRepository):
    """Teacher 数据访问类"""

    def _find(self, teacher_id):
        return self.session.query(Teacher).filter(Teacher.id == teacher_id).first()

    def add(self, teacher):
        """
        新增教师，工号已存在时跳过

        Returns:
            bool: 是否新插入
        """
        with self.transaction("新增教师"):
            if self._find(teacher.id) is not None:
                return False
            self.session.add(teacher)
            return True

    def get_by_id(self, teacher_id):
        with self.transaction("查询教师"):
            teacher = self._find(teacher_id)
        if teacher is None:
            raise TeacherNotFoundError(teacher_id)
        return teacher

    def get_all(self):
        with self.transaction("查询所有教师"):
            return self.session.query(Teacher).order_by(Teacher.id).all()

    def exists(self, teacher_id):
        with self.transaction("查询教师"):
            return self.session.query(Teacher).filter(Teacher.id == teacher_id).count() > 0
