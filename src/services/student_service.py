"""
Student 业务逻辑服务
"""
from models import Student
from utils import require_text


class StudentService:
    """学生业务逻辑类"""

    def __init__(self, repository):
        """
        Args:
            repository: StudentRepository 实例
        """
        self.repository = repository

    def add_student(self, student_id, name, major):
        """
        新增学生（学号已存在时跳过，不报错）

        Returns:
            bool: 是否新插入
        """
        student = Student(
            id=require_text(student_id, "学号"),
            name=require_text(name, "学生姓名"),
            major=require_text(major, "专业"),
        )
        created = self.repository.add(student)
        if created:
            print(f"✓ 学生【{student.name}】新增成功！")
        else:
            print(f"⚠️ 学生ID【{student.id}】已存在，跳过")
        return created

    def get_student(self, student_id):
        return self.repository.get_by_id(student_id)

    def list_students(self):
        return self.repository.get_all()

    def delete_student(self, student_id):
        """删除学生及其全部选课、成绩记录"""
        self.repository.delete(student_id)
        print(f"✓ 学生ID【{student_id}】删除成功（含关联选课/成绩）！")
