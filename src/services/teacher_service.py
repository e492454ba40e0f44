"""
Teacher 业务逻辑服务
"""
from models import Teacher
from utils import require_text


class TeacherService:
    """教师业务逻辑类"""

    def __init__(self, repository):
        """
        Args:
            repository: TeacherRepository 实例
        """
        self.repository = repository

    def add_teacher(self, teacher_id, name, department):
        """
        新增教师（工号已存在时跳过）

        Returns:
            bool: 是否新插入
        """
        teacher = Teacher(
            id=require_text(teacher_id, "工号"),
            name=require_text(name, "教师姓名"),
            department=require_text(department, "院系"),
        )
        created = self.repository.add(teacher)
        if created:
            print(f"✓ 教师【{teacher.name}】新增成功！")
        else:
            print(f"⚠️ 教师ID【{teacher.id}】已存在，跳过")
        return created

    def get_teacher(self, teacher_id):
        return self.repository.get_by_id(teacher_id)

    def list_teachers(self):
        return self.repository.get_all()
