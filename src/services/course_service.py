"""
Course 业务逻辑服务
"""
from models import Course
from models.course import CREDIT_MIN, CREDIT_MAX
from utils import require_text, require_int_range


class CourseService:
    """课程业务逻辑类"""

    def __init__(self, repository, teacher_repository):
        """
        初始化服务

        Args:
            repository: CourseRepository 实例
            teacher_repository: TeacherRepository 实例，新增课程前校验授课教师
        """
        self.repository = repository
        self.teacher_repository = teacher_repository

    def add_course(self, course_id, name, credit, teacher_id):
        """
        新增课程

        流程：
        1. 校验字段（学分 1-10）
        2. 查询授课教师，不存在则失败
        3. 插入课程（编号已存在时跳过）

        Args:
            course_id: 课程编号
            name: 课程名称
            credit: 学分
            teacher_id: 授课教师工号

        Returns:
            bool: 是否新插入

        Raises:
            TeacherNotFoundError: 授课教师不存在
            InvalidValueError: 字段不合法
        """
        course = Course(
            id=require_text(course_id, "课程编号"),
            name=require_text(name, "课程名称"),
            credit=require_int_range(credit, CREDIT_MIN, CREDIT_MAX, "学分"),
            teacher_id=require_text(teacher_id, "授课教师工号"),
        )
        self.teacher_repository.get_by_id(course.teacher_id)

        created = self.repository.add(course)
        if created:
            print(f"✓ 课程【{course.name}】新增成功！")
        else:
            print(f"⚠️ 课程ID【{course.id}】已存在，跳过")
        return created

    def get_course(self, course_id):
        return self.repository.get_by_id(course_id)

    def list_courses(self):
        return self.repository.get_all()

    def delete_course(self, course_id):
        """删除课程及其全部选课、成绩记录"""
        self.repository.delete(course_id)
        print(f"✓ 课程ID【{course_id}】删除成功（含关联选课/成绩）！")
