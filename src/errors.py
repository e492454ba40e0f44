"""
业务异常定义
所有异常都继承 StudentSystemError，由终端界面统一捕获并打印
"""


class StudentSystemError(Exception):
    """系统异常基类"""


class NotFoundError(StudentSystemError):
    """实体不存在"""

    entity = "记录"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity}ID【{entity_id}】不存在")


class StudentNotFoundError(NotFoundError):
    entity = "学生"


class TeacherNotFoundError(NotFoundError):
    entity = "教师"


class CourseNotFoundError(NotFoundError):
    entity = "课程"


class AlreadyEnrolledError(StudentSystemError):
    """重复选课"""

    def __init__(self, student_id, course_id):
        self.student_id = student_id
        self.course_id = course_id
        super().__init__(f"学生【{student_id}】已选课程【{course_id}】，无需重复选课")


class NotEnrolledError(StudentSystemError):
    """学生未选该课程（退课 / 录入成绩时）"""

    def __init__(self, student_id, course_id):
        self.student_id = student_id
        self.course_id = course_id
        super().__init__(f"学生【{student_id}】未选课程【{course_id}】")


class NoScoresError(StudentSystemError):
    def __init__(self, student_id):
        self.student_id = student_id
        super().__init__(f"学生【{student_id}】暂无成绩记录")


class NoEnrollmentsError(StudentSystemError):
    def __init__(self, student_id):
        self.student_id = student_id
        super().__init__(f"学生【{student_id}】暂无选课记录")


class InvalidValueError(StudentSystemError):
    """字段取值不合法（空字符串、学分/成绩越界）"""


class DatabaseConnectionError(StudentSystemError):
    """数据库配置缺失或无法连接"""


class TransactionError(StudentSystemError):
    """事务执行失败（已回滚）"""
