"""
选课 / 退课业务逻辑服务
"""


class EnrollmentService:
    """选课业务逻辑类"""

    def __init__(self, repository, student_repository, course_repository):
        """
        Args:
            repository: EnrollmentRepository 实例
            student_repository: StudentRepository 实例，用于校验学生存在
            course_repository: CourseRepository 实例，用于校验课程存在
        """
        self.repository = repository
        self.student_repository = student_repository
        self.course_repository = course_repository

    def _check_student_and_course(self, student_id, course_id):
        # 不存在时分别抛出 StudentNotFoundError / CourseNotFoundError
        self.student_repository.get_by_id(student_id)
        self.course_repository.get_by_id(course_id)

    def enroll(self, student_id, course_id):
        """
        学生选课

        Raises:
            StudentNotFoundError / CourseNotFoundError: 学生或课程不存在
            AlreadyEnrolledError: 重复选课
        """
        self._check_student_and_course(student_id, course_id)
        enrollment = self.repository.enroll(student_id, course_id)
        print(f"✓ 学生【{student_id}】选课【{course_id}】成功！")
        return enrollment

    def drop(self, student_id, course_id):
        """
        学生退课（同时删除该课程成绩）

        Raises:
            NotEnrolledError: 未选该课程
        """
        self.repository.drop(student_id, course_id)
        print(f"✓ 学生【{student_id}】退课【{course_id}】成功！")

    def list_enrolled_courses(self, student_id):
        """
        查询学生已选课程

        Returns:
            Course 对象列表

        Raises:
            StudentNotFoundError: 学生不存在
            NoEnrollmentsError: 没有选课记录
        """
        self.student_repository.get_by_id(student_id)
        return self.repository.list_enrolled_courses(student_id)
