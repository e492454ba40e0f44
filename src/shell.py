"""
终端交互界面
主菜单 0-5，每个子菜单循环到用户选择 0 返回
"""
from errors import StudentSystemError
from utils import read_int, read_string, read_credit, read_score, format_table

MAIN_MENU = """
=====================================
=========== 学生选课管理系统 ===========
=====================================
1. 学生管理（增/删/查）
2. 教师管理（增/查）
3. 课程管理（增/删/查）
4. 选课/退课管理
5. 成绩管理（录入/查询）
0. 退出系统
====================================="""

STUDENT_MENU = """
----- 学生管理子菜单 -----
1. 新增学生
2. 删除学生
3. 查看所有学生
0. 返回主菜单"""

TEACHER_MENU = """
----- 教师管理子菜单 -----
1. 新增教师
2. 查看所有教师
0. 返回主菜单"""

COURSE_MENU = """
----- 课程管理子菜单 -----
1. 新增课程
2. 删除课程
3. 查看所有课程
0. 返回主菜单"""

ENROLL_MENU = """
----- 选课/退课管理子菜单 -----
1. 学生选课
2. 学生退课
3. 查看学生已选课程
0. 返回主菜单"""

SCORE_MENU = """
----- 成绩管理子菜单 -----
1. 录入/更新成绩
2. 查询学生成绩（含平均分）
0. 返回主菜单"""


class TerminalUI:
    """终端菜单，负责读取输入、调用 service、打印结果"""

    def __init__(self, services, input_func=input):
        """
        Args:
            services: AppServices 实例
            input_func: 读取一行输入的函数，默认 input
        """
        self.services = services
        self.input_func = input_func

        # 子菜单：(菜单文本, {选项: 处理函数})
        self.submenus = {
            1: (STUDENT_MENU, {
                1: self.add_student,
                2: self.delete_student,
                3: self.list_students,
            }),
            2: (TEACHER_MENU, {
                1: self.add_teacher,
                2: self.list_teachers,
            }),
            3: (COURSE_MENU, {
                1: self.add_course,
                2: self.delete_course,
                3: self.list_courses,
            }),
            4: (ENROLL_MENU, {
                1: self.enroll,
                2: self.drop,
                3: self.list_student_courses,
            }),
            5: (SCORE_MENU, {
                1: self.input_score,
                2: self.query_student_scores,
            }),
        }

    # ---------- 输入 ----------

    def _choose(self, maximum):
        print("请输入选择：", end="")
        return read_int(0, maximum, self.input_func)

    def _text(self, tip):
        return read_string(tip, self.input_func)

    def _execute(self, handler):
        """执行一条命令，业务异常打印后继续"""
        try:
            handler()
        except StudentSystemError as e:
            print(f"✗ {e}")

    # ---------- 菜单循环 ----------

    def run(self):
        """主循环，选择 0 或输入结束时退出"""
        try:
            while True:
                print(MAIN_MENU)
                print("请输入功能编号：", end="")
                choice = read_int(0, 5, self.input_func)
                if choice == 0:
                    break
                self._submenu(*self.submenus[choice])
        except EOFError:
            print()
        print("\n感谢使用学生选课管理系统，再见！")

    def _submenu(self, menu_text, handlers):
        while True:
            print(menu_text)
            choice = self._choose(len(handlers))
            if choice == 0:
                print("返回主菜单...")
                return
            self._execute(handlers[choice])

    # ---------- 学生 ----------

    def add_student(self):
        student_id = self._text("输入学生ID：")
        name = self._text("输入学生姓名：")
        major = self._text("输入学生专业：")
        self.services.students.add_student(student_id, name, major)

    def delete_student(self):
        student_id = self._text("输入要删除的学生ID：")
        self.services.students.delete_student(student_id)

    def list_students(self):
        students = self.services.students.list_students()
        print("\n=== 所有学生列表 ===")
        print(format_table(
            ["学生ID", "姓名", "专业"],
            [(s.id, s.name, s.major) for s in students]
        ))

    # ---------- 教师 ----------

    def add_teacher(self):
        teacher_id = self._text("输入教师ID：")
        name = self._text("输入教师姓名：")
        department = self._text("输入教师所属院系：")
        self.services.teachers.add_teacher(teacher_id, name, department)

    def list_teachers(self):
        teachers = self.services.teachers.list_teachers()
        print("\n=== 所有教师列表 ===")
        print(format_table(
            ["教师ID", "姓名", "院系"],
            [(t.id, t.name, t.department) for t in teachers]
        ))

    # ---------- 课程 ----------

    def add_course(self):
        course_id = self._text("输入课程ID：")
        name = self._text("输入课程名称：")
        credit = read_credit(self.input_func)
        teacher_id = self._text("输入授课教师ID：")
        self.services.courses.add_course(course_id, name, credit, teacher_id)

    def delete_course(self):
        course_id = self._text("输入要删除的课程ID：")
        self.services.courses.delete_course(course_id)

    def list_courses(self):
        courses = self.services.courses.list_courses()
        print("\n=== 所有课程列表 ===")
        print(format_table(
            ["课程ID", "课程名称", "学分", "授课教师"],
            [(c.id, c.name, c.credit, c.teacher_id) for c in courses]
        ))

    # ---------- 选课 ----------

    def enroll(self):
        student_id = self._text("输入学生ID：")
        course_id = self._text("输入课程ID：")
        self.services.enrollments.enroll(student_id, course_id)

    def drop(self):
        student_id = self._text("输入学生ID：")
        course_id = self._text("输入课程ID：")
        self.services.enrollments.drop(student_id, course_id)

    def list_student_courses(self):
        student_id = self._text("输入学生ID：")
        courses = self.services.enrollments.list_enrolled_courses(student_id)
        print(f"\n=== 学生【{student_id}】已选课程 ===")
        print(format_table(
            ["课程ID", "课程名称", "学分"],
            [(c.id, c.name, c.credit) for c in courses]
        ))

    # ---------- 成绩 ----------

    def input_score(self):
        student_id = self._text("输入学生ID：")
        course_id = self._text("输入课程ID：")
        score = read_score(self.input_func)
        self.services.scores.set_score(student_id, course_id, score)

    def query_student_scores(self):
        student_id = self._text("输入学生ID：")
        report = self.services.scores.get_student_report(student_id)
        student = report['student']
        print(f"\n=== 学生【{student.name}({student.id})】成绩列表 ===")
        print(format_table(
            ["课程ID", "课程名称", "成绩"],
            [(s.course_id, c.name, f"{s.score:.1f}") for s, c in report['rows']]
        ))
        print("-" * 45)
        print(f"平均分：{report['average']:.1f}")
