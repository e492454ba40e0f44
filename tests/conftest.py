import pytest

from database import Database
from services import AppServices


@pytest.fixture
def db():
    database = Database("sqlite://")
    assert database.create_tables()
    yield database
    database.engine.dispose()


@pytest.fixture
def session(db):
    session = db.get_session()
    yield session
    session.close()


@pytest.fixture
def services(session):
    return AppServices(session)


@pytest.fixture
def seeded(services):
    """两名教师、两名学生、两门课程，无选课"""
    services.teachers.add_teacher("T1", "Wang", "CS")
    services.teachers.add_teacher("T2", "Li", "Math")
    services.students.add_student("S1", "Zhang", "CS")
    services.students.add_student("S2", "Zhao", "Math")
    services.courses.add_course("C1", "Algorithms", 4, "T1")
    services.courses.add_course("C2", "Linear Algebra", 3, "T2")
    return services


def make_input(lines):
    """把一组输入行变成 input() 的替身，读完后抛出 EOFError"""
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return fake_input
