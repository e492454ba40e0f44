"""
终端输入读取工具

所有函数都会反复提示直到输入合法；输入流结束时抛出 EOFError，
由调用方决定如何退出。input_func 参数用于替换 input()（测试时注入）。
"""
from models.course import CREDIT_MIN, CREDIT_MAX
from models.score import SCORE_MIN, SCORE_MAX
from .validators import is_in_range


def read_int(minimum: int, maximum: int, input_func=input) -> int:
    """
    读取 [minimum, maximum] 范围内的整数

    调用前由调用方打印提示语，例如 "请输入选择："
    """
    while True:
        raw = input_func("").strip()
        try:
            number = int(raw)
        except ValueError:
            number = None
        if number is not None and minimum <= number <= maximum:
            return number
        print(f"输入无效，请输入{minimum}-{maximum}之间的整数：", end="")


def read_string(tip: str, input_func=input) -> str:
    """读取非空字符串"""
    while True:
        value = input_func(tip).strip()
        if value:
            return value
        print("输入不能为空！")


def read_credit(input_func=input) -> int:
    print(f"输入课程学分（{CREDIT_MIN}-{CREDIT_MAX}）：", end="")
    return read_int(CREDIT_MIN, CREDIT_MAX, input_func)


def read_score(input_func=input) -> float:
    """读取成绩（0-100 的浮点数）"""
    while True:
        raw = input_func(f"输入成绩（{SCORE_MIN}-{SCORE_MAX}）：").strip()
        try:
            score = float(raw)
        except ValueError:
            score = None
        if score is not None and is_in_range(score, SCORE_MIN, SCORE_MAX):
            return score
        print(f"成绩无效，请输入{SCORE_MIN}-{SCORE_MAX}的数字！")
