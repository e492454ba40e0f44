"""
字段校验工具函数

service 层在写库前调用；终端输入已经做过一轮校验，
这里保证从其他入口（如批量导入）写入的数据同样合法。
"""
from errors import InvalidValueError


def require_text(value: str, field: str) -> str:
    """
    校验非空字符串，返回去掉首尾空白后的值

    Examples:
        >>> require_text(" S1 ", "学号")
        'S1'
    """
    if value is None or not str(value).strip():
        raise InvalidValueError(f"{field}不能为空")
    return str(value).strip()


def require_range(value, minimum, maximum, field: str):
    """
    校验数值在 [minimum, maximum] 闭区间内

    Examples:
        >>> require_range(4, 1, 10, "学分")
        4
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueError(f"{field}必须是数字：{value!r}")
    if not minimum <= value <= maximum:
        raise InvalidValueError(f"{field}必须在 {minimum}-{maximum} 之间：{value}")
    return value


def require_int_range(value, minimum, maximum, field: str) -> int:
    """
    校验整数（不接受小数和布尔值）在 [minimum, maximum] 闭区间内

    Examples:
        >>> require_int_range(4, 1, 10, "学分")
        4
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f"{field}必须是整数：{value!r}")
    return require_range(value, minimum, maximum, field)


def is_in_range(value, minimum, maximum) -> bool:
    """require_range 的布尔版本"""
    try:
        require_range(value, minimum, maximum, "值")
        return True
    except InvalidValueError:
        return False
