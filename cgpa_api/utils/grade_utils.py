"""
工具函数：成绩等级相关操作

等级规则（5 分制）：
- 等级: A / B / C / D / E / F，区分大小写
- 绩点: A=5, B=4, C=3, D=2, E=1, F=0
- 绩点只由等级推导，不入库
"""
import enum
from typing import Dict, Optional


class Grade(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    @property
    def points(self) -> int:
        return GRADE_POINTS[self]


GRADE_POINTS: Dict[Grade, int] = {
    Grade.A: 5,
    Grade.B: 4,
    Grade.C: 3,
    Grade.D: 2,
    Grade.E: 1,
    Grade.F: 0,
}


def parse_grade(value) -> Optional[Grade]:
    """把请求中的等级字符串转为 Grade，不合法时返回 None"""
    if isinstance(value, Grade):
        return value
    try:
        return Grade(value)
    except ValueError:
        return None


def grading_scale() -> Dict[str, int]:
    return {g.value: p for g, p in GRADE_POINTS.items()}
