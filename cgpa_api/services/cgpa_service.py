import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional
from sqlalchemy.orm import Session
from cgpa_api.core.exceptions import NotFoundError
from cgpa_api.schemas.course_schemas import CGPAResponseDTO
from cgpa_api.services.course_repository import CourseRecordRepository

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


def aggregate(records: Iterable, semester: Optional[str] = None) -> CGPAResponseDTO:
    """按学分加权计算平均绩点。

    records 中每项需有 unit 与 gradePoint 属性；空集合返回全 0 结果而不报错。
    平均值对精确商做四舍五入（ROUND_HALF_UP），保留两位小数。
    """
    total_units = 0
    total_grade_points = 0
    for r in records:
        total_units += r.unit
        total_grade_points += r.unit * r.gradePoint

    if total_units == 0:
        return CGPAResponseDTO(cgpa=0.0, totalUnits=0, totalGradePoints=0, semester=semester)

    cgpa = (Decimal(total_grade_points) / Decimal(total_units)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return CGPAResponseDTO(
        cgpa=float(cgpa),
        totalUnits=total_units,
        totalGradePoints=total_grade_points,
        semester=semester,
    )


class CGPAService:
    @staticmethod
    def calculate_overall(db: Session) -> CGPAResponseDTO:
        return aggregate(CourseRecordRepository.get_all(db))

    @staticmethod
    def calculate_semester(db: Session, semester: str) -> CGPAResponseDTO:
        records = CourseRecordRepository.get_by_semester(db, semester)
        if not records:
            logger.info(f"GPA requested for empty semester: {semester!r}")
            raise NotFoundError(f"No records found for semester: {semester}")
        return aggregate(records, semester)
