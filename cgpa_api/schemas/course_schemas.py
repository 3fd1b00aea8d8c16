from pydantic import BaseModel, ConfigDict, StrictInt
from typing import Optional
from cgpa_api.utils.grade_utils import Grade

class CourseRecordIn(BaseModel):
    # 字段均可缺省，缺失/空值由服务层统一校验并返回 400
    semester: Optional[str] = None
    courseName: Optional[str] = None
    unit: Optional[StrictInt] = None
    grade: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

class CourseRecordOut(BaseModel):
    id: int
    semester: str
    courseName: str
    unit: int
    grade: Grade
    gradePoint: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

class CGPAResponseDTO(BaseModel):
    cgpa: float = 0.0
    totalUnits: int = 0
    totalGradePoints: int = 0
    semester: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
