from sqlalchemy import Column, Integer, String, Enum
from cgpa_api.db.session import Base
from cgpa_api.utils.grade_utils import Grade

class CourseRecord(Base):
    __tablename__ = "course_records"

    id = Column("id", Integer, primary_key=True, index=True, autoincrement=True)
    semester = Column("semester", String(50), nullable=False, index=True)
    courseName = Column("course_name", String(100), nullable=False)
    unit = Column("unit", Integer, nullable=False)
    grade = Column("grade", Enum(Grade, name="grade", native_enum=False, length=1), nullable=False)

    @property
    def gradePoint(self) -> int:
        # 由等级推导，不入库
        return self.grade.points if self.grade is not None else 0
