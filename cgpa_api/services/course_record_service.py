import logging
from typing import List
from sqlalchemy.orm import Session
from cgpa_api.core.exceptions import NotFoundError, ValidationError
from cgpa_api.models.course_record import CourseRecord
from cgpa_api.schemas.course_schemas import CourseRecordIn
from cgpa_api.services.course_repository import CourseRecordRepository
from cgpa_api.utils.grade_utils import Grade, parse_grade

logger = logging.getLogger(__name__)


class CourseRecordService:
    @staticmethod
    def _validate(payload: CourseRecordIn) -> Grade:
        """按 学分 → 课程名 → 学期 → 等级 的顺序校验，返回解析后的等级。"""
        if payload.unit is None or payload.unit <= 0:
            raise ValidationError("Unit must be a positive number")
        if payload.courseName is None or not payload.courseName.strip():
            raise ValidationError("Course name is required")
        if payload.semester is None or not payload.semester.strip():
            raise ValidationError("Semester is required")
        grade = parse_grade(payload.grade)
        if grade is None:
            raise ValidationError(f"Grade must be one of {', '.join(g.value for g in Grade)}")
        return grade

    @staticmethod
    def get_all(db: Session) -> List[CourseRecord]:
        return CourseRecordRepository.get_all(db)

    @staticmethod
    def get_by_semester(db: Session, semester: str) -> List[CourseRecord]:
        return CourseRecordRepository.get_by_semester(db, semester)

    @staticmethod
    def get_by_id(db: Session, record_id: int) -> CourseRecord:
        record = CourseRecordRepository.get_by_id(db, record_id)
        if record is None:
            logger.info(f"Course record not found: id={record_id}")
            raise NotFoundError(f"Course record not found with id: {record_id}")
        return record

    @staticmethod
    def create(db: Session, payload: CourseRecordIn) -> CourseRecord:
        grade = CourseRecordService._validate(payload)
        record = CourseRecord(
            semester=payload.semester,
            courseName=payload.courseName,
            unit=payload.unit,
            grade=grade,
        )
        record = CourseRecordRepository.save(db, record)
        logger.info(f"Course record created: id={record.id} semester={record.semester!r} grade={grade.value}")
        return record

    @staticmethod
    def update(db: Session, record_id: int, payload: CourseRecordIn) -> CourseRecord:
        record = CourseRecordService.get_by_id(db, record_id)
        grade = CourseRecordService._validate(payload)

        record.semester = payload.semester
        record.courseName = payload.courseName
        record.unit = payload.unit
        record.grade = grade

        record = CourseRecordRepository.save(db, record)
        logger.info(f"Course record updated: id={record.id}")
        return record

    @staticmethod
    def delete(db: Session, record_id: int):
        record = CourseRecordService.get_by_id(db, record_id)
        CourseRecordRepository.delete(db, record)
        logger.info(f"Course record deleted: id={record_id}")
