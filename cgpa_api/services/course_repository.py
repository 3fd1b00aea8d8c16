from sqlalchemy.orm import Session
from cgpa_api.models.course_record import CourseRecord
from typing import List, Optional

class CourseRecordRepository:
    @staticmethod
    def get_all(db: Session) -> List[CourseRecord]:
        return db.query(CourseRecord).order_by(CourseRecord.id).all()

    @staticmethod
    def get_by_id(db: Session, record_id: int) -> Optional[CourseRecord]:
        return db.query(CourseRecord).filter(CourseRecord.id == record_id).first()

    @staticmethod
    def get_by_semester(db: Session, semester: str) -> List[CourseRecord]:
        return db.query(CourseRecord).filter(CourseRecord.semester == semester).order_by(CourseRecord.id).all()

    @staticmethod
    def save(db: Session, record: CourseRecord) -> CourseRecord:
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def delete(db: Session, record: CourseRecord):
        db.delete(record)
        db.commit()
