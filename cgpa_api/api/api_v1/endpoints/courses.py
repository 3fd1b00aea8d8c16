from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Dict, List
from cgpa_api.db.session import get_db
from cgpa_api.services.course_record_service import CourseRecordService
from cgpa_api.services.cgpa_service import CGPAService
from cgpa_api.schemas.course_schemas import CourseRecordIn, CourseRecordOut, CGPAResponseDTO
from cgpa_api.utils.grade_utils import grading_scale


router = APIRouter()

# 静态路径须注册在 /{record_id} 之前

@router.get("", response_model=List[CourseRecordOut])
def get_all_course_records(db: Session = Depends(get_db)):
    return CourseRecordService.get_all(db)

@router.post("", response_model=CourseRecordOut, status_code=status.HTTP_201_CREATED)
def create_course_record(body: CourseRecordIn, db: Session = Depends(get_db)):
    return CourseRecordService.create(db, body)

@router.get("/cgpa", response_model=CGPAResponseDTO)
def calculate_overall_cgpa(db: Session = Depends(get_db)):
    return CGPAService.calculate_overall(db)

@router.get("/cgpa/semester/{semester}", response_model=CGPAResponseDTO)
def calculate_semester_gpa(semester: str, db: Session = Depends(get_db)):
    return CGPAService.calculate_semester(db, semester)

@router.get("/semester/{semester}", response_model=List[CourseRecordOut])
def get_course_records_by_semester(semester: str, db: Session = Depends(get_db)):
    return CourseRecordService.get_by_semester(db, semester)

@router.get("/grading-scale", response_model=Dict[str, int])
def get_grading_scale():
    return grading_scale()

@router.get("/{record_id}", response_model=CourseRecordOut)
def get_course_record(record_id: int, db: Session = Depends(get_db)):
    return CourseRecordService.get_by_id(db, record_id)

@router.put("/{record_id}", response_model=CourseRecordOut)
def update_course_record(record_id: int, body: CourseRecordIn, db: Session = Depends(get_db)):
    return CourseRecordService.update(db, record_id, body)

@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_course_record(record_id: int, db: Session = Depends(get_db)):
    CourseRecordService.delete(db, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
