from fastapi import APIRouter

from cgpa_api.api.api_v1.endpoints import courses

api_router = APIRouter()

api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
