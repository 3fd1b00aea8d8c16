from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from cgpa_api.api.api_v1.api import api_router
from cgpa_api.core.config import settings
from cgpa_api.core.exceptions import CourseRecordError
from cgpa_api.db.session import init_db
from cgpa_api.schemas.result import ErrorResult
import logging

logging.basicConfig(
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    level=settings.LOG_LEVEL,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()
    logger.info(f"{settings.PROJECT_NAME} 已启动，接口前缀 {settings.API_V1_STR}")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    lifespan=lifespan,
)


def _error_response(result: ErrorResult) -> JSONResponse:
    return JSONResponse(status_code=result.code, content=result.model_dump())

@app.exception_handler(CourseRecordError)
async def course_record_exception_handler(request: Request, exc: CourseRecordError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error_response(ErrorResult.from_exception(exc))

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    messages = {
        404: "Resource not found",
        405: "Method not allowed",
    }
    msg = messages.get(exc.status_code, exc.detail or "Request error")
    return _error_response(ErrorResult.of(exc.status_code, msg))

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = f"Invalid request: {field} {first.get('msg', '')}".strip() if field else "Invalid request body"
    return _error_response(ErrorResult.of(400, msg))

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"未处理异常: {exc}", exc_info=True)
    return _error_response(ErrorResult.of(500, "Internal server error"))

# 设置 CORS 允许所有来源
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
