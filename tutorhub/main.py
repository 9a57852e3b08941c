# /tutorhub/main.py

import time

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core import config
from .core.logging_config import generate_request_id, get_logger, log_with_context, request_id_var, setup_logging
from .db.database import init_db
from .routers import (
    attendance_router,
    dashboard_router,
    exams_router,
    fees_router,
    homework_router,
    profiles_router,
    schedules_router,
    students_router,
    syllabus_router,
)

http_logger = get_logger("http")


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once on startup.
    setup_logging()
    init_db()
    log_with_context(http_logger, "INFO", "TutorHub API started", extra_data={"version": app.version})
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="TutorHub Backend API",
    description="Attendance, fees, homework, tests, timetable and syllabus tracking for a tutoring practice.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Tags the request with an id and logs one line when it completes."""
    request_id = request.headers.get("X-Request-Id") or generate_request_id()
    token = request_id_var.set(request_id)
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        log_with_context(http_logger, "ERROR", "Unhandled error while serving request",
                         context={"method": request.method, "path": request.url.path}, exc_info=True)
        raise
    finally:
        request_id_var.reset(token)

    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    response.headers["X-Request-Id"] = request_id
    log_with_context(
        http_logger, "INFO", "Request completed",
        context={"method": request.method, "path": request.url.path, "request_id": request_id},
        extra_data={"status_code": response.status_code, "duration_ms": duration_ms},
    )
    return response


# --- API Router Inclusion ---
app.include_router(profiles_router.router, prefix="/api/profiles", tags=["Profiles"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"])
app.include_router(fees_router.router, prefix="/api/fees", tags=["Fees"])
app.include_router(homework_router.router, prefix="/api/homework", tags=["Homework"])
app.include_router(exams_router.router, prefix="/api/tests", tags=["Tests"])
app.include_router(schedules_router.router, prefix="/api/schedules", tags=["Timetable"])
app.include_router(syllabus_router.router, prefix="/api/syllabus", tags=["Syllabus"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "TutorHub Backend is running!", "version": app.version}
