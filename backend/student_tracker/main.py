"""
Student Assessment Tracker - FastAPI Application Entry Point.

This is the main application module that:
1. Initializes the FastAPI app with CORS middleware
2. Sets up structured JSON logging
3. Implements request ID middleware (X-Request-ID header)
4. Maps domain and store errors onto HTTP responses
5. Registers the student API routes and a health check endpoint

The application follows a modular architecture:
- routes/: API endpoint handlers
- models/: SQLAlchemy ORM models
- services/: Business logic (metrics, validation, phone, projection)
- store.py: Record store (SQL or in-memory)
- logging_config.py: Structured logging configuration
- database.py: Database connection management
"""

import os
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from student_tracker.logging_config import (
    setup_logging, get_logger, log_with_context,
    request_id_var, generate_request_id
)
from student_tracker.routes import students
from student_tracker.database import DATABASE_URL, SessionLocal, create_tables
from student_tracker.seed import seed_sample_students
from student_tracker.store import STORE_BACKEND, StoreFailure, SqlStudentStore, memory_store

# Import models so they are registered with Base.metadata
from student_tracker.models.student import Student

SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() in ("1", "true", "yes")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# ──────────────────────────────────────────────────────────────
# Initialize structured logging BEFORE anything else
# ──────────────────────────────────────────────────────────────
setup_logging()
logger = get_logger("http")

# Auto-create tables for SQLite local development
if STORE_BACKEND == "sql" and DATABASE_URL.startswith("sqlite"):
    logger.info("Using SQLite, creating tables directly")
    create_tables()


def _seed_store():
    if STORE_BACKEND == "memory":
        seed_sample_students(memory_store)
        return
    db = SessionLocal()
    try:
        seed_sample_students(SqlStudentStore(db))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if SEED_SAMPLE_DATA:
        _seed_store()
    yield


# ──────────────────────────────────────────────────────────────
# Create FastAPI application
# ──────────────────────────────────────────────────────────────
app = FastAPI(
    title="Student Assessment Tracker",
    description=(
        "Manage student records and their three assessment marks, "
        "with derived totals, averages, percentages and performance levels."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# ──────────────────────────────────────────────────────────────
# CORS Middleware
#
# Allows the browser UI to call the API from another origin.
# In production, set CORS_ORIGINS to the actual frontend domain.
# ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "Location"]
)


# ──────────────────────────────────────────────────────────────
# Request ID Middleware
#
# Generates a unique UUID per incoming request, stores it in a
# context variable for every log entry, returns it in the
# X-Request-ID response header and logs start/end with latency.
# ──────────────────────────────────────────────────────────────
@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    req_id = generate_request_id()
    request_id_var.set(req_id)

    start_time = time.time()

    log_with_context(logger, "INFO",
        f"Request started: {request.method} {request.url.path}",
        context={"request_id": req_id},
        extra_data={
            "ip": request.client.host if request.client else "unknown",
            "user_agent": request.headers.get("user-agent", ""),
            "query_params": dict(request.query_params)
        })

    response = await call_next(request)

    duration_ms = (time.time() - start_time) * 1000
    response.headers["X-Request-ID"] = req_id

    log_with_context(logger, "INFO",
        f"Request completed: {request.method} {request.url.path} → {response.status_code}",
        context={"request_id": req_id},
        extra_data={
            "duration_ms": round(duration_ms, 2),
            "status_code": response.status_code
        })

    return response


# ──────────────────────────────────────────────────────────────
# Error handlers
# ──────────────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies (e.g. a non-integer assessment) as field errors."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc) or "body", "message": error.get("msg", "Invalid value")})

    log_with_context(logger, "WARNING",
        f"Malformed request: {request.method} {request.url.path}",
        extra_data={"errors": errors})
    return JSONResponse(
        status_code=400,
        content={"detail": {"message": "Validation failed", "errors": errors}}
    )


@app.exception_handler(StoreFailure)
async def store_failure_handler(request: Request, exc: StoreFailure):
    log_with_context(logger, "ERROR",
        f"Store failure: {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ──────────────────────────────────────────────────────────────
# Register API routes
# ──────────────────────────────────────────────────────────────
app.include_router(students.router, tags=["Students"])


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint for Docker health checks and monitoring."""
    return {"status": "healthy", "service": "student-tracker-backend", "version": "1.0.0"}


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "service": "Student Assessment Tracker",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "list": "GET /api/students?sort=fname|lname|total|percent",
            "detail": "GET /api/students/{id}",
            "create": "POST /api/students",
            "update": "PUT /api/students/{id}",
            "delete": "DELETE /api/students/{id}"
        }
    }
