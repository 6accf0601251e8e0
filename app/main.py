# /app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

# --- Core Setup ---
from .core import config
from .core.exceptions import SchoolRecordsError
from .core.logging import setup_logging

# --- Application-specific Router Imports ---
from .routers import (
    students_router,
    classes_router,
    grades_router,
    dashboard_router,
)

logger = setup_logging()

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    logger.info("Starting with STORAGE_BACKEND=%s", config.STORAGE_BACKEND)
    if config.STORAGE_BACKEND == "sql":
        # Registering the models on Base before creating the table.
        from .db.base import Base
        from .db.database import engine
        Base.metadata.create_all(bind=engine)
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="School Records API",
    description="Students, classes and grades, with dashboard statistics.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception Handlers ---
@app.exception_handler(SchoolRecordsError)
async def school_records_exception_handler(request: Request, exc: SchoolRecordsError):
    logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=500,
        content={"code": exc.code, "message": exc.message, "details": exc.details},
    )

# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(grades_router.router, prefix="/api/grades", tags=["Grades"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "School Records API is running!", "version": app.version}
