# fitpartner/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fitpartner.errors import BackendError
from fitpartner.routers.auth import router as auth_router
from fitpartner.routers.dashboard import router as dashboard_router
from fitpartner.routers.workouts import router as workouts_router
from fitpartner.routers.exercises import router as exercises_router
from fitpartner.db import SessionLocal  # for healthz DB check
from fitpartner.settings import get_settings

log = logging.getLogger("uvicorn")
settings = get_settings()

app = FastAPI(
    title="FitPartner API",
    openapi_tags=[
        {"name": "auth", "description": "Sign-up, sign-in & sessions"},
        {"name": "dashboard", "description": "Lifetime progress summary"},
        {"name": "workouts", "description": "Weekly workouts, favorites & generation"},
        {"name": "exercises", "description": "Exercises inside a workout"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS.split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    log.error("database error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    err = BackendError(cause=exc)
    return JSONResponse(status_code=err.status_code, content={"detail": err.detail})

@app.get("/")
def root():
    return {"ok": True, "name": "FitPartner API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(workouts_router)
app.include_router(exercises_router)
