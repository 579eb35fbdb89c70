"""
FastAPI app assembly: logging, middleware and router wiring.
"""
import logging
import os
from fastapi import FastAPI, Depends, status, APIRouter
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


from student_records.db import schemas
from student_records.api.deps import get_current_user_context
from student_records.api.registries import router as registries_router
from student_records.api.records import router as records_router
from student_records.api.audits import router as audits_router
from student_records.utils.runtime import dev_mode_active

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Student Records Service",
    description="API for school registries, guardian-owned student records, and grade assignment.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

_DEFAULT_ORIGINS = "http://localhost,http://localhost:3000,http://localhost:8000"
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware: enforce read-only for unauthenticated requests
@app.middleware("http")
async def enforce_readonly_for_guests(request: Request, call_next):
    if request.method in ("POST", "PUT", "PATCH", "DELETE") and not dev_mode_active():
        h = request.headers
        user_present = (
            h.get("x-auth-request-user")
            or h.get("x-auth-request-email")
            or h.get("x-forwarded-user")
            or h.get("x-forwarded-email")
        )
        if not user_present:
            logger.warning("guest_write_rejected: method=%s path=%s", request.method, request.url.path)
            return JSONResponse(
                {"detail": "Guest mode is read-only. Sign in to perform changes."},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
    return await call_next(request)


router = APIRouter()


@router.get("/user-info", response_model=schemas.User)
def get_user_info(user_context = Depends(get_current_user_context)):
    user, _current_user = user_context
    return user


@router.get("/health")
def health_check():
    return {"status": "ok", "service": "student-records-service"}


app.include_router(router)
app.include_router(registries_router)
app.include_router(records_router)
app.include_router(audits_router)
