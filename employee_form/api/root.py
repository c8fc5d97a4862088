from fastapi import APIRouter

from employee_form.core.config import settings

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": settings.APP_NAME,
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
