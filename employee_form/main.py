from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_form.api.health import router as health_router
from employee_form.api.root import router as root_router
from employee_form.api.employees import router as employees_router
from employee_form.core.config import settings
from employee_form.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Employee Form")

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(employees_router)
