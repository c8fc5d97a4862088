from pydantic import BaseModel, Field


class EmployeeFormIn(BaseModel):
    """Raw form values; null or missing values fail validation like empty ones"""
    first_name: str | None = Field(default="", description="First name")
    last_name: str | None = Field(default="", description="Last name")
    employee_id: str | None = Field(default="", description="7 digits starting with 0")
    email: str | None = Field(default="", description="Email address")


class EmployeeOut(BaseModel):
    """Accepted employee details, echoed verbatim"""
    first_name: str
    last_name: str
    employee_id: str
    email: str
