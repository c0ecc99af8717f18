from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"


class ErrorResponse(BaseModel):
    error: str
    type: str = "InternalError"
