from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    entries: int = 0
    detail: str = ""
