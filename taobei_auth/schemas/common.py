# taobei_auth/schemas/common.py
from pydantic import BaseModel
from typing import Optional

class ErrorResponse(BaseModel):
    success: bool = False
    data: None = None
    error: str
    code: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
