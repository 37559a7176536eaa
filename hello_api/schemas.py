from __future__ import annotations

from pydantic import BaseModel, Field


class RootInfo(BaseModel):
    message: str = "Welcome to the REST API"
    version: str = "1.0.0"
    endpoints: list[str] = Field(default_factory=lambda: ["/hello", "/health"])


class HelloInfo(BaseModel):
    message: str = "Hello from REST API!"
    timestamp: str
    framework: str = "FastAPI"
    runtime: str = "Python"


class HealthInfo(BaseModel):
    status: str = "healthy"
    uptime: float = Field(ge=0)
    timestamp: str
