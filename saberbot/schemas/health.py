from datetime import datetime

from pydantic import BaseModel


class KnowledgeBaseStatus(BaseModel):
    loaded: bool
    characters: int
    source: str | None = None


class GeminiStatus(BaseModel):
    configured: bool
    model: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: datetime
    knowledge_base: KnowledgeBaseStatus
    gemini: GeminiStatus


class ServiceDescriptor(BaseModel):
    status: str = "ok"
    service: str
    version: str
    endpoints: dict[str, str]
