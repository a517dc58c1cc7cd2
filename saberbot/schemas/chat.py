from pydantic import BaseModel, StrictStr, field_validator


class ChatRequest(BaseModel):
    message: StrictStr

    @field_validator("message")
    @classmethod
    def strip_message(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("message must contain at least one non-whitespace character")
        return cleaned


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
    response: str | None = None
