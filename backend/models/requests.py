from pydantic import BaseModel, Field

from config import settings


class AnalyzeRequest(BaseModel):
    text: str = Field(
        ..., max_length=settings.max_text_chars, description="Plain text extracted from the CV"
    )
    industry: str | None = Field(
        None, description="Industry lexicon key; unknown keys fall back to tech"
    )
