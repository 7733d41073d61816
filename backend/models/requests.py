from pydantic import BaseModel, Field

from models.schemas import ResumeData


class EvaluateRequest(BaseModel):
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")
    resume_data: ResumeData | None = Field(None, description="Structured resume fields, if already known")
    job_description: str | None = Field(None, max_length=10000, description="Optional job description text")
    filename: str | None = Field(None, max_length=255, description="Original resume filename")
