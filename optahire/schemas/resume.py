"""
Pydantic schemas for Resume API requests/responses.
"""

from datetime import datetime
from typing import Any, ClassVar, List, Optional, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator

from optahire.core.validation import MissingFieldsError


class ResumeRequest(BaseModel):
    """
    Body for creating or replacing a resume.

    Strings are stripped and blank strings count as not provided. Required
    fields are checked after the bounds so that every key may be omitted in
    the schema and still be reported as a 400 by the error handlers.
    """
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("title", "summary", "skills", "experience", "education")

    title: Optional[str] = Field(None, min_length=3, max_length=100, description="Resume title (required)")
    summary: Optional[str] = Field(None, min_length=10, max_length=1000, description="Professional summary (required)")
    headline: Optional[str] = Field(None, min_length=3, max_length=200, description="Profile headline")
    skills: Optional[List[str]] = Field(None, min_length=1, max_length=20, description="Skill names (required)")
    experience: Optional[str] = Field(None, min_length=10, max_length=5000, description="Work experience (required)")
    education: Optional[str] = Field(None, min_length=10, max_length=2000, description="Education history (required)")
    industry: Optional[str] = Field(None, min_length=2, max_length=100, description="Industry")
    availability: Optional[str] = Field(None, min_length=2, max_length=50, description="Availability")
    company: Optional[str] = Field(None, min_length=2, max_length=100, description="Current company")
    achievements: Optional[str] = Field(None, max_length=1000, description="Notable achievements")
    portfolio: Optional[str] = Field(None, max_length=255, description="Portfolio URL")

    @field_validator(
        "title", "summary", "headline", "experience", "education",
        "industry", "availability", "company", "achievements", "portfolio",
        mode="before"
    )
    @classmethod
    def strip_blank_to_none(cls, v: Any) -> Any:
        """Strip strings; a blank string means the field was not provided."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @model_validator(mode="after")
    def check_required_fields(self) -> "ResumeRequest":
        # An empty skills list is present; the min_length bound rejects it
        missing = [name for name in self.REQUIRED_FIELDS if getattr(self, name) is None]
        if missing:
            raise MissingFieldsError(missing)
        return self


class ResumeResponse(BaseModel):
    """Stored resume profile."""
    id: int
    user_id: int
    title: str
    summary: str
    headline: Optional[str] = None
    skills: List[str]
    experience: str
    education: str
    industry: Optional[str] = None
    availability: Optional[str] = None
    company: Optional[str] = None
    achievements: Optional[str] = None
    portfolio: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class ResumeOwnerResponse(BaseModel):
    """Public owner details shown alongside a resume (no credentials or roles)."""
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class ResumeWithOwnerResponse(ResumeResponse):
    """Resume as returned by the admin listing."""
    user: ResumeOwnerResponse


class ResumeEnvelope(BaseModel):
    success: bool = True
    message: str
    profile: ResumeResponse
    timestamp: str


class ResumeListEnvelope(BaseModel):
    success: bool = True
    message: str
    count: int
    profiles: List[ResumeWithOwnerResponse]
    timestamp: str


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str
    timestamp: str
