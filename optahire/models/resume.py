"""
Resume database model.

Each user owns at most one resume profile. The unique index on user_id is the
real enforcement point for that rule; the API's lookup before insert is only
a fast path.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, JSON, func
from sqlalchemy.orm import relationship
from optahire.core.database import Base


class Resume(Base):
    """
    A user's resume profile, replaced as a whole on every update.
    """
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    # Required profile fields
    title = Column(String(100), nullable=False)
    summary = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False)  # List of skill names
    experience = Column(Text, nullable=False)
    education = Column(Text, nullable=False)

    # Optional profile fields
    headline = Column(String(200), nullable=True)
    industry = Column(String(100), nullable=True)
    availability = Column(String(50), nullable=True)
    company = Column(String(100), nullable=True)
    achievements = Column(Text, nullable=True)
    portfolio = Column(String(255), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="resume")

    def __repr__(self):
        return f"<Resume(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
