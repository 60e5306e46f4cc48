"""
User model.

Users are owned by the authentication service; this API reads them to resolve
the authenticated principal and to project owner details onto resumes.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from sqlalchemy.orm import relationship
from optahire.core.database import Base


class User(Base):
    """
    Marketplace account. A user may hold several roles at once.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Profile
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(20), nullable=True)

    # Managed by the authentication service, never exposed
    hashed_password = Column(String, nullable=False)

    # Verification
    is_verified = Column(Boolean, default=False, nullable=False)
    is_linkedin_verified = Column(Boolean, default=False, nullable=False)

    # Roles
    is_admin = Column(Boolean, default=False, nullable=False)
    is_recruiter = Column(Boolean, default=False, nullable=False)
    is_interviewer = Column(Boolean, default=False, nullable=False)
    is_candidate = Column(Boolean, default=False, nullable=False)
    is_top_rated = Column(Boolean, default=False, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    resume = relationship("Resume", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
