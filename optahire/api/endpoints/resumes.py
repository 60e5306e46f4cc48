"""
Resume endpoints.

Each authenticated user manages exactly one resume profile through the /user
routes. Admins can list every profile with its owner's contact details.

- POST   /resumes        Create the current user's resume
- GET    /resumes/user   Get the current user's resume
- PUT    /resumes/user   Replace the current user's resume
- DELETE /resumes/user   Delete the current user's resume
- GET    /resumes        List all resumes (admin only)
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from optahire.core.database import get_db
from optahire.core.deps import get_current_user, get_admin_user
from optahire.core.responses import envelope
from optahire.crud import resume as resume_crud
from optahire.crud.resume import ResumeAlreadyExistsError
from optahire.models.user import User
from optahire.schemas.resume import (
    ResumeRequest,
    ResumeResponse,
    ResumeWithOwnerResponse,
    ResumeEnvelope,
    ResumeListEnvelope,
    MessageEnvelope,
)

router = APIRouter(prefix="/resumes", tags=["Resumes"])
logger = logging.getLogger(__name__)

RESUME_NOT_FOUND = "Resume not found for this user."
RESUME_EXISTS = "Resume already exists for this user."


def _get_own_resume(db: Session, user: User):
    resume = resume_crud.get_by_user(db, user.id)
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RESUME_NOT_FOUND)
    return resume


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ResumeEnvelope)
def create_user_resume(
    request: ResumeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Create the current user's resume.

    All required fields (title, summary, skills, experience, education) must
    be present. A user can hold only one resume; a second attempt returns 409.
    """
    data = request.model_dump()

    # Fast path; the unique index on resumes.user_id has the final say
    if resume_crud.get_by_user(db, current_user.id):
        logger.warning(f"User {current_user.id} already has a resume")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=RESUME_EXISTS)

    try:
        resume = resume_crud.create(db, current_user.id, data)
    except ResumeAlreadyExistsError:
        logger.warning(f"Concurrent resume creation for user {current_user.id} hit the unique constraint")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=RESUME_EXISTS)

    logger.info(f"Created resume {resume.id} for user {current_user.id}")

    return envelope(
        "Resume created successfully.",
        profile=ResumeResponse.model_validate(resume),
    )


@router.get("/user", response_model=ResumeEnvelope)
def get_user_resume(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get the current user's resume."""
    resume = _get_own_resume(db, current_user)

    return envelope(
        "Resume retrieved successfully.",
        profile=ResumeResponse.model_validate(resume),
    )


@router.put("/user", response_model=ResumeEnvelope)
def update_user_resume(
    request: ResumeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Replace the current user's resume.

    This is a full replacement, not a patch: required fields must be sent
    again and optional fields left out are cleared. Never creates a resume.
    """
    data = request.model_dump()
    resume = _get_own_resume(db, current_user)

    resume = resume_crud.update(db, resume, data)
    logger.info(f"Updated resume {resume.id} for user {current_user.id}")

    return envelope(
        "Resume updated successfully.",
        profile=ResumeResponse.model_validate(resume),
    )


@router.delete("/user", response_model=MessageEnvelope)
def delete_user_resume(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Permanently delete the current user's resume."""
    resume = _get_own_resume(db, current_user)
    resume_id = resume.id

    resume_crud.delete(db, resume)
    logger.info(f"Deleted resume {resume_id} for user {current_user.id}")

    return envelope("Resume deleted successfully.")


@router.get("", response_model=ResumeListEnvelope)
def get_all_user_resumes(
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    List every resume across all users (admin only).

    Each profile includes its owner's name, email and phone.
    """
    resumes = resume_crud.get_all_with_owner(db)

    if not resumes:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No profiles found.")

    profiles = [ResumeWithOwnerResponse.model_validate(r) for r in resumes]
    logger.info(f"Admin {admin_user.id} listed {len(profiles)} resumes")

    return envelope(
        "Profiles retrieved successfully.",
        count=len(profiles),
        profiles=profiles,
    )
