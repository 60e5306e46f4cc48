"""
CRUD operations for Resume model.

Implements the Repository pattern to encapsulate all database operations
for resumes. Every function works on resumes keyed by their owner.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from optahire.models.resume import Resume

logger = logging.getLogger(__name__)


class ResumeAlreadyExistsError(Exception):
    """The owner already has a resume (unique constraint on resumes.user_id)."""

    def __init__(self, user_id: int):
        super().__init__(f"Resume already exists for user {user_id}")
        self.user_id = user_id


def get_by_user(db: Session, user_id: int) -> Optional[Resume]:
    """
    Retrieve the resume owned by a user.

    Returns:
        Resume instance if found, None otherwise
    """
    return db.query(Resume).filter(Resume.user_id == user_id).first()


def create(db: Session, user_id: int, data: Dict[str, Any]) -> Resume:
    """
    Create a resume for a user.

    Args:
        db: Database session
        user_id: Owner of the new resume
        data: Validated field values

    Returns:
        Created Resume instance with id

    Raises:
        ResumeAlreadyExistsError: If the database already holds a resume for this user
        IntegrityError: For any other constraint violation
    """
    db_resume = Resume(user_id=user_id, **data)
    db.add(db_resume)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if get_by_user(db, user_id) is not None:
            raise ResumeAlreadyExistsError(user_id) from e
        logger.error(f"Resume insert for user {user_id} violated a constraint: {e.orig}")
        raise

    db.refresh(db_resume)
    return db_resume


def update(db: Session, resume: Resume, data: Dict[str, Any]) -> Resume:
    """
    Replace every field of a resume with validated values.

    Fields omitted from the submission arrive here as None and clear the
    stored value.
    """
    for field, value in data.items():
        setattr(resume, field, value)

    db.commit()
    db.refresh(resume)
    return resume


def delete(db: Session, resume: Resume) -> None:
    """Permanently delete a resume."""
    db.delete(resume)
    db.commit()


def get_all_with_owner(db: Session) -> List[Resume]:
    """
    Retrieve every resume with its owner loaded in the same query.
    """
    return (
        db.query(Resume)
        .options(joinedload(Resume.user))
        .order_by(Resume.id)
        .all()
    )
