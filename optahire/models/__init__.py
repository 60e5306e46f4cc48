"""
Database models package.
"""

from optahire.models.user import User
from optahire.models.resume import Resume

__all__ = ["User", "Resume"]
