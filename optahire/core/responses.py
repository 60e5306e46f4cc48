"""
Success envelope shared by every endpoint.
"""

from datetime import datetime, timezone
from typing import Any, Dict


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


def envelope(message: str, **payload: Any) -> Dict[str, Any]:
    """
    Wrap a payload in the standard success envelope.

    Example:
        envelope("Resume retrieved successfully.", profile=profile)
        -> {"success": True, "message": "...", "profile": {...}, "timestamp": "..."}
    """
    return {
        "success": True,
        "message": message,
        **payload,
        "timestamp": utc_timestamp(),
    }
