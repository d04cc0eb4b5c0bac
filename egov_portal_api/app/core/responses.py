"""
Helpers for the uniform response envelope.

Every successful response has the shape
``{"success": true, "data": ..., "message": ..., "pagination": ...}``
where ``message`` and ``pagination`` appear only when relevant.  Error
envelopes are produced by the exception handlers in ``core.errors``.
"""

from typing import Any, Dict, Optional

from .query import Page


def ok(data: Any = None, message: Optional[str] = None, page: Optional[Page] = None, **extra: Any) -> Dict[str, Any]:
    """Build a success envelope.

    ``extra`` keys are added at the top level, next to ``data``; a few
    election endpoints return such siblings (``total``, ``categories``).
    """
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if page is not None:
        body["pagination"] = page.meta()
    body.update(extra)
    return body
