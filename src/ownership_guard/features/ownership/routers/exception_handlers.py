"""
Exception types and handlers for the FastAPI integration.

Ownership rejections are raised as ``OwnershipHTTPException``; with structured
responses enabled they are rendered as RFC 7807 problem documents.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from ....config.constants import PROBLEM_CONTENT_TYPE

logger = logging.getLogger(__name__)


class OwnershipHTTPException(HTTPException):
    """HTTP rejection produced by the ownership dependency."""

    def __init__(
        self,
        status_code: int,
        title: str,
        structured: bool = True,
        headers: Optional[Dict[str, str]] = None,
    ):
        # Plain mode keeps the framework's default reason-phrase detail
        super().__init__(
            status_code=status_code,
            detail=title if structured else None,
            headers=headers,
        )
        self.title = title
        self.structured = structured

    def to_problem(self) -> Dict[str, Any]:
        """Render as an RFC 7807 problem document."""
        return {
            "type": "about:blank",
            "title": self.title,
            "status": self.status_code,
        }


async def ownership_exception_handler(request: Request, exc: OwnershipHTTPException) -> JSONResponse:
    """Render ownership rejections as problem documents or bare status responses."""
    if exc.structured:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_problem(),
            headers=exc.headers,
            media_type=PROBLEM_CONTENT_TYPE,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register ownership exception handlers on the application."""
    app.add_exception_handler(OwnershipHTTPException, ownership_exception_handler)
