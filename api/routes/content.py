"""
Content endpoints.

Serves the CV text as plain text.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..deps import ServicesDep

router = APIRouter()


@router.get("/cv", response_class=PlainTextResponse)
def get_cv_content(services: ServicesDep):
    """
    CV text from the bundled cv.txt.

    Always 200: a missing or unreadable file yields an `ERROR: ...` body.
    """
    return PlainTextResponse(services.cv.get_cv_content())
