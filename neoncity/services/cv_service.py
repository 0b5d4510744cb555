"""
CV Service.

Reads the bundled CV text on every request.
"""

import logging
from pathlib import Path

from .base import BaseService

logger = logging.getLogger(__name__)

CV_FILE_NAME = "cv.txt"


class CvService(BaseService):
    """Service for the About Me / CV section."""

    @property
    def cv_path(self) -> Path:
        return self.config.cv_path

    def get_cv_content(self) -> str:
        """
        Return the CV text.

        Failures are reported inside the returned text; this never raises.
        """
        path = self.cv_path

        try:
            if not path.is_file():
                logger.warning(f"CV resource not found at {path}")
                return f"ERROR: '{CV_FILE_NAME}' not found in resources. Please create the file."

            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.exception(f"Could not read CV resource at {path}")
            return f"ERROR: Could not read '{CV_FILE_NAME}'. Details: {e}"
