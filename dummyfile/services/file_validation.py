"""File validation service for verifying generated content via magic numbers."""

import magic

from dummyfile.core.formats import FileFormat
from dummyfile.core.logging import get_logger

logger = get_logger(__name__)


# Maps each generated format to the set of types libmagic may report for it
MAGIC_MIME_MAPPING: dict[FileFormat, set[str]] = {
    # Office Open XML files are ZIP archives internally
    FileFormat.DOCX: {
        FileFormat.DOCX.mime_type,
        "application/zip",
    },
    FileFormat.XLSX: {
        FileFormat.XLSX.mime_type,
        "application/zip",
    },
    FileFormat.PPTX: {
        FileFormat.PPTX.mime_type,
        "application/zip",
    },
    FileFormat.PDF: {"application/pdf"},
    FileFormat.JPG: {"image/jpeg"},
}


class FileValidationService:
    """Service for validating generated content against its format."""

    def __init__(self) -> None:
        """Initialize the magic library."""
        self._magic = magic.Magic(mime=True)

    def get_actual_mime_type(self, content: bytes) -> str:
        """
        Detect the actual MIME type of file content using magic numbers.

        Args:
            content: File content bytes

        Returns:
            Detected MIME type string
        """
        return self._magic.from_buffer(content)

    def validate_format(
        self,
        content: bytes,
        file_format: FileFormat,
    ) -> tuple[bool, str]:
        """
        Validate that generated content is detected as the expected format.

        Args:
            content: File content bytes
            file_format: The format the content was generated as

        Returns:
            Tuple of (is_valid, detected_mime_type)
        """
        detected_mime = self.get_actual_mime_type(content)
        is_valid = detected_mime in MAGIC_MIME_MAPPING[file_format]

        if not is_valid:
            logger.warning(
                "file_type_mismatch",
                expected_format=file_format.value,
                detected_mime_type=detected_mime,
            )
        else:
            logger.debug(
                "file_type_validated",
                expected_format=file_format.value,
                detected_mime_type=detected_mime,
            )

        return is_valid, detected_mime
