"""Supported output formats and their container signatures."""

from enum import Enum

from dummyfile.core.exceptions import UnsupportedFormatError

ZIP_SIGNATURE = b"PK"
PDF_SIGNATURE = b"%PDF"
JPEG_SIGNATURE = b"\xff\xd8"


class FileFormat(str, Enum):
    """Output formats the generator can synthesize."""

    DOCX = "docx"
    XLSX = "xlsx"
    PPTX = "pptx"
    PDF = "pdf"
    JPG = "jpg"

    @property
    def extension(self) -> str:
        """File extension including the leading dot."""
        return f".{self.value}"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @property
    def signature(self) -> bytes:
        """Leading bytes every encoding of this format starts with."""
        return _SIGNATURES[self]

    @property
    def is_zip_container(self) -> bool:
        return self.signature == ZIP_SIGNATURE

    @classmethod
    def from_name(cls, name: "str | FileFormat") -> "FileFormat":
        """Resolve a format from a name or extension.

        Accepts ``"DOCX"``, ``".docx"`` and the ``"jpeg"`` alias.

        Raises:
            UnsupportedFormatError: If the name is not a known format
        """
        if isinstance(name, FileFormat):
            return name
        key = str(name).strip().lower().lstrip(".")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedFormatError(str(name)) from None


_MIME_TYPES = {
    FileFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    FileFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    FileFormat.PPTX: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    FileFormat.PDF: "application/pdf",
    FileFormat.JPG: "image/jpeg",
}

_SIGNATURES = {
    FileFormat.DOCX: ZIP_SIGNATURE,
    FileFormat.XLSX: ZIP_SIGNATURE,
    FileFormat.PPTX: ZIP_SIGNATURE,
    FileFormat.PDF: PDF_SIGNATURE,
    FileFormat.JPG: JPEG_SIGNATURE,
}

_ALIASES = {"jpeg": "jpg"}


def has_signature(data: bytes, file_format: FileFormat) -> bool:
    """Check that data starts with the signature of the given format."""
    return data.startswith(file_format.signature)
