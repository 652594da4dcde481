"""Size-fitting dummy file generator.

Synthesizes format-appropriate filler content, encodes it, normalizes the
bytes to the target size and optionally writes them to
``<base_name><extension>``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import structlog

from dummyfile.config import get_settings
from dummyfile.core.exceptions import ConfigurationError
from dummyfile.core.formats import FileFormat
from dummyfile.core.logging import get_logger
from dummyfile.core.sizing import (
    OversizePolicy,
    SizeAction,
    SizedContent,
    make_exact_size,
    validate_target_size,
)
from dummyfile.core.storage import LocalStorageBackend, StorageBackend, get_storage
from dummyfile.services.docx_builder import DocxBuilder
from dummyfile.services.filler import FillPlan, FormatBuilder
from dummyfile.services.jpg_builder import JpgBuilder
from dummyfile.services.pdf_builder import PdfBuilder
from dummyfile.services.pptx_builder import PptxBuilder
from dummyfile.services.xlsx_builder import XlsxBuilder

logger = get_logger(__name__)

# Order the CLI writes files in by default
DEFAULT_ORDER = (
    FileFormat.DOCX,
    FileFormat.PPTX,
    FileFormat.XLSX,
    FileFormat.PDF,
    FileFormat.JPG,
)


@dataclass(frozen=True)
class WrittenFile:
    """Result of a create-and-write call."""

    file_format: FileFormat
    path: Path
    size: int
    target_size: int
    action: SizeAction
    written: bool = True


class DummyFileGenerator:
    """Generate dummy files of an exact byte size.

    Not thread-safe: ``target_size`` may be reassigned between calls and
    is read without synchronization. Use one instance per thread.

    Example:
        generator = DummyFileGenerator("upload_test", 1024 * 1024)
        data = generator.create_docx()
        assert len(data) == 1024 * 1024
    """

    def __init__(
        self,
        base_name: str,
        target_size: int,
        *,
        on_oversize: OversizePolicy | str | None = None,
        safety_fraction: float | None = None,
        jpeg_quality: int | None = None,
        storage: StorageBackend | None = None,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            base_name: File name without extension
            target_size: Requested size in bytes
            on_oversize: Policy for content larger than the target
            safety_fraction: Share of the target content synthesis stops at
            jpeg_quality: JPEG encoder quality (1-95)
            storage: Backend files are written to (default: get_storage())
            log: Logger for size and write events

        Raises:
            ConfigurationError: If base_name is empty or a value is out of range
        """
        settings = get_settings()

        if not base_name:
            raise ConfigurationError("Base name must not be empty")
        self.base_name = base_name
        self.target_size = target_size

        try:
            self.on_oversize = OversizePolicy(on_oversize or settings.on_oversize)
        except ValueError:
            raise ConfigurationError(
                f"Unknown oversize policy: {on_oversize!r}"
            ) from None
        self.safety_fraction = (
            settings.safety_fraction if safety_fraction is None else safety_fraction
        )
        if not 0 < self.safety_fraction < 1:
            raise ConfigurationError(
                f"Safety fraction must be between 0 and 1, got {self.safety_fraction}"
            )
        self.jpeg_quality = settings.jpeg_quality if jpeg_quality is None else jpeg_quality
        if not 1 <= self.jpeg_quality <= 95:
            raise ConfigurationError(
                f"JPEG quality must be between 1 and 95, got {self.jpeg_quality}"
            )

        self.storage = storage or get_storage()
        self.log = log or logger

    @property
    def target_size(self) -> int:
        return self._target_size

    @target_size.setter
    def target_size(self, value: int) -> None:
        self._target_size = validate_target_size(value)

    def _builder(self, file_format: FileFormat) -> FormatBuilder | JpgBuilder:
        if file_format is FileFormat.JPG:
            return JpgBuilder(self.target_size, quality=self.jpeg_quality)
        plan = FillPlan(safety_fraction=self.safety_fraction)
        return _BUILDERS[file_format](self.target_size, plan)

    def generate(self, file_format: FileFormat | str) -> SizedContent:
        """
        Synthesize, encode and normalize one file.

        Args:
            file_format: Format or format name

        Returns:
            SizedContent with the normalized bytes

        Raises:
            UnsupportedFormatError: If the format name is unknown
        """
        file_format = FileFormat.from_name(file_format)
        encoded = self._builder(file_format).build()
        result = make_exact_size(
            encoded, self.target_size, self.on_oversize, log=self.log
        )
        self.log.debug(
            "file_generated",
            format=file_format.value,
            target_size=self.target_size,
            encoded_size=result.encoded_size,
            action=result.action.value,
        )
        return result

    def create_docx(self) -> bytes:
        return self.generate(FileFormat.DOCX).data

    def create_xlsx(self) -> bytes:
        return self.generate(FileFormat.XLSX).data

    def create_pptx(self) -> bytes:
        return self.generate(FileFormat.PPTX).data

    def create_pdf(self) -> bytes:
        return self.generate(FileFormat.PDF).data

    def create_jpg(self) -> bytes:
        return self.generate(FileFormat.JPG).data

    def filename_for(self, file_format: FileFormat | str) -> str:
        """Output file name for a format."""
        return self.base_name + FileFormat.from_name(file_format).extension

    def write_file(self, filename: str, data: bytes) -> int:
        """
        Write bytes through the storage backend.

        Returns:
            Size of the written file in bytes

        Raises:
            OSError: On permission, disk space or other filesystem errors
        """
        path = self.storage.save(data, filename)
        size = self.storage.size(filename)
        self.log.info("file_written", path=str(path), size=size)
        return size

    def create_and_write(self, file_format: FileFormat | str) -> WrittenFile:
        """
        Generate a file and write it as ``<base_name><extension>``.

        Content that still exceeds the target (keep-oversized policy) is
        not written.
        """
        file_format = FileFormat.from_name(file_format)
        result = self.generate(file_format)
        filename = self.filename_for(file_format)

        if result.exceeds_target:
            self.log.warning(
                "file_not_written_oversized",
                filename=filename,
                size=result.size,
                target_size=self.target_size,
            )
            return WrittenFile(
                file_format=file_format,
                path=self._path_for(filename),
                size=result.size,
                target_size=self.target_size,
                action=result.action,
                written=False,
            )

        size = self.write_file(filename, result.data)
        return WrittenFile(
            file_format=file_format,
            path=self._path_for(filename),
            size=size,
            target_size=self.target_size,
            action=result.action,
        )

    def _path_for(self, filename: str) -> Path:
        if isinstance(self.storage, LocalStorageBackend):
            return self.storage.get_path(filename)
        return Path(filename)

    def create_and_write_docx(self) -> WrittenFile:
        return self.create_and_write(FileFormat.DOCX)

    def create_and_write_xlsx(self) -> WrittenFile:
        return self.create_and_write(FileFormat.XLSX)

    def create_and_write_pptx(self) -> WrittenFile:
        return self.create_and_write(FileFormat.PPTX)

    def create_and_write_pdf(self) -> WrittenFile:
        return self.create_and_write(FileFormat.PDF)

    def create_and_write_jpg(self) -> WrittenFile:
        return self.create_and_write(FileFormat.JPG)

    def create_and_write_all(
        self,
        formats: list[FileFormat | str] | None = None,
        on_written: Callable[[WrittenFile], None] | None = None,
    ) -> list[WrittenFile]:
        """
        Create and write every requested format in order.

        Args:
            formats: Formats or format names (default: DEFAULT_ORDER)
            on_written: Called with each result as soon as it is written

        Raises:
            UnsupportedFormatError: If a format name is unknown; nothing is
                written in that case
        """
        selected = [FileFormat.from_name(f) for f in formats] if formats else DEFAULT_ORDER
        results = []
        for file_format in selected:
            written = self.create_and_write(file_format)
            if on_written is not None:
                on_written(written)
            results.append(written)
        return results


_BUILDERS: dict[FileFormat, type[FormatBuilder]] = {
    FileFormat.DOCX: DocxBuilder,
    FileFormat.XLSX: XlsxBuilder,
    FileFormat.PPTX: PptxBuilder,
    FileFormat.PDF: PdfBuilder,
}
