"""Generate dummy files of an exact size for upload and size-limit testing.

Writes ``<name>.docx``, ``.pptx``, ``.xlsx``, ``.pdf`` and ``.jpg`` to the
output directory, each padded to the requested byte size.

Usage:
    python -m dummyfile.scripts.generate_files
    python -m dummyfile.scripts.generate_files --size 10MiB --name 10MB
    dummyfile-generate --size 1MB --format docx --format pdf --verify

Examples:
    # Default run: 50 MiB of every format, named 50MB.*
    python -m dummyfile.scripts.generate_files

    # Exact size even when the container would overflow (may corrupt it)
    python -m dummyfile.scripts.generate_files --size 20KB --on-oversize truncate
"""

import argparse
import sys

import structlog

from dummyfile.config import get_settings
from dummyfile.core.exceptions import DummyFileError
from dummyfile.core.logging import configure_logging, generate_run_id, get_logger
from dummyfile.core.sizing import OversizePolicy, parse_size
from dummyfile.core.storage import LocalStorageBackend
from dummyfile.services.generator import DummyFileGenerator, WrittenFile

logger = get_logger(__name__)


def print_result(written: WrittenFile) -> None:
    """Print the per-file report line.

    Args:
        written: Result of a create-and-write call
    """
    if written.written:
        print(f"{written.path}: {written.size} bytes")
    else:
        print(
            f"{written.path}: skipped ({written.size} bytes exceeds "
            f"target {written.target_size})"
        )


def run_generation(
    size: int,
    name: str,
    output_dir: str,
    formats: list[str],
    on_oversize: str,
    verify: bool = False,
) -> int:
    """Generate and write every requested format.

    Args:
        size: Target size in bytes
        name: Base file name without extension
        output_dir: Directory files are written to
        formats: Format names in generation order
        on_oversize: Oversize policy name
        verify: Check each written file's detected type with libmagic

    Returns:
        Exit code (0 for success, 1 if verification failed, 2 on bad input)
    """
    structlog.contextvars.bind_contextvars(run_id=generate_run_id())
    try:
        storage = LocalStorageBackend(output_dir)
        generator = DummyFileGenerator(
            name,
            size,
            on_oversize=on_oversize,
            storage=storage,
        )

        validator = None
        if verify:
            from dummyfile.services.file_validation import FileValidationService

            validator = FileValidationService()

        logger.info(
            "generation_started",
            base_name=name,
            target_size=size,
            formats=formats,
            on_oversize=generator.on_oversize.value,
        )

        failed: list[WrittenFile] = []

        def report(written: WrittenFile) -> None:
            print_result(written)
            if validator is None or not written.written:
                return
            is_valid, detected = validator.validate_format(
                storage.read(written.path.name), written.file_format
            )
            if not is_valid:
                print(f"  type check failed: detected {detected}")
                failed.append(written)

        generator.create_and_write_all(formats, on_written=report)
        return 1 if failed else 0

    except DummyFileError as e:
        logger.error("generation_failed", error=str(e))
        print(f"ERROR: {e}")
        return 2

    finally:
        structlog.contextvars.unbind_contextvars("run_id")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Generate DOCX, XLSX, PPTX, PDF and JPG files of an exact size",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 50 MiB of every format
  python -m dummyfile.scripts.generate_files

  # 1 MiB DOCX and PDF only, checked with libmagic
  python -m dummyfile.scripts.generate_files --size 1MiB --format docx --format pdf --verify
        """,
    )
    parser.add_argument(
        "--size",
        type=parse_size,
        default=settings.target_size,
        help="Target size, e.g. 1048576, 512KB or 10MiB (default: %(default)s bytes)",
    )
    parser.add_argument(
        "--name",
        default=settings.base_name,
        help="Base file name without extension (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.output_dir,
        help="Directory to write files to (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        help="Format to generate; repeat for several (default: all)",
    )
    parser.add_argument(
        "--on-oversize",
        choices=[policy.value for policy in OversizePolicy],
        default=settings.on_oversize,
        help="Handling of content larger than the target (default: %(default)s)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the detected type of every written file (requires libmagic)",
    )

    args = parser.parse_args(argv)

    # Configure logging
    configure_logging()

    exit_code = run_generation(
        size=args.size,
        name=args.name,
        output_dir=args.output_dir,
        formats=args.formats or settings.formats,
        on_oversize=args.on_oversize,
        verify=args.verify,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
