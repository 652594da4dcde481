"""Core generator utilities and configuration."""

from dummyfile.core.logging import configure_logging, generate_run_id, get_logger

__all__ = ["configure_logging", "generate_run_id", "get_logger"]
