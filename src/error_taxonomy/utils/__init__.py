"""Utility modules shared across the error taxonomy layer."""

from .identifiers import DefaultErrorIDGenerator, ErrorIDGenerator, generate_error_id


__all__ = ["DefaultErrorIDGenerator", "ErrorIDGenerator", "generate_error_id"]
