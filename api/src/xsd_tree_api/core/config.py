#!/usr/bin/env python3
"""
Configuration settings for XSD upload handling.

Every value can be overridden via environment variables so that limits can be
raised for deployments that parse large enterprise schemas.
"""

import logging

from .env_utils import getenv_int, getenv_list

logger = logging.getLogger(__name__)

DEFAULT_MAX_SCHEMA_FILE_SIZE_MB = 20
DEFAULT_ALLOWED_EXTENSIONS = [".xsd"]
DEFAULT_ALLOWED_CONTENT_TYPES = ["application/xml", "text/xml"]


class ParseConfig:
    """Upload validation limits for the XSD parse endpoint.

    Settings are read when the instance is created, so tests and embedding
    applications can build a fresh instance after changing the environment.
    """

    def __init__(self):
        # Uploads larger than this are rejected before parsing
        self.MAX_SCHEMA_FILE_SIZE_MB = getenv_int("MAX_SCHEMA_FILE_SIZE_MB", DEFAULT_MAX_SCHEMA_FILE_SIZE_MB)

        self.ALLOWED_EXTENSIONS = [
            ext.lower() for ext in getenv_list("XSD_ALLOWED_EXTENSIONS", DEFAULT_ALLOWED_EXTENSIONS)
        ]
        self.ALLOWED_CONTENT_TYPES = [
            content_type.lower()
            for content_type in getenv_list("XSD_ALLOWED_CONTENT_TYPES", DEFAULT_ALLOWED_CONTENT_TYPES)
        ]
        logger.debug(
            f"Upload limits: max={self.MAX_SCHEMA_FILE_SIZE_MB}MB, "
            f"extensions={self.ALLOWED_EXTENSIONS}, content_types={self.ALLOWED_CONTENT_TYPES}"
        )

    @property
    def max_file_size_bytes(self) -> int:
        return self.MAX_SCHEMA_FILE_SIZE_MB * 1024 * 1024

    def is_allowed_filename(self, filename: str | None) -> bool:
        """Check the upload's filename against the allowed extensions (case-insensitive)."""
        if not filename:
            return False
        return any(filename.lower().endswith(ext) for ext in self.ALLOWED_EXTENSIONS)

    def is_allowed_content_type(self, content_type: str | None) -> bool:
        """Check the upload's content type.

        A missing content type is accepted; parameters such as `; charset=utf-8`
        are ignored.
        """
        if not content_type:
            return True
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type in self.ALLOWED_CONTENT_TYPES


# Singleton instance
parse_config = ParseConfig()
