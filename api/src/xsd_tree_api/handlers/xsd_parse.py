#!/usr/bin/env python3

import logging

from fastapi import HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from ..core.config import ParseConfig, parse_config
from ..models.models import ErrorDetail, XsdNodeModel, XsdParseResponse
from ..services.domain.schema.errors import EmptyInputError, XsdParseError
from ..services.xsd_parse_service import parse_xsd

logger = logging.getLogger(__name__)

FILE_REQUIRED = "FILE_REQUIRED"
UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
FILE_TOO_LARGE = "FILE_TOO_LARGE"
INTERNAL_ERROR = "INTERNAL_ERROR"


def _error(status_code: int, code: str, message: str, **context) -> HTTPException:
    detail = ErrorDetail(code=code, message=message, context=context)
    return HTTPException(status_code=status_code, detail=detail.model_dump())


def _validate_upload(file: UploadFile | None, config: ParseConfig) -> None:
    """Reject uploads that are missing or not XSD files before reading them."""
    if file is None or not file.filename:
        logger.warning("Upload failed: no file uploaded")
        raise _error(400, FILE_REQUIRED, "An XSD file is required.")

    if not config.is_allowed_filename(file.filename) or not config.is_allowed_content_type(file.content_type):
        logger.warning(f"Upload failed: unsupported file type - {file.filename} ({file.content_type})")
        raise _error(
            415,
            UNSUPPORTED_FILE_TYPE,
            "Only XSD files are supported.",
            filename=file.filename,
            content_type=file.content_type,
        )


async def handle_xsd_upload(file: UploadFile | None, config: ParseConfig = parse_config) -> XsdParseResponse:
    """Validate an uploaded XSD file and parse it into an element tree.

    Args:
        file: Uploaded XSD file
        config: Upload limits (defaults to the environment-driven singleton)

    Returns:
        XsdParseResponse with the root of the parsed tree

    Raises:
        HTTPException: 400 for a missing/empty file, 415 for a non-XSD upload,
            413 when over the size limit, 422 when the schema cannot be turned
            into a tree, 500 on unexpected failures
    """
    _validate_upload(file, config)

    content = await file.read()
    logger.info(f"Received XSD file upload: name={file.filename}, size={len(content)} bytes")

    if len(content) > config.max_file_size_bytes:
        logger.warning(f"Upload failed: {file.filename} exceeds {config.MAX_SCHEMA_FILE_SIZE_MB}MB")
        raise _error(
            413,
            FILE_TOO_LARGE,
            f"File size exceeds {config.MAX_SCHEMA_FILE_SIZE_MB}MB limit",
            filename=file.filename,
        )

    try:
        # Expansion is CPU bound; keep it off the event loop
        root = await run_in_threadpool(parse_xsd, content, file.filename)
    except EmptyInputError as e:
        raise _error(400, e.code, str(e), filename=file.filename) from e
    except XsdParseError as e:
        raise _error(422, e.code, str(e), filename=file.filename) from e
    except Exception as e:
        logger.error(f"Unexpected error while parsing XSD {file.filename}: {e}", exc_info=True)
        raise _error(500, INTERNAL_ERROR, f"Internal error: {e}") from e

    logger.info(f"XSD parsed successfully. Root node: {root.name}")
    return XsdParseResponse(
        status="success",
        file_name=file.filename,
        root=XsdNodeModel.model_validate(root.to_dict()),
    )
