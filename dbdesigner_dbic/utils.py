"""Utility functions for loading DBDesigner4 models.

This module provides functions for loading model documents from files and
URLs with proper error handling and validation.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger
from .reader import ReaderError

logger = get_logger(__name__)


def load_model_from_file(file_path: str | Path) -> tuple[str, bytes]:
    """Load a model document from a local file.

    Args:
        file_path: Path to the XML file.

    Returns:
        Tuple of (source description, raw XML document).

    Raises:
        ReaderError: If the file doesn't exist or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load model from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise ReaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".xml":
        logger.warning(f"File does not have .xml extension: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise ReaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Successfully loaded model from {file_path}")
    return str(file_path), data


def load_model_from_url(url: str, timeout: int = 30) -> tuple[str, bytes]:
    """Load a model document from a URL.

    Args:
        url: URL to fetch the XML document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, raw XML document).

    Raises:
        ReaderError: If the URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load model from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise ReaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise ReaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise ReaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise ReaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}")
        raise ReaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "xml" not in content_type and not url.endswith(".xml"):
        logger.warning(f"URL {url} does not have an XML content type: {content_type}")

    logger.info(f"Successfully loaded model from {url}")
    return url, response.content


def load_model(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, bytes]:
    """Load a model document from either a file or a URL.

    Args:
        file_path: Path to local XML file (mutually exclusive with url).
        url: URL to fetch the document from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, raw XML document).

    Raises:
        ReaderError: If neither or both parameters are provided, or loading fails.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise ReaderError("no input file defined")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise ReaderError("Cannot specify both file_path and url")

    if file_path:
        return load_model_from_file(file_path)
    return load_model_from_url(url, timeout)
