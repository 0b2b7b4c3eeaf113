import json
import logging
from pathlib import Path

import pydantic
import yaml

from quadroots.data import PolynomialRecord
from quadroots.exceptions import DocumentError
from quadroots.serialization import guess_mime_type, serializer_for_path

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = Path("polynomial.json")


def write_document(record: PolynomialRecord, path: str | Path) -> None:
    """Serialize ``record`` to ``path``, replacing whatever the file held.

    The serializer is picked from the file suffix, JSON unless the suffix
    says otherwise.

    Raises:
        quadroots.exceptions.DocumentError: If the file cannot be written.
    """
    path = Path(path)
    serializer = serializer_for_path(path)
    try:
        serializer.encode_to_path(record.to_document(), path)
    except OSError as err:
        raise DocumentError(f"Could not write document {path}: {err}") from err
    logger.info(f"Wrote {guess_mime_type(path)} document to {path}")


def read_document(path: str | Path) -> PolynomialRecord:
    """Load a record previously stored with :func:`write_document`.

    Raises:
        quadroots.exceptions.DocumentError: If the file is missing, cannot be
            parsed, or does not describe a polynomial record.
    """
    path = Path(path)
    serializer = serializer_for_path(path)
    try:
        document = serializer.decode_from_path(path)
    except OSError as err:
        raise DocumentError(f"Could not read document {path}: {err}") from err
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as err:
        raise DocumentError(f"Could not parse document {path}: {err}") from err

    try:
        record = PolynomialRecord.from_document(document)
    except pydantic.ValidationError as err:
        raise DocumentError(
            f"Document {path} is not a polynomial record:\n{err}"
        ) from err
    logger.info(f"Read document from {path}")
    return record
