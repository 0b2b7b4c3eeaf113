from ._registry import (
    DEFAULT_DOCUMENT_MIME_TYPE,
    get_serializer,
    guess_mime_type,
    has_serializer,
    registered_types,
    serializer_for_path,
)
from ._serializer import Serializer

__all__ = [
    "DEFAULT_DOCUMENT_MIME_TYPE",
    "get_serializer",
    "guess_mime_type",
    "has_serializer",
    "registered_types",
    "serializer_for_path",
    "Serializer",
]
