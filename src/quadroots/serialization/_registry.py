import mimetypes
from pathlib import Path

from pyrsistent import pmap
from pyrsistent.typing import PMap

from ._serializer import Serializer, _json_serializer, _yaml_serializer

DEFAULT_DOCUMENT_MIME_TYPE = "application/json"

_registry: PMap[str, Serializer] = pmap(
    {
        "application/json": _json_serializer(),
        "application/x-yaml": _yaml_serializer(),
    }
)

_SUFFIX_TYPES: PMap[str, str] = pmap(
    {
        ".json": "application/json",
        ".yml": "application/x-yaml",
        ".yaml": "application/x-yaml",
    }
)


def has_serializer(mime: str) -> bool:
    return mime in _registry


def get_serializer(mime: str) -> Serializer:
    if mime not in _registry:
        raise ValueError(f"no serializer for {mime}")
    return _registry[mime]


def registered_types() -> tuple[str, ...]:
    return tuple(sorted(_registry.keys()))


def guess_mime_type(path: str | Path) -> str:
    """Guess the document type from the file suffix.

    Unknown suffixes fall back to :data:`DEFAULT_DOCUMENT_MIME_TYPE`.
    """
    suffix = Path(path).suffix.lower()
    if suffix in _SUFFIX_TYPES:
        return _SUFFIX_TYPES[suffix]
    guess = mimetypes.guess_type(str(path))[0]
    if guess and has_serializer(guess):
        return guess
    return DEFAULT_DOCUMENT_MIME_TYPE


def serializer_for_path(path: str | Path) -> Serializer:
    return get_serializer(guess_mime_type(path))
