from quadroots.exceptions._exceptions import (
    ConfigValidationError,
    DocumentError,
    QuadrootsError,
    RootDecodingError,
)

# Explicitly export again, otherwise mypy is unhappy.
__all__ = [
    "QuadrootsError",
    "ConfigValidationError",
    "DocumentError",
    "RootDecodingError",
]
