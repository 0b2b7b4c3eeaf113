from quadroots import (
    config,
    console,
    data,
    encoding,
    engine,
    exceptions,
    serialization,
    storage,
)

__version__ = "0.1.0"

__all__ = [
    "config",
    "console",
    "data",
    "encoding",
    "engine",
    "exceptions",
    "serialization",
    "storage",
]
