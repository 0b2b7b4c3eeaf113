from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from quadroots.exceptions import ConfigValidationError
from quadroots.storage import DEFAULT_DOCUMENT


class RunConfig(BaseModel):
    """Inputs of a single demonstration run.

    The coefficients and roots default to the fixed demonstration values;
    only the document location is normally chosen by the caller.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    document: Path = DEFAULT_DOCUMENT
    a: int = 2
    b: int = -7
    alpha: str = "2"
    beta: str = "5"

    @field_validator("a")
    @classmethod
    def _ensure_quadratic(cls, a: int) -> int:
        if a == 0:
            raise ValueError("a must be non-zero for a quadratic polynomial")
        return a


def load_run_config(config_dict: dict[str, Any]) -> RunConfig:
    try:
        return RunConfig(**config_dict)
    except ValidationError as err:
        raise ConfigValidationError(str(err), source="run") from err
