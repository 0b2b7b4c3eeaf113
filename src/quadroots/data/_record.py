from typing import Any

from pydantic import BaseModel, ConfigDict

from quadroots import encoding

POLYNOMIAL_FORM = "ax^2 + bx + c = 0"


class _DataElement(BaseModel):
    model_config = ConfigDict(validate_default=True, validate_assignment=True)


class Polynomial(_DataElement):
    """Coefficients of ``a*x^2 + b*x + c = 0``; ``c`` stays ``None`` until computed."""

    a: int
    b: int
    c: float | None = None
    form: str = POLYNOMIAL_FORM


class EncodedRoots(_DataElement):
    """The two roots, each kept as base64 encoded decimal text."""

    alpha: str
    beta: str


class PolynomialRecord(_DataElement):
    polynomial: Polynomial
    roots_base64: EncodedRoots

    def to_document(self) -> dict[str, Any]:
        """Return the record as plain data in the persisted document layout.

        An unset ``c`` is emitted as ``None`` so it serializes as ``null``.
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_document(cls, document: Any) -> "PolynomialRecord":
        return cls.model_validate(document)


def build_record(a: int, b: int, alpha: str, beta: str) -> PolynomialRecord:
    return PolynomialRecord(
        polynomial=Polynomial(a=a, b=b),
        roots_base64=EncodedRoots(
            alpha=encoding.encode(alpha),
            beta=encoding.encode(beta),
        ),
    )
