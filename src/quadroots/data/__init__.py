from quadroots.data._record import (
    POLYNOMIAL_FORM,
    EncodedRoots,
    Polynomial,
    PolynomialRecord,
    build_record,
)

__all__ = [
    "POLYNOMIAL_FORM",
    "EncodedRoots",
    "Polynomial",
    "PolynomialRecord",
    "build_record",
]
