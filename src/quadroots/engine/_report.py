from pathlib import Path

from quadroots.data import PolynomialRecord

from ._identities import RootIdentities


def _format_constant(c: float | None) -> str:
    return "null" if c is None else str(c)


def report_written(path: Path) -> None:
    print(f"JSON written to {path}")


def report_decoded(record: PolynomialRecord, alpha: float, beta: float) -> None:
    polynomial = record.polynomial
    print("Decoded polynomial and roots:")
    print(f"  Form: {polynomial.form}")
    print(
        f"  a = {polynomial.a}, b = {polynomial.b}, "
        f"c = {_format_constant(polynomial.c)}"
    )
    print(f"  alpha (root 1) = {alpha}")
    print(f"  beta  (root 2) = {beta}")


def report_identities(identities: RootIdentities) -> None:
    print()
    print("Computed values:")
    print(
        f"  alpha + beta = {identities.root_sum} "
        f"(should equal -b/a = {identities.expected_sum})"
    )
    print(f"  alpha * beta = {identities.root_product} (this equals c/a)")
    print(f"  Computed constant c = {identities.constant}")


def report_updated(path: Path) -> None:
    print()
    print(f"Updated JSON with computed c written to {path}")
