import json

import pydantic
import pytest

from quadroots.data import (
    POLYNOMIAL_FORM,
    EncodedRoots,
    Polynomial,
    PolynomialRecord,
    build_record,
)


def test_build_record(record):
    assert record.polynomial == Polynomial(a=2, b=-7, c=None, form=POLYNOMIAL_FORM)
    assert record.roots_base64 == EncodedRoots(alpha="Mg==", beta="NQ==")


def test_document_layout(record):
    assert record.to_document() == {
        "polynomial": {"a": 2, "b": -7, "c": None, "form": "ax^2 + bx + c = 0"},
        "roots_base64": {"alpha": "Mg==", "beta": "NQ=="},
    }


def test_unset_constant_serializes_as_null(record):
    encoded = json.dumps(record.to_document())
    assert '"c": null' in encoded
    assert json.loads(encoded)["polynomial"]["c"] is None


def test_roots_are_stored_as_text(record):
    roots = record.to_document()["roots_base64"]
    assert all(isinstance(value, str) for value in roots.values())


def test_from_document_inverts_to_document(record):
    assert PolynomialRecord.from_document(record.to_document()) == record


def test_assigning_constant(record):
    record.polynomial.c = 20
    assert record.polynomial.c == 20.0
    assert record.to_document()["polynomial"]["c"] == 20.0


def test_assignment_is_validated(record):
    with pytest.raises(pydantic.ValidationError):
        record.polynomial.c = "twenty"


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"polynomial": {"a": 2, "b": -7}},
        {"roots_base64": {"alpha": "Mg==", "beta": "NQ=="}},
        {
            "polynomial": {"a": "two", "b": -7, "c": None},
            "roots_base64": {"alpha": "Mg==", "beta": "NQ=="},
        },
        [],
    ],
)
def test_from_document_rejects_other_layouts(document):
    with pytest.raises(pydantic.ValidationError):
        PolynomialRecord.from_document(document)
