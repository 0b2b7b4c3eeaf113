import logging

from quadroots.config import RunConfig
from quadroots.data import PolynomialRecord, build_record
from quadroots.storage import read_document, write_document

from ._identities import RootIdentities, recover_roots
from ._report import report_decoded, report_identities, report_updated, report_written

logger = logging.getLogger(__name__)


def run(config: RunConfig) -> PolynomialRecord:
    """Build, store, reload and complete a polynomial record once.

    The document at ``config.document`` is overwritten twice: first with
    ``c`` unset, then with ``c`` derived from the product of the roots.
    Every failure propagates and aborts the run.
    """
    path = config.document
    logger.info(f"Running with {config}")

    record = build_record(config.a, config.b, config.alpha, config.beta)
    write_document(record, path)
    report_written(path)

    loaded = read_document(path)
    alpha, beta = recover_roots(loaded)
    report_decoded(loaded, alpha, beta)

    identities = RootIdentities(
        a=loaded.polynomial.a, b=loaded.polynomial.b, alpha=alpha, beta=beta
    )
    report_identities(identities)
    if identities.root_sum != identities.expected_sum:
        logger.info(
            f"Sum of roots {identities.root_sum} differs from "
            f"-b/a = {identities.expected_sum}"
        )

    loaded.polynomial.c = identities.constant
    write_document(loaded, path)
    report_updated(path)
    return loaded
