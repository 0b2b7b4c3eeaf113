import logging
from dataclasses import dataclass

from quadroots import encoding
from quadroots.data import PolynomialRecord
from quadroots.exceptions import RootDecodingError

logger = logging.getLogger(__name__)


def _parse_root(name: str, text: str) -> float:
    try:
        return float(text)
    except ValueError as err:
        raise RootDecodingError(f"Root {name} is not a number: {text!r}") from err


def recover_roots(record: PolynomialRecord) -> tuple[float, float]:
    """Decode the base64 roots of ``record`` and parse them as floats."""
    roots = record.roots_base64
    alpha = _parse_root("alpha", encoding.decode(roots.alpha))
    beta = _parse_root("beta", encoding.decode(roots.beta))
    logger.info(f"Recovered roots alpha={alpha}, beta={beta}")
    return alpha, beta


@dataclass(frozen=True)
class RootIdentities:
    """Vieta's relations for ``a*x^2 + b*x + c = 0`` with roots alpha and beta.

    ``alpha + beta = -b/a`` and ``alpha * beta = c/a``. The values are only
    computed; whether the sum matches ``-b/a`` is left to whoever reads them.
    """

    a: int
    b: int
    alpha: float
    beta: float

    @property
    def root_sum(self) -> float:
        return self.alpha + self.beta

    @property
    def expected_sum(self) -> float:
        return -float(self.b) / self.a

    @property
    def root_product(self) -> float:
        return self.alpha * self.beta

    @property
    def constant(self) -> float:
        return float(self.a) * self.root_product
