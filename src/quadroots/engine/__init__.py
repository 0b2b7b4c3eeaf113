from quadroots.engine._identities import RootIdentities, recover_roots
from quadroots.engine._run import run

__all__ = ["RootIdentities", "recover_roots", "run"]
