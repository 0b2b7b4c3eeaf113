from quadroots.console._console import main

__all__ = ["main"]
