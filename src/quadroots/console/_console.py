import argparse
import logging
import logging.config
import os
import pathlib
import sys
from typing import Any

import yaml

from quadroots import engine
from quadroots.config import load_run_config
from quadroots.exceptions import QuadrootsError
from quadroots.logging import LOGGING_CONFIG
from quadroots.storage import DEFAULT_DOCUMENT

_QUADROOTS_DESCRIPTION = (
    "quadroots stores a quadratic polynomial together with its base64 "
    "encoded roots, reloads it and recovers the constant term c from the "
    "product of the roots."
)


def _build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadroots", description=_QUADROOTS_DESCRIPTION
    )
    parser.add_argument(
        "document",
        nargs="?",
        type=pathlib.Path,
        default=DEFAULT_DOCUMENT,
        help="Path to the polynomial document. A .yml or .yaml suffix stores "
        f"it as YAML, anything else as JSON. Default: {DEFAULT_DOCUMENT}",
    )
    parser.add_argument(
        "--logdir",
        type=pathlib.Path,
        default=None,
        help="Directory for log files. No log file is written when omitted.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print informational log messages to stdout",
    )
    return parser


def _configure_logging(args: Any) -> None:
    with open(LOGGING_CONFIG, encoding="utf-8") as conf_file:
        config_dict = yaml.safe_load(conf_file)

    if args.logdir is None:
        config_dict["handlers"].pop("file")
        config_dict["root"]["handlers"].remove("file")
    else:
        config_dict["handlers"]["file"]["log_dir"] = os.path.abspath(args.logdir)

    try:
        logging.config.dictConfig(config_dict)
    except ValueError as err:
        if "handler 'file'" in str(err):
            sys.exit(
                "Could not configure log handler for files. "
                f"Check if you have write-access to the logs-directory "
                f"({args.logdir})."
            )
        sys.exit(str(err))

    if args.verbose:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        logging.getLogger().addHandler(handler)


def main(argv: list[str] | None = None) -> None:
    try:
        _main(argv)
    except QuadrootsError as e:
        sys.exit(e.message)


def _main(argv: list[str] | None = None) -> None:
    parser = _build_argparser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    logger = logging.getLogger(__name__)
    logger.info(f"Running quadroots with {args} in {os.getcwd()}")

    config = load_run_config({"document": args.document})
    engine.run(config)
