"""Command-line entry point for building a decision session.

    mlclient-session --left-ai MMAI_USER --right-ai StupidAI
    mlclient-session --config session.yaml --benchmark
    mlclient-session --left-ai MMAI_MODEL --left-model models/model.zip --loglevel debug

The command validates the options, builds both sides' models and prints the
session identity records the simulation host consumes.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from mlclient.models.placeholders import SCRIPTED_AI_KEYWORDS
from mlclient.schema import SCHEMA_ADAPTERS
from mlclient.session import (
    LOGLEVELS,
    SessionConfig,
    benchmark_header,
    build_session,
    load_config_mapping,
    session_config_from_mapping,
)

logger = logging.getLogger(__name__)

_LOGLEVEL_MAP = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level_name: str) -> None:
    """Install a console handler and apply ``level_name`` to ``mlclient``."""

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)-8s] %(name)s — %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    logging.getLogger("mlclient").setLevel(_LOGLEVEL_MAP[level_name])


def _build_parser() -> argparse.ArgumentParser:
    ais = ", ".join(SCRIPTED_AI_KEYWORDS)
    parser = argparse.ArgumentParser(description="Build an mlclient decision session.")
    parser.add_argument("--config", default=None, help="Path to session JSON or YAML config.")
    parser.add_argument("--left-ai", default=None, metavar="AI", help=f"Left side AI ({ais}).")
    parser.add_argument("--right-ai", default=None, metavar="AI", help=f"Right side AI ({ais}).")
    parser.add_argument("--left-model", default=None, metavar="FILE", help="Model path for a left MMAI_MODEL.")
    parser.add_argument("--right-model", default=None, metavar="FILE", help="Model path for a right MMAI_MODEL.")
    parser.add_argument(
        "--schema-version",
        type=int,
        choices=sorted(SCHEMA_ADAPTERS),
        default=None,
        help="Schema version spoken by user agents.",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        default=None,
        help="Ask for each action.",
    )
    parser.add_argument(
        "--prerecorded",
        default=None,
        metavar="PATH",
        help="Replay actions from a file of whitespace-separated integers.",
    )
    parser.add_argument("--benchmark", action="store_true", default=None, help="Measure performance.")
    parser.add_argument("--max-battles", type=int, default=None, metavar="N", help="Stop after N battles (0 = never).")
    parser.add_argument("--loglevel", choices=LOGLEVELS, default=None, help="Log verbosity.")
    return parser


def _merge_config(args: argparse.Namespace) -> SessionConfig:
    """Layer command-line values over the optional config file."""

    mapping: dict[str, Any] = load_config_mapping(args.config) if args.config else {}
    overrides = {
        "left_ai": args.left_ai,
        "right_ai": args.right_ai,
        "left_model": args.left_model,
        "right_model": args.right_model,
        "schema_version": args.schema_version,
        "interactive": args.interactive,
        "prerecorded": args.prerecorded,
        "benchmark": args.benchmark,
        "max_battles": args.max_battles,
        "loglevel": args.loglevel,
    }
    mapping.update({key: value for key, value in overrides.items() if value is not None})
    return session_config_from_mapping(mapping)


def run_session_cli(argv: Sequence[str] | None = None) -> int:
    """Build a session from CLI options and print its identity records.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` on success, `2` for invalid options).
    """

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = _merge_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(config.loglevel)
    logger.debug("session config: %s", config)

    try:
        session = build_session(config)
    except (ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))

    if config.benchmark:
        print(benchmark_header(config))

    summary = {
        "dev_mode": session.dev_mode,
        "max_battles": config.max_battles,
        "models": [
            {"side": identity.side.name.lower(), "type": identity.type.value, "name": identity.name}
            for identity in session.describe()
        ],
    }
    print(json.dumps(summary, indent=2))
    return 0


def main() -> None:
    raise SystemExit(run_session_cli())


if __name__ == "__main__":
    main()
