from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from jsmdeploy.adapters.plan import load_plan
from jsmdeploy.app import deploy_plan
from jsmdeploy.common.logging import configure_logging
from jsmdeploy.config import JsmConfig, load_api_definitions
from jsmdeploy.domain.deployment import partition_changes
from jsmdeploy.domain.model import get_change_data
from jsmdeploy.filters import SUPPORTED_TYPES

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deploy Jira Service Management changes")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    deploy = subparsers.add_parser("deploy", help="Deploy the changes of a plan file")
    deploy.add_argument(
        "--plan",
        type=Path,
        required=True,
        help="JSON plan file listing the changes to deploy",
    )
    deploy.add_argument(
        "--api-definitions",
        type=Path,
        help="JSON API definitions (defaults to JSM_API_DEFINITIONS_PATH or built-ins)",
    )
    deploy.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report which changes the JSM filter would deploy",
    )

    return parser.parse_args(list(argv))


def _jsm_config(args: argparse.Namespace) -> JsmConfig:
    config = JsmConfig.from_environment()
    if args.api_definitions is not None:
        config = replace(config, api_definitions=load_api_definitions(args.api_definitions))
    return config


def _dry_run(plan: Path, config: JsmConfig) -> None:
    changes = load_plan(plan)
    if config.enable_jsm and config.api_definitions is not None:
        jsm_changes, leftover = partition_changes(changes, SUPPORTED_TYPES)
    else:
        jsm_changes, leftover = [], changes
    for change in jsm_changes:
        log.info("deploy %s %s", change.action, get_change_data(change).elem_id)
    for change in leftover:
        log.info("skip %s %s", change.action, get_change_data(change).elem_id)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO, force=True)

    try:
        if parsed_args.command != "deploy":
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
        jsm_config = _jsm_config(parsed_args)
        if parsed_args.dry_run:
            _dry_run(parsed_args.plan, jsm_config)
            return
        result = deploy_plan(parsed_args.plan, jsm_config=jsm_config)
    except ValueError:
        log.exception("Invalid deploy input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during deploy")
        sys.exit(1)

    for error in result.deploy_result.errors:
        log.error("%s: %s", error.elem_id, error.message)
    for change in result.leftover_changes:
        log.warning("Not deployed by any filter: %s", get_change_data(change).elem_id)
    if result.deploy_result.errors:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
