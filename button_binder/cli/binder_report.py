"""Entry point for checking a button binding setup.

CLI driver:  button-binder  [--layout] [--bindings FILE] [--bind name=usage ...]
                            [--json PATH] [--notion] [--notion-page ID] [--tab]
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import colorlogging
import requests

from button_binder.core.errors import BindingError
from button_binder.core.registry import ButtonBinder
from button_binder.inputs.controller import GamepadController
from button_binder.layouts import LAYOUTS
from button_binder.publishers.dashboard import JsonDashboard
from button_binder.publishers.notion import NotionDashboard

logger = logging.getLogger(__name__)


@dataclass
class ReportArgs:
    layout: str = "xbox"
    bindings: list[tuple[str, str]] = field(default_factory=list)
    json_out: Path | None = None
    notion: bool = False
    notion_page: str | None = None
    tab: str = "Buttons"


def load_bindings(path: Path) -> list[tuple[str, str]]:
    """Read a ``{"name": "usage", ...}`` JSON object, keeping file order."""
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not read bindings from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Bindings file {path} must contain a JSON object")
    bindings: list[tuple[str, str]] = []
    for name, usage in data.items():
        if not isinstance(usage, str) or not usage:
            raise ValueError(f"Usage for '{name}' in {path} must be a string")
        bindings.append((name, usage))
    return bindings


def parse_bind(text: str) -> tuple[str, str]:
    name, sep, usage = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected name=usage, got '{text}'")
    return name.strip(), usage.strip()


def run(args: ReportArgs) -> ButtonBinder:
    """Seed, bind, print the report and publish wherever requested."""
    binder = ButtonBinder(GamepadController(), layout_name=args.layout)
    for name, usage in args.bindings:
        binder.bind(name, usage)

    report = binder.report()
    print(report, end="")
    logger.info("%d of %d buttons bound", len(binder.bound_names()), len(binder))

    if args.json_out is not None:
        dashboard = JsonDashboard(args.json_out)
        binder.publish_status_widgets(dashboard, args.tab)
        dashboard.save()

    if args.notion:
        notion = NotionDashboard()
        binder.publish_status_widgets(notion, args.tab)
        if args.notion_page:
            notion.post_report(args.notion_page, report)
    return binder


def main(argv: list[str] | None = None) -> int:
    colorlogging.configure()

    parser = argparse.ArgumentParser(prog="button-binder")
    parser.add_argument("--layout", choices=sorted(LAYOUTS.keys()), default="xbox")
    parser.add_argument("--bindings", type=Path, default=None, help="JSON object mapping button name to usage")
    parser.add_argument(
        "--bind",
        type=parse_bind,
        action="append",
        default=[],
        metavar="NAME=USAGE",
        help="Bind one button, may be repeated (applied after --bindings)",
    )
    parser.add_argument("--json", type=Path, default=None, help="Write status widgets to this JSON file")
    parser.add_argument(
        "--notion",
        action="store_true",
        help="Publish status widgets to Notion (needs NOTION_API_KEY and NOTION_DB_ID)",
    )
    parser.add_argument("--notion-page", default=None, help="Also append the text report to this Notion page")
    parser.add_argument("--tab", default="Buttons", help="Dashboard tab name")

    ns = parser.parse_args(argv)
    try:
        bindings = load_bindings(ns.bindings) if ns.bindings is not None else []
    except ValueError as exc:
        logger.error("%s", exc)
        return 1
    args = ReportArgs(
        ns.layout,
        bindings + ns.bind,
        json_out=ns.json,
        notion=ns.notion,
        notion_page=ns.notion_page,
        tab=ns.tab,
    )
    try:
        run(args)
    except BindingError as exc:
        logger.error("%s", exc)
        return 1
    except (RuntimeError, requests.RequestException) as exc:
        logger.error("Failed to publish to Notion: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
