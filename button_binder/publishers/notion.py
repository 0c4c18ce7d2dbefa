"""Publish button status widgets to a Notion database."""

import logging
import os
from datetime import datetime
from typing import Mapping, cast

import requests
from notion_client import Client

from button_binder.core.types import Widget

logger = logging.getLogger(__name__)

NOTION_VER = "2022-06-28"
_TEXT_LIMIT = 2000  # max characters per rich_text item

# column name -> Notion property type, the title column is looked up separately
WIDGET_COLUMNS: dict[str, str] = {
    "tab": "rich_text",
    "value": "rich_text",
    "width": "number",
    "height": "number",
    "x": "number",
    "y": "number",
    "submitted": "date",
}


def _title_prop_name(db_json: Mapping[str, object]) -> str:
    """Return the **name** of the column whose type is `"title"`."""
    props = cast(dict[str, object], db_json.get("properties", {}))
    return next(name for name, spec in props.items() if cast(dict[str, object], spec).get("type") == "title")


def ensure_columns(notion: Client, db_id: str, columns: Mapping[str, str]) -> None:
    """Add any of *columns* that don't yet exist in the Notion DB."""
    db_obj = cast(dict[str, object], notion.databases.retrieve(database_id=db_id))
    existing = cast(dict[str, object], db_obj.get("properties", {})).keys()

    additions: dict[str, dict[str, object]] = {}
    for key, kind in columns.items():
        if key in existing:
            continue
        if kind == "number":
            additions[key] = {"number": {"format": "number"}}
        else:
            additions[key] = {kind: {}}

    if additions:  # only call the API if something is missing
        logger.info("Adding %d missing columns to Notion DB: %s", len(additions), ", ".join(additions))
        notion.databases.update(database_id=db_id, properties=additions)


def _rich_text(content: str) -> list[dict[str, object]]:
    return [
        {"type": "text", "text": {"content": content[i : i + _TEXT_LIMIT]}}
        for i in range(0, max(len(content), 1), _TEXT_LIMIT)
    ]


class NotionTab:
    def __init__(self, dashboard: "NotionDashboard", name: str) -> None:
        self._dashboard = dashboard
        self.name = name

    def add(self, label: str, value: str, *, size: tuple[int, int], position: tuple[int, int]) -> None:
        self._dashboard.upsert_widget(self.name, Widget(label, value, tuple(size), tuple(position)))


class NotionDashboard:
    """One database row per (tab, widget label).

    Publishing the same label to the same tab again updates the existing row
    instead of adding a new one.
    """

    def __init__(
        self,
        db_id: str | None = None,
        token: str | None = None,
        *,
        client: Client | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.db_id = db_id or os.getenv("NOTION_DB_ID")
        self.token = token or os.getenv("NOTION_API_KEY")
        self._notion = client
        self._session = session
        self._title_col: str | None = None

    def _client(self) -> Client:
        if self._notion is None:
            if self.token is None:
                raise RuntimeError("NOTION_API_KEY not set")
            self._notion = Client(auth=self.token)
        return self._notion

    def _database(self) -> str:
        if self.db_id is None:
            raise RuntimeError("NOTION_DB_ID not set")
        return self.db_id

    def _hdr(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": NOTION_VER,
            "accept": "application/json",
        }

    def _prepare(self) -> str:
        """Create missing columns once and return the title column name."""
        if self._title_col is None:
            notion, db_id = self._client(), self._database()
            ensure_columns(notion, db_id, WIDGET_COLUMNS)
            db_schema = cast(dict[str, object], notion.databases.retrieve(database_id=db_id))
            self._title_col = _title_prop_name(db_schema)
        return self._title_col

    def get_tab(self, name: str) -> NotionTab:
        return NotionTab(self, name)

    def _find_row(self, tab: str, label: str) -> str | None:
        title_col = self._prepare()
        resp = cast(
            dict[str, object],
            self._client().databases.query(
                database_id=self._database(),
                filter={
                    "and": [
                        {"property": title_col, "title": {"equals": label}},
                        {"property": "tab", "rich_text": {"equals": tab}},
                    ]
                },
            ),
        )
        results = cast(list[dict[str, object]], resp.get("results", []))
        return str(results[0]["id"]) if results else None

    def upsert_widget(self, tab: str, widget: Widget) -> str:
        """Create or update the row for *widget* and return its URL."""
        title_col = self._prepare()
        width, height = widget.size
        x, y = widget.position
        props: dict[str, object] = {
            title_col: {"title": _rich_text(widget.label)},
            "tab": {"rich_text": _rich_text(tab)},
            "value": {"rich_text": _rich_text(widget.value)},
            "width": {"number": width},
            "height": {"number": height},
            "x": {"number": x},
            "y": {"number": y},
            "submitted": {"date": {"start": datetime.now().astimezone().isoformat()}},
        }

        notion = self._client()
        page_id = self._find_row(tab, widget.label)
        if page_id is None:
            page = cast(
                dict[str, object],
                notion.pages.create(parent={"database_id": self._database()}, properties=props),
            )
            logger.info("Created Notion row for %s/%s", tab, widget.label)
        else:
            page = cast(dict[str, object], notion.pages.update(page_id=page_id, properties=props))
            logger.info("Updated Notion row for %s/%s", tab, widget.label)
        return str(page.get("url", ""))

    def post_report(self, page_id: str, text: str) -> None:
        """Append *text* to a Notion page as a plain-text code block."""
        if self.token is None:
            raise RuntimeError("NOTION_API_KEY not set")
        block = {
            "object": "block",
            "type": "code",
            "code": {"language": "plain text", "rich_text": _rich_text(text)},
        }
        session = self._session or requests.Session()
        try:
            resp = session.patch(
                f"https://api.notion.com/v1/blocks/{page_id}/children",
                json={"children": [block]},
                headers=self._hdr() | {"Content-Type": "application/json"},
                timeout=60,
            )
            resp.raise_for_status()
            logger.info("Appended button report to Notion page %s", page_id)
        finally:
            if self._session is None:
                session.close()
