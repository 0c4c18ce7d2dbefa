"""Dashboard protocols plus in-memory and JSON-file dashboards."""

import json
import logging
from pathlib import Path
from typing import Protocol

from button_binder.core.types import Widget

logger = logging.getLogger(__name__)


class DashboardTab(Protocol):
    def add(self, label: str, value: str, *, size: tuple[int, int], position: tuple[int, int]) -> None: ...


class Dashboard(Protocol):
    def get_tab(self, name: str) -> DashboardTab: ...


class MemoryTab:
    """Widgets keyed by label; re-adding a label replaces it in place."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._widgets: dict[str, Widget] = {}

    def add(self, label: str, value: str, *, size: tuple[int, int], position: tuple[int, int]) -> None:
        self._widgets[label] = Widget(label, value, tuple(size), tuple(position))

    @property
    def widgets(self) -> list[Widget]:
        return list(self._widgets.values())

    def __getitem__(self, label: str) -> Widget:
        return self._widgets[label]


class MemoryDashboard:
    def __init__(self) -> None:
        self.tabs: dict[str, MemoryTab] = {}

    def get_tab(self, name: str) -> MemoryTab:
        if name not in self.tabs:
            self.tabs[name] = MemoryTab(name)
        return self.tabs[name]

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        return {
            name: [
                {"label": w.label, "value": w.value, "size": list(w.size), "position": list(w.position)}
                for w in tab.widgets
            ]
            for name, tab in self.tabs.items()
        }


class JsonDashboard(MemoryDashboard):
    """MemoryDashboard that can dump its tabs to a JSON file."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)

    def save(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Saved dashboard widgets to %s", self.path)
        return self.path
