"""Binds named gamepad controls to triggers and reports what each one does."""

import logging
import threading
from typing import Any

from button_binder.core.errors import AlreadyBound, InvalidUsage, UnknownControl
from button_binder.core.types import BindingRecord, ControlStatus, Layout
from button_binder.layouts import get_layout
from button_binder.publishers.dashboard import Dashboard

logger = logging.getLogger(__name__)

UNUSED = "Unused"


class ButtonBinder:
    """Registry of every control on a device, each bindable exactly once.

    Controls are seeded from a fixed layout when the binder is built. Callers
    then ``bind`` each control they use to a short usage description and get
    back the live trigger for it. A second bind of the same control is a
    setup error, and there is no way to unbind.
    """

    WIDGET_WIDTH_IF_USED = 3
    WIDGET_WIDTH_IF_NOT_USED = 2
    WIDGET_HEIGHT = 1

    def __init__(self, controller: Any, layout: Layout | None = None, *, layout_name: str | None = None) -> None:
        """Seed the registry.

        Args:
            controller: Object exposing one trigger method per layout accessor
            layout: Controls to seed, defaults to the layout registered as ``layout_name``
            layout_name: Registered layout to use (default "xbox"), also reported in ``summary()``
        """
        if layout is None:
            layout_name = layout_name or "xbox"
            layout = get_layout(layout_name)
        else:
            layout_name = layout_name or "custom"
        self.controller = controller
        self.layout_name = layout_name
        self._lock = threading.Lock()
        self._entries: dict[str, BindingRecord[Any]] = {}
        self._seed(layout)

    def _seed(self, layout: Layout) -> None:
        for spec in layout:
            if spec.name in self._entries:
                raise ValueError(f"Duplicate control '{spec.name}' in layout")
            # bound method only, the controller is not polled until bind()
            accessor = getattr(self.controller, spec.method_name)
            self._entries[spec.name] = BindingRecord("", accessor, spec.row, spec.column)
        logger.debug("Seeded %d controls: %s", len(self._entries), ", ".join(self._entries))

    def _record(self, name: str) -> BindingRecord[Any]:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownControl(name, list(self._entries)) from None

    def bind(self, name: str, usage: str) -> Any:
        """Claim ``name`` for ``usage`` and return its live trigger.

        Raises:
            UnknownControl: if the control is not in the layout
            AlreadyBound: if the control was bound before
            InvalidUsage: if ``usage`` is empty
        """
        record = self._record(name)
        with self._lock:
            if record.is_bound:
                raise AlreadyBound(name, record.usage)
            if not usage:
                raise InvalidUsage(name)
            record.usage = usage
        logger.info("Bound button '%s' to: %s", name, usage)
        return record.trigger_accessor()

    def is_bound(self, name: str) -> bool:
        return self._record(name).is_bound

    def status(self, name: str) -> str:
        """Usage of ``name``, or "Unused" if it has not been bound."""
        record = self._record(name)
        return record.usage if record.is_bound else UNUSED

    def report(self) -> str:
        """One ``Button '<name>': <status>`` line per control, in layout order."""
        return "".join(f"Button '{name}': {self.status(name)}\n" for name in self._entries)

    def publish_status_widgets(self, dashboard: Dashboard, tab_name: str) -> None:
        """Add one widget per control to ``tab_name``, wider for bound controls."""
        tab = dashboard.get_tab(tab_name)
        for name, record in self._entries.items():
            width = self.WIDGET_WIDTH_IF_USED if record.is_bound else self.WIDGET_WIDTH_IF_NOT_USED
            tab.add(
                name,
                self.status(name),
                size=(width, self.WIDGET_HEIGHT),
                position=(record.column, record.row),
            )
        logger.info("Published %d status widgets to tab '%s'", len(self._entries), tab_name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def record(self, name: str) -> ControlStatus:
        """Snapshot of the control's current state, detached from the registry."""
        record = self._record(name)
        return ControlStatus(name, record.usage, record.row, record.column)

    def bound_names(self) -> list[str]:
        return [name for name, record in self._entries.items() if record.is_bound]

    def unused_names(self) -> list[str]:
        return [name for name, record in self._entries.items() if not record.is_bound]

    def summary(self) -> dict[str, object]:
        """JSON-friendly snapshot of the current bind state."""
        return {
            "layout": self.layout_name,
            "bound": len(self.bound_names()),
            "unused": len(self.unused_names()),
            "controls": {
                name: {"usage": record.usage, "row": record.row, "column": record.column}
                for name, record in self._entries.items()
            },
        }

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
