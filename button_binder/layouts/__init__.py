"""Registry mapping device name → fixed control layout."""

from typing import Dict

from button_binder.core.types import Layout

LAYOUTS: Dict[str, Layout] = {}


def register(name: str, layout: Layout) -> None:
    if name in LAYOUTS:
        raise ValueError(f"Duplicate layout '{name}'")
    LAYOUTS[name] = tuple(layout)


def get_layout(name: str) -> Layout:
    if name not in LAYOUTS:
        raise ValueError(f"Unknown layout '{name}', known layouts: {', '.join(sorted(LAYOUTS))}")
    return LAYOUTS[name]


# keep explicit imports so registration happens on package import
from . import xbox  # noqa: E402,F401
from . import ps4   # noqa: E402,F401
