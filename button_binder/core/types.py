"""Layout entries, binding records and widget requests."""

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from button_binder.core.errors import InvalidPosition

T = TypeVar("T")

TriggerAccessor = Callable[[], T]  # zero-arg capability, called only at bind time


@dataclass(frozen=True)
class ControlSpec:
    """One physical control of a device layout.

    ``accessor`` names the controller method that yields the control's
    trigger. It defaults to ``name``.
    """

    name: str
    row: int
    column: int
    accessor: str | None = None

    @property
    def method_name(self) -> str:
        return self.accessor or self.name


Layout = Sequence[ControlSpec]


@dataclass(frozen=True)
class ControlStatus:
    """Read-only snapshot of one control's bind state."""

    name: str
    usage: str
    row: int
    column: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.column)

    @property
    def is_bound(self) -> bool:
        return len(self.usage) > 0


@dataclass(frozen=True)
class Widget:
    label: str
    value: str
    size: tuple[int, int]  # (width, height)
    position: tuple[int, int]  # (x, y) == (column, row)


class BindingRecord(Generic[T]):
    """Position, usage description and trigger accessor for a single control."""

    __slots__ = ("_usage", "_trigger_accessor", "_row", "_column")

    def __init__(self, usage: str, trigger_accessor: TriggerAccessor[T], row: int, column: int) -> None:
        """Create a record.

        Args:
            usage: Description of what the control is bound to, "" when unbound
            trigger_accessor: Returns the live trigger for this control
            row: Layout row, must be >= 0
            column: Layout column, must be >= 0

        Raises:
            InvalidPosition: if row or column is negative
        """
        if row < 0 or column < 0:
            raise InvalidPosition(row, column)
        self._usage = usage
        self._trigger_accessor = trigger_accessor
        self._row = row
        self._column = column

    @property
    def usage(self) -> str:
        return self._usage

    @usage.setter
    def usage(self, value: str) -> None:
        self._usage = value

    @property
    def trigger_accessor(self) -> TriggerAccessor[T]:
        return self._trigger_accessor

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def position(self) -> tuple[int, int]:
        """(row, column) of the control in the layout."""
        return (self._row, self._column)

    @property
    def is_bound(self) -> bool:
        return len(self._usage) > 0

    def __repr__(self) -> str:
        return f"BindingRecord(usage={self._usage!r}, position={self.position})"
