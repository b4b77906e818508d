"""Scatter plot"""

import numbers
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from ..color import ColorWrapper, to_color
from ..common import (
    Calendar,
    ErrorData,
    Fill,
    Font,
    GroupNorm,
    Line,
    Marker,
    Mode,
    Orientation,
    PlotType,
    Position,
)
from ..serialize import optional_field
from ..values import Dim, copy_iterable_to_vec, owned_string_vector, unwrap_scalar
from .base import Trace


def numeric_vector(name: str, values: Iterable[Any]) -> List[Any]:
    """
    Copy a coordinate array, requiring every element to be a number.

    Raises:
        TypeError: If an element is not numeric
    """
    converted = []
    for value in copy_iterable_to_vec(values):
        value = unwrap_scalar(value)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{name} values must be numeric, got {type(value).__name__}")
        converted.append(value)
    return converted


@dataclass
class Scatter(Trace):
    """
    Scatter/line trace from ``x`` values (numbers, strings or dates) and numeric ``y`` values.

    Examples:
        Scatter([1, 2, 3], [4, 5, 6]).name("trace").mode(Mode.LINES_MARKERS)
        Scatter(["a", "b"], [1.5, 2.5]).fill(Fill.TO_ZERO_Y)
    """
    plot_type = PlotType.SCATTER

    x: List[Any]
    y: List[Any]
    _mode: Optional[Mode] = optional_field()
    _text_position: Optional[Dim[Position]] = optional_field('textposition')
    _text_template: Optional[Dim[str]] = optional_field('texttemplate')
    _orientation: Optional[Orientation] = optional_field()
    _group_norm: Optional[GroupNorm] = optional_field('groupnorm')
    _stack_group: Optional[str] = optional_field('stackgroup')
    _marker: Optional[Marker] = optional_field()
    _line: Optional[Line] = optional_field()
    _text_font: Optional[Font] = optional_field('textfont')
    _error_x: Optional[ErrorData] = optional_field()
    _error_y: Optional[ErrorData] = optional_field()
    _clip_on_axis: Optional[bool] = optional_field('cliponaxis')
    _connect_gaps: Optional[bool] = optional_field('connectgaps')
    _fill: Optional[Fill] = optional_field()
    _fill_color: Optional[ColorWrapper] = optional_field('fillcolor')
    _hover_on: Optional[str] = optional_field('hoveron')
    _stack_gaps: Optional[str] = optional_field('stackgaps')
    _x_calendar: Optional[Calendar] = optional_field('xcalendar')
    _y_calendar: Optional[Calendar] = optional_field('ycalendar')

    def __post_init__(self):
        self.x = [unwrap_scalar(v) for v in copy_iterable_to_vec(self.x)]
        self.y = numeric_vector('y', self.y)

    @classmethod
    def from_ndarray(cls, arr: Any) -> 'Scatter':
        """Build from a two-row array: row 0 holds x, row 1 holds y."""
        if len(arr) < 2:
            raise ValueError("from_ndarray needs an array with two rows (x and y)")
        return cls(arr[0], arr[1])

    def point_count(self) -> Optional[int]:
        return len(self.x)

    def mode(self, mode: Mode) -> 'Scatter':
        self._mode = mode
        return self

    def text_position(self, text_position: Position) -> 'Scatter':
        self._text_position = Dim.scalar(text_position)
        return self

    def text_position_array(self, text_position: Iterable[Position]) -> 'Scatter':
        self._text_position = Dim.vector(text_position)
        return self

    def text_template(self, text_template: str) -> 'Scatter':
        self._text_template = Dim.scalar(str(text_template))
        return self

    def text_template_array(self, text_template: Iterable[Any]) -> 'Scatter':
        self._text_template = Dim.vector(owned_string_vector(text_template))
        return self

    def orientation(self, orientation: Orientation) -> 'Scatter':
        """Stacking direction when ``stack_group`` is used."""
        self._orientation = orientation
        return self

    def group_norm(self, group_norm: GroupNorm) -> 'Scatter':
        self._group_norm = group_norm
        return self

    def stack_group(self, stack_group: str) -> 'Scatter':
        self._stack_group = str(stack_group)
        return self

    def marker(self, marker: Marker) -> 'Scatter':
        self._marker = marker
        return self

    def line(self, line: Line) -> 'Scatter':
        self._line = line
        return self

    def text_font(self, text_font: Font) -> 'Scatter':
        self._text_font = text_font
        return self

    def error_x(self, error_x: ErrorData) -> 'Scatter':
        self._error_x = error_x
        return self

    def error_y(self, error_y: ErrorData) -> 'Scatter':
        self._error_y = error_y
        return self

    def clip_on_axis(self, clip_on_axis: bool) -> 'Scatter':
        self._clip_on_axis = clip_on_axis
        return self

    def connect_gaps(self, connect_gaps: bool) -> 'Scatter':
        self._connect_gaps = connect_gaps
        return self

    def fill(self, fill: Fill) -> 'Scatter':
        self._fill = fill
        return self

    def fill_color(self, fill_color: Any) -> 'Scatter':
        self._fill_color = to_color(fill_color)
        return self

    def hover_on(self, hover_on: str) -> 'Scatter':
        self._hover_on = str(hover_on)
        return self

    def stack_gaps(self, stack_gaps: str) -> 'Scatter':
        self._stack_gaps = str(stack_gaps)
        return self

    def x_calendar(self, x_calendar: Calendar) -> 'Scatter':
        self._x_calendar = x_calendar
        return self

    def y_calendar(self, y_calendar: Calendar) -> 'Scatter':
        self._y_calendar = y_calendar
        return self
