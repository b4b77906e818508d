"""Figure layout - title, size, margins and interaction modes shared by all traces"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .color import ColorWrapper, to_color
from .common import Font, Title
from .serialize import optional_field
from .values import NumOrString, TruthyEnum


class HoverMode(Enum):
    """Hover behaviour; FALSE disables hover and is written as JSON false."""
    X = 'x'
    Y = 'y'
    CLOSEST = 'closest'
    FALSE = 'false'
    X_UNIFIED = 'x unified'
    Y_UNIFIED = 'y unified'


class DragMode(Enum):
    """Drag behaviour; FALSE disables dragging and is written as JSON false."""
    ZOOM = 'zoom'
    PAN = 'pan'
    SELECT = 'select'
    LASSO = 'lasso'
    DRAW_CLOSED_PATH = 'drawclosedpath'
    DRAW_OPEN_PATH = 'drawopenpath'
    DRAW_LINE = 'drawline'
    DRAW_RECT = 'drawrect'
    DRAW_CIRCLE = 'drawcircle'
    ORBIT = 'orbit'
    TURNTABLE = 'turntable'
    FALSE = 'false'


@dataclass
class Margin:
    _left: Optional[int] = optional_field('l')
    _right: Optional[int] = optional_field('r')
    _top: Optional[int] = optional_field('t')
    _bottom: Optional[int] = optional_field('b')
    _pad: Optional[int] = optional_field()
    _auto_expand: Optional[bool] = optional_field('autoexpand')

    def left(self, left: int) -> 'Margin':
        self._left = self._pixels('left', left)
        return self

    def right(self, right: int) -> 'Margin':
        self._right = self._pixels('right', right)
        return self

    def top(self, top: int) -> 'Margin':
        self._top = self._pixels('top', top)
        return self

    def bottom(self, bottom: int) -> 'Margin':
        self._bottom = self._pixels('bottom', bottom)
        return self

    def pad(self, pad: int) -> 'Margin':
        self._pad = self._pixels('pad', pad)
        return self

    def auto_expand(self, auto_expand: bool) -> 'Margin':
        self._auto_expand = auto_expand
        return self

    @staticmethod
    def _pixels(name: str, value: int) -> int:
        if value < 0:
            raise ValueError(f"margin {name} must be non-negative, got {value}")
        return value


@dataclass
class Layout:
    _title: Optional[Title] = optional_field()
    _show_legend: Optional[bool] = optional_field('showlegend')
    _width: Optional[int] = optional_field()
    _height: Optional[int] = optional_field()
    _auto_size: Optional[bool] = optional_field('autosize')
    _font: Optional[Font] = optional_field()
    _margin: Optional[Margin] = optional_field()
    _paper_background_color: Optional[ColorWrapper] = optional_field('paper_bgcolor')
    _plot_background_color: Optional[ColorWrapper] = optional_field('plot_bgcolor')
    _hover_mode: Optional[TruthyEnum] = optional_field('hovermode')
    _drag_mode: Optional[TruthyEnum] = optional_field('dragmode')
    _ui_revision: Optional[NumOrString] = optional_field('uirevision')

    def title(self, title: Union[str, Title]) -> 'Layout':
        """Figure title; a plain string becomes ``Title().text(...)``."""
        if not isinstance(title, Title):
            title = Title().text(str(title))
        self._title = title
        return self

    def show_legend(self, show_legend: bool) -> 'Layout':
        self._show_legend = show_legend
        return self

    def width(self, width: int) -> 'Layout':
        if width < 10:
            raise ValueError(f"layout width must be at least 10 pixels, got {width}")
        self._width = width
        return self

    def height(self, height: int) -> 'Layout':
        if height < 10:
            raise ValueError(f"layout height must be at least 10 pixels, got {height}")
        self._height = height
        return self

    def auto_size(self, auto_size: bool) -> 'Layout':
        self._auto_size = auto_size
        return self

    def font(self, font: Font) -> 'Layout':
        self._font = font
        return self

    def margin(self, margin: Margin) -> 'Layout':
        self._margin = margin
        return self

    def paper_background_color(self, color: Any) -> 'Layout':
        self._paper_background_color = to_color(color)
        return self

    def plot_background_color(self, color: Any) -> 'Layout':
        self._plot_background_color = to_color(color)
        return self

    def hover_mode(self, hover_mode: HoverMode) -> 'Layout':
        self._hover_mode = TruthyEnum(hover_mode)
        return self

    def drag_mode(self, drag_mode: DragMode) -> 'Layout':
        self._drag_mode = TruthyEnum(drag_mode)
        return self

    def ui_revision(self, ui_revision: Any) -> 'Layout':
        self._ui_revision = NumOrString.of(ui_revision)
        return self
