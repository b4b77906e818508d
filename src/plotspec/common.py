"""
Shared plotly.js schema pieces - enums and nested objects used by several traces
and by the layout.

Nested objects follow the same protocol as traces: create empty, configure with
chained setters, unset fields never appear in the output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .color import ColorWrapper, to_color, to_color_array
from .serialize import optional_field
from .values import Dim, TruthyEnum, check_range, copy_iterable_to_vec


class PlotType(Enum):
    SCATTER = 'scatter'
    MESH3D = 'mesh3d'
    SURFACE = 'surface'


class Mode(Enum):
    LINES = 'lines'
    MARKERS = 'markers'
    TEXT = 'text'
    LINES_MARKERS = 'lines+markers'
    TEXT_MARKERS = 'text+markers'
    TEXT_LINES = 'text+lines'
    TEXT_LINES_MARKERS = 'text+lines+markers'
    NONE = 'none'


class Visible(Enum):
    """Trace visibility; TRUE/FALSE are written as JSON booleans."""
    TRUE = 'true'
    FALSE = 'false'
    LEGEND_ONLY = 'legendonly'


class HoverInfo(Enum):
    X = 'x'
    Y = 'y'
    Z = 'z'
    X_AND_Y = 'x+y'
    X_AND_Z = 'x+z'
    Y_AND_Z = 'y+z'
    X_AND_Y_AND_Z = 'x+y+z'
    TEXT = 'text'
    NAME = 'name'
    ALL = 'all'
    NONE = 'none'
    SKIP = 'skip'


class Position(Enum):
    """Text position relative to its data point."""
    TOP_LEFT = 'top left'
    TOP_CENTER = 'top center'
    TOP_RIGHT = 'top right'
    MIDDLE_LEFT = 'middle left'
    MIDDLE_CENTER = 'middle center'
    MIDDLE_RIGHT = 'middle right'
    BOTTOM_LEFT = 'bottom left'
    BOTTOM_CENTER = 'bottom center'
    BOTTOM_RIGHT = 'bottom right'
    INSIDE = 'inside'
    OUTSIDE = 'outside'


class Orientation(Enum):
    VERTICAL = 'v'
    HORIZONTAL = 'h'


class GroupNorm(Enum):
    DEFAULT = ''
    FRACTION = 'fraction'
    PERCENT = 'percent'


class Fill(Enum):
    TO_ZERO_Y = 'tozeroy'
    TO_ZERO_X = 'tozerox'
    TO_NEXT_Y = 'tonexty'
    TO_NEXT_X = 'tonextx'
    TO_SELF = 'toself'
    TO_NEXT = 'tonext'
    NONE = 'none'


class Calendar(Enum):
    GREGORIAN = 'gregorian'
    CHINESE = 'chinese'
    COPTIC = 'coptic'
    DISCWORLD = 'discworld'
    ETHIOPIAN = 'ethiopian'
    HEBREW = 'hebrew'
    ISLAMIC = 'islamic'
    JULIAN = 'julian'
    MAYAN = 'mayan'
    NANAKSHAHI = 'nanakshahi'
    NEPALI = 'nepali'
    PERSIAN = 'persian'
    JALALI = 'jalali'
    TAIWAN = 'taiwan'
    THAI = 'thai'
    UMMALQURA = 'ummalqura'


class DashType(Enum):
    SOLID = 'solid'
    DOT = 'dot'
    DASH = 'dash'
    LONG_DASH = 'longdash'
    DASH_DOT = 'dashdot'
    LONG_DASH_DOT = 'longdashdot'


class LineShape(Enum):
    LINEAR = 'linear'
    SPLINE = 'spline'
    HV = 'hv'
    VH = 'vh'
    HVH = 'hvh'
    VHV = 'vhv'


class MarkerSymbol(Enum):
    CIRCLE = 'circle'
    CIRCLE_OPEN = 'circle-open'
    SQUARE = 'square'
    SQUARE_OPEN = 'square-open'
    DIAMOND = 'diamond'
    DIAMOND_OPEN = 'diamond-open'
    CROSS = 'cross'
    X = 'x'
    TRIANGLE_UP = 'triangle-up'
    TRIANGLE_DOWN = 'triangle-down'
    TRIANGLE_LEFT = 'triangle-left'
    TRIANGLE_RIGHT = 'triangle-right'
    PENTAGON = 'pentagon'
    HEXAGON = 'hexagon'
    STAR = 'star'


class Anchor(Enum):
    AUTO = 'auto'
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    TOP = 'top'
    MIDDLE = 'middle'
    BOTTOM = 'bottom'


class ColorScalePalette(Enum):
    GREYS = 'Greys'
    YL_GN_BU = 'YlGnBu'
    GREENS = 'Greens'
    YL_OR_RD = 'YlOrRd'
    BLUERED = 'Bluered'
    RD_BU = 'RdBu'
    REDS = 'Reds'
    BLUES = 'Blues'
    PICNIC = 'Picnic'
    RAINBOW = 'Rainbow'
    PORTLAND = 'Portland'
    JET = 'Jet'
    HOT = 'Hot'
    BLACKBODY = 'Blackbody'
    EARTH = 'Earth'
    ELECTRIC = 'Electric'
    VIRIDIS = 'Viridis'
    CIVIDIS = 'Cividis'


class ColorScale:
    """
    Colorscale given either as a palette name or as explicit stops.

    Examples:
        ColorScale.palette(ColorScalePalette.VIRIDIS)
        ColorScale.vector([(0.0, 'rgb(0,0,255)'), (1.0, NamedColor.RED)])
    """

    def __init__(self, value: Union[ColorScalePalette, List[Tuple[float, ColorWrapper]]]):
        self.value = value

    @classmethod
    def palette(cls, palette: ColorScalePalette) -> 'ColorScale':
        return cls(palette)

    @classmethod
    def vector(cls, stops: Iterable[Tuple[float, Any]]) -> 'ColorScale':
        """
        Args:
            stops: (position, color) pairs; positions are normalized to [0, 1]
        """
        converted = []
        for position, color in stops:
            check_range('colorscale stop', position, 0.0, 1.0)
            converted.append((float(position), to_color(color)))
        return cls(converted)

    def to_json_value(self) -> Any:
        if isinstance(self.value, ColorScalePalette):
            return self.value
        return [[position, color] for position, color in self.value]

    def __eq__(self, other):
        return isinstance(other, ColorScale) and self.value == other.value

    def __repr__(self):
        return f"ColorScale({self.value!r})"


@dataclass
class Font:
    _family: Optional[str] = optional_field()
    _size: Optional[float] = optional_field()
    _color: Optional[ColorWrapper] = optional_field()

    def family(self, family: str) -> 'Font':
        self._family = family
        return self

    def size(self, size: float) -> 'Font':
        if size < 1:
            raise ValueError(f"font size must be at least 1, got {size}")
        self._size = size
        return self

    def color(self, color: Any) -> 'Font':
        self._color = to_color(color)
        return self


@dataclass
class Title:
    _text: Optional[str] = optional_field()
    _font: Optional[Font] = optional_field()
    _x: Optional[float] = optional_field()
    _y: Optional[float] = optional_field()

    def text(self, text: str) -> 'Title':
        self._text = text
        return self

    def font(self, font: Font) -> 'Title':
        self._font = font
        return self

    def x(self, x: float) -> 'Title':
        check_range('title x', x, 0.0, 1.0)
        self._x = x
        return self

    def y(self, y: float) -> 'Title':
        check_range('title y', y, 0.0, 1.0)
        self._y = y
        return self


@dataclass
class LegendGroupTitle:
    _text: Optional[str] = optional_field()
    _font: Optional[Font] = optional_field()

    def text(self, text: str) -> 'LegendGroupTitle':
        self._text = text
        return self

    def font(self, font: Font) -> 'LegendGroupTitle':
        self._font = font
        return self


@dataclass
class Label:
    """Hover label styling."""
    _background_color: Optional[ColorWrapper] = optional_field('bgcolor')
    _border_color: Optional[ColorWrapper] = optional_field('bordercolor')
    _font: Optional[Font] = optional_field()
    _align: Optional[Anchor] = optional_field()
    _name_length: Optional[int] = optional_field('namelength')

    def background_color(self, color: Any) -> 'Label':
        self._background_color = to_color(color)
        return self

    def border_color(self, color: Any) -> 'Label':
        self._border_color = to_color(color)
        return self

    def font(self, font: Font) -> 'Label':
        self._font = font
        return self

    def align(self, align: Anchor) -> 'Label':
        self._align = align
        return self

    def name_length(self, name_length: int) -> 'Label':
        # -1 shows the whole name
        if name_length < -1:
            raise ValueError(f"name_length must be -1 or greater, got {name_length}")
        self._name_length = name_length
        return self


@dataclass
class Line:
    _width: Optional[float] = optional_field()
    _shape: Optional[LineShape] = optional_field()
    _smoothing: Optional[float] = optional_field()
    _dash: Optional[DashType] = optional_field()
    _simplify: Optional[bool] = optional_field()
    _color: Optional[ColorWrapper] = optional_field()

    def width(self, width: float) -> 'Line':
        if width < 0:
            raise ValueError(f"line width must be non-negative, got {width}")
        self._width = width
        return self

    def shape(self, shape: LineShape) -> 'Line':
        self._shape = shape
        return self

    def smoothing(self, smoothing: float) -> 'Line':
        check_range('smoothing', smoothing, 0.0, 1.3)
        self._smoothing = smoothing
        return self

    def dash(self, dash: DashType) -> 'Line':
        self._dash = dash
        return self

    def simplify(self, simplify: bool) -> 'Line':
        self._simplify = simplify
        return self

    def color(self, color: Any) -> 'Line':
        self._color = to_color(color)
        return self


@dataclass
class ColorBar:
    _title: Optional[Title] = optional_field()
    _thickness: Optional[float] = optional_field()
    _len: Optional[float] = optional_field('len')
    _x: Optional[float] = optional_field()
    _y: Optional[float] = optional_field()
    _x_anchor: Optional[Anchor] = optional_field('xanchor')
    _y_anchor: Optional[Anchor] = optional_field('yanchor')
    _outline_width: Optional[float] = optional_field('outlinewidth')
    _outline_color: Optional[ColorWrapper] = optional_field('outlinecolor')
    _background_color: Optional[ColorWrapper] = optional_field('bgcolor')
    _tick_format: Optional[str] = optional_field('tickformat')
    _n_ticks: Optional[int] = optional_field('nticks')
    _orientation: Optional[Orientation] = optional_field()

    def title(self, title: Title) -> 'ColorBar':
        self._title = title
        return self

    def thickness(self, thickness: float) -> 'ColorBar':
        if thickness < 0:
            raise ValueError(f"colorbar thickness must be non-negative, got {thickness}")
        self._thickness = thickness
        return self

    def length(self, length: float) -> 'ColorBar':
        if length < 0:
            raise ValueError(f"colorbar length must be non-negative, got {length}")
        self._len = length
        return self

    def x(self, x: float) -> 'ColorBar':
        check_range('colorbar x', x, -2.0, 3.0)
        self._x = x
        return self

    def y(self, y: float) -> 'ColorBar':
        check_range('colorbar y', y, -2.0, 3.0)
        self._y = y
        return self

    def x_anchor(self, x_anchor: Anchor) -> 'ColorBar':
        self._x_anchor = x_anchor
        return self

    def y_anchor(self, y_anchor: Anchor) -> 'ColorBar':
        self._y_anchor = y_anchor
        return self

    def outline_width(self, outline_width: float) -> 'ColorBar':
        if outline_width < 0:
            raise ValueError(f"outline width must be non-negative, got {outline_width}")
        self._outline_width = outline_width
        return self

    def outline_color(self, color: Any) -> 'ColorBar':
        self._outline_color = to_color(color)
        return self

    def background_color(self, color: Any) -> 'ColorBar':
        self._background_color = to_color(color)
        return self

    def tick_format(self, tick_format: str) -> 'ColorBar':
        self._tick_format = tick_format
        return self

    def n_ticks(self, n_ticks: int) -> 'ColorBar':
        if n_ticks < 0:
            raise ValueError(f"n_ticks must be non-negative, got {n_ticks}")
        self._n_ticks = n_ticks
        return self

    def orientation(self, orientation: Orientation) -> 'ColorBar':
        self._orientation = orientation
        return self


@dataclass
class Marker:
    _symbol: Optional[MarkerSymbol] = optional_field()
    _opacity: Optional[float] = optional_field()
    _size: Optional[Dim[float]] = optional_field()
    _max_displayed: Optional[int] = optional_field('maxdisplayed')
    _size_ref: Optional[float] = optional_field('sizeref')
    _size_min: Optional[float] = optional_field('sizemin')
    _line: Optional[Line] = optional_field()
    _color: Optional[Dim[ColorWrapper]] = optional_field()
    _color_scale: Optional[ColorScale] = optional_field('colorscale')
    _show_scale: Optional[bool] = optional_field('showscale')
    _reverse_scale: Optional[bool] = optional_field('reversescale')
    _cauto: Optional[bool] = optional_field()
    _cmin: Optional[float] = optional_field()
    _cmax: Optional[float] = optional_field()
    _cmid: Optional[float] = optional_field()
    _color_bar: Optional[ColorBar] = optional_field('colorbar')

    def symbol(self, symbol: MarkerSymbol) -> 'Marker':
        self._symbol = symbol
        return self

    def opacity(self, opacity: float) -> 'Marker':
        check_range('marker opacity', opacity, 0.0, 1.0)
        self._opacity = opacity
        return self

    def size(self, size: float) -> 'Marker':
        self._size = Dim.scalar(size)
        return self

    def size_array(self, sizes: Iterable[float]) -> 'Marker':
        self._size = Dim.vector(sizes)
        return self

    def max_displayed(self, max_displayed: int) -> 'Marker':
        self._max_displayed = max_displayed
        return self

    def size_ref(self, size_ref: float) -> 'Marker':
        self._size_ref = size_ref
        return self

    def size_min(self, size_min: float) -> 'Marker':
        self._size_min = size_min
        return self

    def line(self, line: Line) -> 'Marker':
        self._line = line
        return self

    def color(self, color: Any) -> 'Marker':
        self._color = Dim.scalar(to_color(color))
        return self

    def color_array(self, colors: Iterable[Any]) -> 'Marker':
        self._color = Dim.vector(to_color_array(colors))
        return self

    def color_scale(self, color_scale: ColorScale) -> 'Marker':
        self._color_scale = color_scale
        return self

    def show_scale(self, show_scale: bool) -> 'Marker':
        self._show_scale = show_scale
        return self

    def reverse_scale(self, reverse_scale: bool) -> 'Marker':
        self._reverse_scale = reverse_scale
        return self

    def cauto(self, cauto: bool) -> 'Marker':
        self._cauto = cauto
        return self

    def cmin(self, cmin: float) -> 'Marker':
        self._cmin = cmin
        return self

    def cmax(self, cmax: float) -> 'Marker':
        self._cmax = cmax
        return self

    def cmid(self, cmid: float) -> 'Marker':
        self._cmid = cmid
        return self

    def color_bar(self, color_bar: ColorBar) -> 'Marker':
        self._color_bar = color_bar
        return self


class ErrorType(Enum):
    PERCENT = 'percent'
    CONSTANT = 'constant'
    SQRT = 'sqrt'
    DATA = 'data'


@dataclass
class ErrorData:
    """Error bars along one axis; ``error_type`` decides how values are read."""
    error_type: ErrorType = field(metadata={'key': 'type'})
    _array: Optional[List[float]] = optional_field()
    _array_minus: Optional[List[float]] = optional_field('arrayminus')
    _visible: Optional[bool] = optional_field()
    _symmetric: Optional[bool] = optional_field()
    _value: Optional[float] = optional_field()
    _value_minus: Optional[float] = optional_field('valueminus')
    _color: Optional[ColorWrapper] = optional_field()
    _thickness: Optional[float] = optional_field()
    _width: Optional[float] = optional_field()

    def array(self, array: Sequence[float]) -> 'ErrorData':
        self._array = copy_iterable_to_vec(array)
        return self

    def array_minus(self, array_minus: Sequence[float]) -> 'ErrorData':
        self._array_minus = copy_iterable_to_vec(array_minus)
        return self

    def visible(self, visible: bool) -> 'ErrorData':
        self._visible = visible
        return self

    def symmetric(self, symmetric: bool) -> 'ErrorData':
        self._symmetric = symmetric
        return self

    def value(self, value: float) -> 'ErrorData':
        if value < 0:
            raise ValueError(f"error value must be non-negative, got {value}")
        self._value = value
        return self

    def value_minus(self, value_minus: float) -> 'ErrorData':
        if value_minus < 0:
            raise ValueError(f"error value must be non-negative, got {value_minus}")
        self._value_minus = value_minus
        return self

    def color(self, color: Any) -> 'ErrorData':
        self._color = to_color(color)
        return self

    def thickness(self, thickness: float) -> 'ErrorData':
        if thickness < 0:
            raise ValueError(f"error bar thickness must be non-negative, got {thickness}")
        self._thickness = thickness
        return self

    def width(self, width: float) -> 'ErrorData':
        if width < 0:
            raise ValueError(f"error bar width must be non-negative, got {width}")
        self._width = width
        return self


def visible_value(visible: Union[bool, Visible]) -> Union[bool, TruthyEnum]:
    """Normalize a bool or Visible into a value that serializes as bool or 'legendonly'."""
    if isinstance(visible, Visible):
        return TruthyEnum(visible)
    return bool(visible)
