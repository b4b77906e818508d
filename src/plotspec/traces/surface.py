"""Surface plot"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from ..color import ColorWrapper, to_color, to_color_array
from ..common import Calendar, ColorBar, ColorScale, PlotType
from ..serialize import optional_field
from ..values import check_range, copy_iterable_to_vec, unwrap_scalar
from .base import Trace
from .scatter import numeric_vector


@dataclass
class SurfaceLighting:
    _ambient: Optional[float] = optional_field()
    _diffuse: Optional[float] = optional_field()
    _specular: Optional[float] = optional_field()
    _roughness: Optional[float] = optional_field()
    _fresnel: Optional[float] = optional_field()

    def ambient(self, ambient: float) -> 'SurfaceLighting':
        check_range('ambient', ambient, 0.0, 1.0)
        self._ambient = ambient
        return self

    def diffuse(self, diffuse: float) -> 'SurfaceLighting':
        check_range('diffuse', diffuse, 0.0, 1.0)
        self._diffuse = diffuse
        return self

    def specular(self, specular: float) -> 'SurfaceLighting':
        check_range('specular', specular, 0.0, 2.0)
        self._specular = specular
        return self

    def roughness(self, roughness: float) -> 'SurfaceLighting':
        check_range('roughness', roughness, 0.0, 1.0)
        self._roughness = roughness
        return self

    def fresnel(self, fresnel: float) -> 'SurfaceLighting':
        check_range('fresnel', fresnel, 0.0, 5.0)
        self._fresnel = fresnel
        return self


@dataclass
class SurfaceLightPosition:
    """Light source position in scene coordinates."""
    x: int
    y: int
    z: int


@dataclass
class PlaneProject:
    """Axes onto which contour lines are projected."""
    _x: Optional[bool] = optional_field()
    _y: Optional[bool] = optional_field()
    _z: Optional[bool] = optional_field()

    def x(self, x: bool) -> 'PlaneProject':
        self._x = x
        return self

    def y(self, y: bool) -> 'PlaneProject':
        self._y = y
        return self

    def z(self, z: bool) -> 'PlaneProject':
        self._z = z
        return self


@dataclass
class PlaneContours:
    _show: Optional[bool] = optional_field()
    _start: Optional[float] = optional_field()
    _end: Optional[float] = optional_field()
    _size: Optional[float] = optional_field()
    _project: Optional[PlaneProject] = optional_field()
    _color: Optional[ColorWrapper] = optional_field()
    _use_colormap: Optional[bool] = optional_field('usecolormap')
    _width: Optional[int] = optional_field()
    _highlight: Optional[bool] = optional_field()
    _highlight_color: Optional[ColorWrapper] = optional_field('highlightcolor')
    _highlight_width: Optional[int] = optional_field('highlightwidth')

    def show(self, show: bool) -> 'PlaneContours':
        self._show = show
        return self

    def start(self, start: float) -> 'PlaneContours':
        self._start = start
        return self

    def end(self, end: float) -> 'PlaneContours':
        self._end = end
        return self

    def size(self, size: float) -> 'PlaneContours':
        if size < 0:
            raise ValueError(f"contour size must be non-negative, got {size}")
        self._size = size
        return self

    def project(self, project: PlaneProject) -> 'PlaneContours':
        self._project = project
        return self

    def color(self, color: Any) -> 'PlaneContours':
        self._color = to_color(color)
        return self

    def use_colormap(self, use_colormap: bool) -> 'PlaneContours':
        self._use_colormap = use_colormap
        return self

    def width(self, width: int) -> 'PlaneContours':
        check_range('contour width', width, 1, 16)
        self._width = width
        return self

    def highlight(self, highlight: bool) -> 'PlaneContours':
        self._highlight = highlight
        return self

    def highlight_color(self, highlight_color: Any) -> 'PlaneContours':
        self._highlight_color = to_color(highlight_color)
        return self

    def highlight_width(self, highlight_width: int) -> 'PlaneContours':
        check_range('highlight width', highlight_width, 1, 16)
        self._highlight_width = highlight_width
        return self


@dataclass
class SurfaceContours:
    _x: Optional[PlaneContours] = optional_field()
    _y: Optional[PlaneContours] = optional_field()
    _z: Optional[PlaneContours] = optional_field()

    def x(self, x: PlaneContours) -> 'SurfaceContours':
        self._x = x
        return self

    def y(self, y: PlaneContours) -> 'SurfaceContours':
        self._y = y
        return self

    def z(self, z: PlaneContours) -> 'SurfaceContours':
        self._z = z
        return self


@dataclass
class Surface(Trace):
    """
    3D surface from a grid of ``z`` heights, one row per ``y`` value.

    ``x`` and ``y`` are optional; without them plotly.js uses row and column
    indices.

    Examples:
        Surface([[1, 2], [3, 4]]).x([0, 1]).y([10, 20]).show_scale(False)
    """
    plot_type = PlotType.SURFACE

    z: List[List[Any]]
    _x: Optional[List[Any]] = optional_field()
    _y: Optional[List[Any]] = optional_field()
    _surface_color: Optional[List[ColorWrapper]] = optional_field('surfacecolor')
    _color_bar: Optional[ColorBar] = optional_field('colorbar')
    _auto_color_scale: Optional[bool] = optional_field('autocolorscale')
    _color_scale: Optional[ColorScale] = optional_field('colorscale')
    _show_scale: Optional[bool] = optional_field('showscale')
    _reverse_scale: Optional[bool] = optional_field('reversescale')
    _cauto: Optional[bool] = optional_field()
    _cmin: Optional[float] = optional_field()
    _cmax: Optional[float] = optional_field()
    _cmid: Optional[float] = optional_field()
    _connect_gaps: Optional[bool] = optional_field('connectgaps')
    _contours: Optional[SurfaceContours] = optional_field()
    _hide_surface: Optional[bool] = optional_field('hidesurface')
    _lighting: Optional[SurfaceLighting] = optional_field()
    _light_position: Optional[SurfaceLightPosition] = optional_field('lightposition')
    _x_calendar: Optional[Calendar] = optional_field('xcalendar')
    _y_calendar: Optional[Calendar] = optional_field('ycalendar')
    _z_calendar: Optional[Calendar] = optional_field('zcalendar')

    def __post_init__(self):
        self.z = [numeric_vector('z', row) for row in copy_iterable_to_vec(self.z)]

    def x(self, x: Iterable[Any]) -> 'Surface':
        self._x = [unwrap_scalar(v) for v in copy_iterable_to_vec(x)]
        return self

    def y(self, y: Iterable[Any]) -> 'Surface':
        self._y = [unwrap_scalar(v) for v in copy_iterable_to_vec(y)]
        return self

    def surface_color(self, surface_color: Iterable[Any]) -> 'Surface':
        """Colors for the surface, used instead of ``z`` for coloring."""
        self._surface_color = to_color_array(surface_color)
        return self

    def color_bar(self, color_bar: ColorBar) -> 'Surface':
        self._color_bar = color_bar
        return self

    def auto_color_scale(self, auto_color_scale: bool) -> 'Surface':
        self._auto_color_scale = auto_color_scale
        return self

    def color_scale(self, color_scale: ColorScale) -> 'Surface':
        self._color_scale = color_scale
        return self

    def show_scale(self, show_scale: bool) -> 'Surface':
        self._show_scale = show_scale
        return self

    def reverse_scale(self, reverse_scale: bool) -> 'Surface':
        self._reverse_scale = reverse_scale
        return self

    def cauto(self, cauto: bool) -> 'Surface':
        self._cauto = cauto
        return self

    def cmin(self, cmin: float) -> 'Surface':
        self._cmin = cmin
        return self

    def cmax(self, cmax: float) -> 'Surface':
        self._cmax = cmax
        return self

    def cmid(self, cmid: float) -> 'Surface':
        self._cmid = cmid
        return self

    def connect_gaps(self, connect_gaps: bool) -> 'Surface':
        self._connect_gaps = connect_gaps
        return self

    def contours(self, contours: SurfaceContours) -> 'Surface':
        self._contours = contours
        return self

    def hide_surface(self, hide_surface: bool) -> 'Surface':
        self._hide_surface = hide_surface
        return self

    def lighting(self, lighting: SurfaceLighting) -> 'Surface':
        self._lighting = lighting
        return self

    def light_position(self, light_position: SurfaceLightPosition) -> 'Surface':
        self._light_position = light_position
        return self

    def x_calendar(self, x_calendar: Calendar) -> 'Surface':
        self._x_calendar = x_calendar
        return self

    def y_calendar(self, y_calendar: Calendar) -> 'Surface':
        self._y_calendar = y_calendar
        return self

    def z_calendar(self, z_calendar: Calendar) -> 'Surface':
        self._z_calendar = z_calendar
        return self
