"""Mesh plot"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional

from ..color import ColorWrapper, to_color, to_color_array
from ..common import Calendar, ColorBar, ColorScale, PlotType
from ..serialize import optional_field
from ..values import check_range, copy_iterable_to_vec, unwrap_scalar
from .base import Trace
from .scatter import numeric_vector

_LIGHT_POSITION_BOUND = 100_000.0


class IntensityMode(Enum):
    VERTEX = 'vertex'
    CELL = 'cell'


class DelaunayAxis(Enum):
    X = 'x'
    Y = 'y'
    Z = 'z'


def index_vector(name: str, values: Iterable[Any]) -> List[int]:
    """
    Copy a triangle index array.

    Raises:
        TypeError: If an element is not an integer
        ValueError: If an element is negative
    """
    indices = []
    for value in copy_iterable_to_vec(values):
        value = unwrap_scalar(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} indices must be integers, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} indices must be non-negative, got {value}")
        indices.append(value)
    return indices


@dataclass
class Contour:
    """Dynamic contour lines drawn on hover."""
    _color: Optional[ColorWrapper] = optional_field()
    _show: Optional[bool] = optional_field()
    _width: Optional[int] = optional_field()

    def color(self, color: Any) -> 'Contour':
        self._color = to_color(color)
        return self

    def show(self, show: bool) -> 'Contour':
        self._show = show
        return self

    def width(self, width: int) -> 'Contour':
        check_range('contour width', width, 1, 16)
        self._width = width
        return self


@dataclass
class Lighting:
    _ambient: Optional[float] = optional_field()
    _diffuse: Optional[float] = optional_field()
    _face_normals_epsilon: Optional[float] = optional_field('facenormalsepsilon')
    _fresnel: Optional[float] = optional_field()
    _roughness: Optional[float] = optional_field()
    _specular: Optional[float] = optional_field()
    _vertex_normals_epsilon: Optional[float] = optional_field('vertexnormalsepsilon')

    def ambient(self, ambient: float) -> 'Lighting':
        """Ambient light increases overall color visibility but can wash out the image."""
        check_range('ambient', ambient, 0.0, 1.0)
        self._ambient = ambient
        return self

    def diffuse(self, diffuse: float) -> 'Lighting':
        """Extent that incident rays are reflected in a range of angles."""
        check_range('diffuse', diffuse, 0.0, 1.0)
        self._diffuse = diffuse
        return self

    def face_normals_epsilon(self, face_normals_epsilon: float) -> 'Lighting':
        check_range('face_normals_epsilon', face_normals_epsilon, 0.0, 1.0)
        self._face_normals_epsilon = face_normals_epsilon
        return self

    def fresnel(self, fresnel: float) -> 'Lighting':
        """Reflectance as a function of viewing angle (shine seen at grazing angles)."""
        check_range('fresnel', fresnel, 0.0, 5.0)
        self._fresnel = fresnel
        return self

    def roughness(self, roughness: float) -> 'Lighting':
        check_range('roughness', roughness, 0.0, 1.0)
        self._roughness = roughness
        return self

    def specular(self, specular: float) -> 'Lighting':
        check_range('specular', specular, 0.0, 2.0)
        self._specular = specular
        return self

    def vertex_normals_epsilon(self, vertex_normals_epsilon: float) -> 'Lighting':
        check_range('vertex_normals_epsilon', vertex_normals_epsilon, 0.0, 1.0)
        self._vertex_normals_epsilon = vertex_normals_epsilon
        return self


@dataclass
class LightPosition:
    """Position of the light source, one coordinate per vertex."""
    _x: Optional[List[float]] = optional_field()
    _y: Optional[List[float]] = optional_field()
    _z: Optional[List[float]] = optional_field()

    @staticmethod
    def _bounded(name: str, values: Iterable[float]) -> List[float]:
        values = numeric_vector(name, values)
        for value in values:
            check_range(name, value, -_LIGHT_POSITION_BOUND, _LIGHT_POSITION_BOUND)
        return values

    def x(self, x: Iterable[float]) -> 'LightPosition':
        self._x = self._bounded('light position x', x)
        return self

    def y(self, y: Iterable[float]) -> 'LightPosition':
        self._y = self._bounded('light position y', y)
        return self

    def z(self, z: Iterable[float]) -> 'LightPosition':
        self._z = self._bounded('light position z', z)
        return self


@dataclass
class Mesh3D(Trace):
    """
    Triangle mesh from vertex coordinates ``x``, ``y``, ``z`` and index triples ``i``, ``j``, ``k``.

    Triangle ``n`` joins vertices ``i[n]``, ``j[n]`` and ``k[n]``.

    Examples:
        Mesh3D([0, 1, 0], [0, 0, 1], [0, 0, 0], [0], [1], [2]).color(NamedColor.RED)
    """
    plot_type = PlotType.MESH3D

    x: List[Any]
    y: List[Any]
    z: List[Any]
    i: List[int]
    j: List[int]
    k: List[int]
    _face_color: Optional[List[ColorWrapper]] = optional_field('facecolor')
    _intensity: Optional[List[float]] = optional_field()
    _intensity_mode: Optional[IntensityMode] = optional_field('intensitymode')
    _vertex_color: Optional[List[ColorWrapper]] = optional_field('vertexcolor')
    _x_hover_format: Optional[str] = optional_field('xhoverformat')
    _y_hover_format: Optional[str] = optional_field('yhoverformat')
    _z_hover_format: Optional[str] = optional_field('zhoverformat')
    _scene: Optional[str] = optional_field()
    _color_axis: Optional[str] = optional_field('coloraxis')
    _color: Optional[ColorWrapper] = optional_field()
    _color_bar: Optional[ColorBar] = optional_field('colorbar')
    _auto_color_scale: Optional[bool] = optional_field('autocolorscale')
    _color_scale: Optional[ColorScale] = optional_field('colorscale')
    _show_scale: Optional[bool] = optional_field('showscale')
    _reverse_scale: Optional[bool] = optional_field('reversescale')
    _cauto: Optional[bool] = optional_field()
    _cmax: Optional[float] = optional_field()
    _cmid: Optional[float] = optional_field()
    _cmin: Optional[float] = optional_field()
    _alpha_hull: Optional[float] = optional_field('alphahull')
    _delaunay_axis: Optional[DelaunayAxis] = optional_field('delaunayaxis')
    _contour: Optional[Contour] = optional_field()
    _flat_shading: Optional[bool] = optional_field('flatshading')
    _lighting: Optional[Lighting] = optional_field()
    _light_position: Optional[LightPosition] = optional_field('lightposition')
    _x_calendar: Optional[Calendar] = optional_field('xcalendar')
    _y_calendar: Optional[Calendar] = optional_field('ycalendar')
    _z_calendar: Optional[Calendar] = optional_field('zcalendar')

    def __post_init__(self):
        self.x = [unwrap_scalar(v) for v in copy_iterable_to_vec(self.x)]
        self.y = [unwrap_scalar(v) for v in copy_iterable_to_vec(self.y)]
        self.z = [unwrap_scalar(v) for v in copy_iterable_to_vec(self.z)]
        self.i = index_vector('i', self.i)
        self.j = index_vector('j', self.j)
        self.k = index_vector('k', self.k)

    def point_count(self) -> Optional[int]:
        return len(self.x)

    def face_color(self, face_color: Iterable[Any]) -> 'Mesh3D':
        """One color per triangle face."""
        self._face_color = to_color_array(face_color)
        return self

    def intensity(self, intensity: Iterable[float]) -> 'Mesh3D':
        """Per-vertex or per-cell values mapped through the colorscale."""
        self._intensity = numeric_vector('intensity', intensity)
        return self

    def intensity_mode(self, intensity_mode: IntensityMode) -> 'Mesh3D':
        self._intensity_mode = intensity_mode
        return self

    def vertex_color(self, vertex_color: Iterable[Any]) -> 'Mesh3D':
        """One color per vertex."""
        self._vertex_color = to_color_array(vertex_color)
        return self

    def x_hover_format(self, x_hover_format: str) -> 'Mesh3D':
        self._x_hover_format = str(x_hover_format)
        return self

    def y_hover_format(self, y_hover_format: str) -> 'Mesh3D':
        self._y_hover_format = str(y_hover_format)
        return self

    def z_hover_format(self, z_hover_format: str) -> 'Mesh3D':
        """d3-format rule for ``z`` in hover labels."""
        self._z_hover_format = str(z_hover_format)
        return self

    def scene(self, scene: str) -> 'Mesh3D':
        """3D scene this trace is drawn in ("scene", "scene2", ...)."""
        self._scene = str(scene)
        return self

    def color_axis(self, color_axis: str) -> 'Mesh3D':
        self._color_axis = str(color_axis)
        return self

    def color(self, color: Any) -> 'Mesh3D':
        """Color of the whole mesh."""
        self._color = to_color(color)
        return self

    def color_bar(self, color_bar: ColorBar) -> 'Mesh3D':
        self._color_bar = color_bar
        return self

    def auto_color_scale(self, auto_color_scale: bool) -> 'Mesh3D':
        self._auto_color_scale = auto_color_scale
        return self

    def color_scale(self, color_scale: ColorScale) -> 'Mesh3D':
        self._color_scale = color_scale
        return self

    def show_scale(self, show_scale: bool) -> 'Mesh3D':
        self._show_scale = show_scale
        return self

    def reverse_scale(self, reverse_scale: bool) -> 'Mesh3D':
        self._reverse_scale = reverse_scale
        return self

    def cauto(self, cauto: bool) -> 'Mesh3D':
        self._cauto = cauto
        return self

    def cmax(self, cmax: float) -> 'Mesh3D':
        self._cmax = cmax
        return self

    def cmid(self, cmid: float) -> 'Mesh3D':
        self._cmid = cmid
        return self

    def cmin(self, cmin: float) -> 'Mesh3D':
        self._cmin = cmin
        return self

    def alpha_hull(self, alpha_hull: float) -> 'Mesh3D':
        """
        Triangulation used when ``i``/``j``/``k`` are empty: -1 for Delaunay,
        0 for the convex hull, a positive value for an alpha shape.
        """
        self._alpha_hull = alpha_hull
        return self

    def delaunay_axis(self, delaunay_axis: DelaunayAxis) -> 'Mesh3D':
        self._delaunay_axis = delaunay_axis
        return self

    def contour(self, contour: Contour) -> 'Mesh3D':
        self._contour = contour
        return self

    def flat_shading(self, flat_shading: bool) -> 'Mesh3D':
        self._flat_shading = flat_shading
        return self

    def lighting(self, lighting: Lighting) -> 'Mesh3D':
        self._lighting = lighting
        return self

    def light_position(self, light_position: LightPosition) -> 'Mesh3D':
        self._light_position = light_position
        return self

    def x_calendar(self, x_calendar: Calendar) -> 'Mesh3D':
        self._x_calendar = x_calendar
        return self

    def y_calendar(self, y_calendar: Calendar) -> 'Mesh3D':
        self._y_calendar = y_calendar
        return self

    def z_calendar(self, z_calendar: Calendar) -> 'Mesh3D':
        self._z_calendar = z_calendar
        return self
