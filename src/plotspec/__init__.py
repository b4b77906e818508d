"""
plotspec - typed plotly.js figure builders for Python

Build plotly.js traces with chained setters, collect them in a Plot and
serialize to the exact JSON plotly.js expects. In the browser (Pyodide) or a
Jupyter notebook the same Plot can be handed straight to Plotly.newPlot or
Plotly.react.

Features:
- Scatter, Mesh3D and Surface traces with plotly.js field names
- Unset fields are left out of the JSON entirely
- Mixed-kind values: NumOrString, Dim (scalar or per-point), TruthyEnum
- Colors from names, hex/rgb strings, Rgb/Rgba, or colorscale numbers
- Eager range checks on setters (lighting, widths, opacity)

Usage:
    import plotspec as ps

    trace = (ps.Scatter([1, 2, 3], [2, 4, 8])
             .name("growth")
             .mode(ps.Mode.LINES_MARKERS)
             .text_array(["a", "b", "c"]))

    plot = ps.Plot().add_trace(trace).set_layout(ps.Layout().title("Growth"))
    plot.to_json()

    # Inside Pyodide or Jupyter
    await ps.new_plot("chart-div", plot)
    await ps.react("chart-div", plot)
"""

from .bridge import NotebookRuntime, PlotlyBridge, PyodideRuntime, new_plot, react
from .color import (
    Color,
    ColorWrapper,
    NamedColor,
    Rgb,
    Rgba,
    is_mixed_color_array,
    is_valid_color_array,
    to_color,
    to_color_array,
)
from .common import (
    Anchor,
    Calendar,
    ColorBar,
    ColorScale,
    ColorScalePalette,
    DashType,
    ErrorData,
    ErrorType,
    Fill,
    Font,
    GroupNorm,
    HoverInfo,
    Label,
    LegendGroupTitle,
    Line,
    LineShape,
    Marker,
    MarkerSymbol,
    Mode,
    Orientation,
    PlotType,
    Position,
    Title,
    Visible,
)
from .configuration import Configuration, DisplayModeBar
from .layout import DragMode, HoverMode, Layout, Margin
from .plot import Plot
from .traces import (
    Contour,
    DelaunayAxis,
    IntensityMode,
    Lighting,
    LightPosition,
    Mesh3D,
    PlaneContours,
    PlaneProject,
    Scatter,
    Surface,
    SurfaceContours,
    SurfaceLighting,
    SurfaceLightPosition,
    Trace,
)
from .values import Dim, NumOrString, TruthyEnum, to_num_or_string_wrapper

__version__ = "0.1.0"

__all__ = [
    'Plot', 'Layout', 'Margin', 'HoverMode', 'DragMode', 'Configuration', 'DisplayModeBar',
    'Trace', 'Scatter', 'Mesh3D', 'Surface',
    'Contour', 'DelaunayAxis', 'IntensityMode', 'Lighting', 'LightPosition',
    'PlaneContours', 'PlaneProject', 'SurfaceContours', 'SurfaceLighting', 'SurfaceLightPosition',
    'Anchor', 'Calendar', 'ColorBar', 'ColorScale', 'ColorScalePalette', 'DashType', 'ErrorData',
    'ErrorType', 'Fill', 'Font', 'GroupNorm', 'HoverInfo', 'Label', 'LegendGroupTitle', 'Line',
    'LineShape', 'Marker', 'MarkerSymbol', 'Mode', 'Orientation', 'PlotType', 'Position', 'Title',
    'Visible',
    'Color', 'ColorWrapper', 'NamedColor', 'Rgb', 'Rgba', 'to_color', 'to_color_array',
    'is_valid_color_array', 'is_mixed_color_array',
    'Dim', 'NumOrString', 'TruthyEnum', 'to_num_or_string_wrapper',
    'PlotlyBridge', 'PyodideRuntime', 'NotebookRuntime', 'new_plot', 'react',
]
