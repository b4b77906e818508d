from .base import Trace
from .mesh3d import Contour, DelaunayAxis, IntensityMode, Lighting, LightPosition, Mesh3D
from .scatter import Scatter
from .surface import (
    PlaneContours,
    PlaneProject,
    Surface,
    SurfaceContours,
    SurfaceLighting,
    SurfaceLightPosition,
)

__all__ = [
    'Trace', 'Scatter', 'Mesh3D', 'Surface',
    'Contour', 'DelaunayAxis', 'IntensityMode', 'Lighting', 'LightPosition',
    'PlaneContours', 'PlaneProject', 'SurfaceContours', 'SurfaceLighting', 'SurfaceLightPosition',
]
