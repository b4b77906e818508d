"""
Tests for the Surface trace builder and its contour objects.
"""

import pytest

from plotspec import (
    Calendar,
    PlaneContours,
    PlaneProject,
    Surface,
    SurfaceContours,
    SurfaceLighting,
    SurfaceLightPosition,
)


class TestSurfaceSerialization:

    def test_minimal_trace_has_only_z(self):
        assert Surface([[1, 2], [3, 4]]).to_dict() == {'type': 'surface', 'z': [[1, 2], [3, 4]]}

    def test_optional_axes(self):
        data = Surface([[1, 2], [3, 4]]).x([0, 1]).y(["a", "b"]).to_dict()
        assert data['x'] == [0, 1]
        assert data['y'] == ['a', 'b']

    def test_contours(self):
        plane = (PlaneContours()
                 .show(True)
                 .use_colormap(True)
                 .project(PlaneProject().z(True))
                 .highlight_color('limegreen'))
        data = Surface([[1]]).contours(SurfaceContours().z(plane)).to_dict()
        assert data['contours'] == {
            'z': {
                'show': True,
                'project': {'z': True},
                'usecolormap': True,
                'highlightcolor': 'limegreen',
            }
        }

    def test_lighting_and_light_position(self):
        data = (Surface([[1]])
                .lighting(SurfaceLighting().ambient(0.5).fresnel(0.2))
                .light_position(SurfaceLightPosition(1, 2, 3))
                .to_dict())
        assert data['lighting'] == {'ambient': 0.5, 'fresnel': 0.2}
        assert data['lightposition'] == {'x': 1, 'y': 2, 'z': 3}

    def test_surface_color_and_flags(self):
        data = (Surface([[1, 2]])
                .surface_color([0.1, 0.9])
                .hide_surface(False)
                .reverse_scale(True)
                .cmin(0)
                .cmax(10)
                .z_calendar(Calendar.GREGORIAN)
                .to_dict())
        assert data['surfacecolor'] == [0.1, 0.9]
        assert data['hidesurface'] is False
        assert data['reversescale'] is True
        assert data['cmin'] == 0
        assert data['cmax'] == 10
        assert data['zcalendar'] == 'gregorian'

    def test_numpy_grid(self):
        np = pytest.importorskip("numpy")
        assert Surface(np.zeros((2, 2))).to_dict()['z'] == [[0.0, 0.0], [0.0, 0.0]]


class TestSurfacePreconditions:

    def test_z_must_be_numeric(self):
        with pytest.raises(TypeError):
            Surface([["a"]])

    @pytest.mark.parametrize("width", [0, 20])
    def test_contour_width_range(self, width):
        with pytest.raises(ValueError):
            PlaneContours().width(width)

    def test_highlight_width_range(self):
        with pytest.raises(ValueError):
            PlaneContours().highlight_width(17)

    def test_lighting_range(self):
        with pytest.raises(ValueError):
            SurfaceLighting().specular(3.0)

    def test_validate_skips_grid_traces(self):
        Surface([[1, 2], [3, 4]]).text_array(["a"]).validate()
