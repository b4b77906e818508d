"""
Tests for the Plot document, Layout and Configuration.
"""

import json

import pytest

from plotspec import (
    Configuration,
    DisplayModeBar,
    DragMode,
    Font,
    HoverMode,
    Layout,
    Margin,
    Mesh3D,
    Plot,
    Scatter,
    Surface,
    Title,
)


class TestPlot:

    def test_empty_plot(self):
        assert Plot().to_dict() == {'data': []}
        assert Plot().to_json() == '{"data": []}'

    def test_traces_keep_insertion_order(self):
        plot = (Plot()
                .add_trace(Scatter([1], [2]))
                .add_trace(Surface([[1]]))
                .add_trace(Mesh3D([0], [0], [0], [0], [0], [0])))
        assert [t['type'] for t in plot.to_dict()['data']] == ['scatter', 'surface', 'mesh3d']

    def test_add_traces(self):
        plot = Plot().add_traces([Scatter([1], [2]), Scatter([3], [4])])
        assert len(plot.traces) == 2

    def test_traces_property_is_a_copy(self):
        plot = Plot().add_trace(Scatter([1], [2]))
        plot.traces.clear()
        assert len(plot.traces) == 1

    def test_rejects_non_traces(self):
        with pytest.raises(TypeError):
            Plot().add_trace({'type': 'scatter'})

    def test_layout_and_config_only_when_set(self):
        plot = Plot().add_trace(Scatter([1], [2]))
        assert set(plot.to_dict()) == {'data'}
        plot.set_layout(Layout().height(300)).set_configuration(Configuration().responsive(True))
        assert plot.to_dict()['layout'] == {'height': 300}
        assert plot.to_dict()['config'] == {'responsive': True}

    def test_serialization_is_idempotent(self):
        plot = (Plot()
                .add_trace(Scatter([1, 2], [3, 4]).name("a"))
                .set_layout(Layout().title("T").hover_mode(HoverMode.CLOSEST)))
        assert plot.to_json() == plot.to_json()
        assert json.loads(plot.to_json()) == plot.to_dict()

    def test_unicode_is_written_verbatim(self):
        plot = Plot().add_trace(Scatter([1], [2]).name("température"))
        assert 'température' in plot.to_json()

    def test_validate_checks_every_trace(self):
        plot = (Plot()
                .add_trace(Scatter([1, 2], [3, 4]).text_array(["a", "b"]))
                .add_trace(Scatter([1, 2, 3], [3, 4, 5]).text_array(["a"])))
        with pytest.raises(ValueError):
            plot.validate()


class TestLayout:

    def test_string_title_is_wrapped(self):
        assert Plot().set_layout(Layout().title("T")).to_dict()['layout'] == {'title': {'text': 'T'}}

    def test_title_object(self):
        title = Title().text("T").font(Font().size(20).family("Arial")).x(0.5)
        data = Plot().set_layout(Layout().title(title)).to_dict()['layout']
        assert data['title'] == {'text': 'T', 'font': {'family': 'Arial', 'size': 20}, 'x': 0.5}

    @pytest.mark.parametrize("mode, expected", [
        (HoverMode.FALSE, False),
        (HoverMode.X_UNIFIED, 'x unified'),
        (HoverMode.CLOSEST, 'closest'),
    ])
    def test_hover_mode(self, mode, expected):
        layout = Plot().set_layout(Layout().hover_mode(mode)).to_dict()['layout']
        assert layout['hovermode'] == expected

    def test_drag_mode(self):
        layout = Plot().set_layout(Layout().drag_mode(DragMode.FALSE)).to_dict()['layout']
        assert layout['dragmode'] is False

    def test_margin_keys(self):
        margin = Margin().left(10).right(20).top(30).bottom(40).pad(4).auto_expand(False)
        layout = Plot().set_layout(Layout().margin(margin)).to_dict()['layout']
        assert layout['margin'] == {'l': 10, 'r': 20, 't': 30, 'b': 40, 'pad': 4, 'autoexpand': False}

    def test_background_colors_and_revision(self):
        layout = (Layout()
                  .paper_background_color('white')
                  .plot_background_color('#eeeeee')
                  .ui_revision("keep")
                  .show_legend(True))
        data = Plot().set_layout(layout).to_dict()['layout']
        assert data['paper_bgcolor'] == 'white'
        assert data['plot_bgcolor'] == '#eeeeee'
        assert data['uirevision'] == 'keep'
        assert data['showlegend'] is True

    def test_negative_margin(self):
        with pytest.raises(ValueError):
            Margin().left(-1)

    @pytest.mark.parametrize("setter", ['width', 'height'])
    def test_minimum_size(self, setter):
        with pytest.raises(ValueError):
            getattr(Layout(), setter)(5)


class TestConfiguration:

    @pytest.mark.parametrize("mode, expected", [
        (DisplayModeBar.HOVER, 'hover'),
        (DisplayModeBar.TRUE, True),
        (DisplayModeBar.FALSE, False),
    ])
    def test_display_mode_bar(self, mode, expected):
        config = Plot().set_configuration(Configuration().display_mode_bar(mode)).to_dict()['config']
        assert config == {'displayModeBar': expected}

    def test_key_names(self):
        config = (Configuration()
                  .static_plot(True)
                  .scroll_zoom(False)
                  .display_logo(False)
                  .fill_frame(True)
                  .editable(True))
        assert Plot().set_configuration(config).to_dict()['config'] == {
            'staticPlot': True,
            'editable': True,
            'scrollZoom': False,
            'displaylogo': False,
            'fillFrame': True,
        }
