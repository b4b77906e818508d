"""
Tests for the plotly.js bridge, using recording runtimes in place of a browser.
"""

from types import SimpleNamespace

import pytest

from plotspec import Layout, Plot, Scatter, bridge
from plotspec.bridge import NotebookRuntime, PlotlyBridge, PyodideRuntime


class RecordingRuntime:
    def __init__(self):
        self.calls = []

    async def new_plot(self, div_id, obj):
        self.calls.append(('new_plot', div_id, obj))

    async def react(self, div_id, obj):
        self.calls.append(('react', div_id, obj))


class FailingRuntime:
    async def new_plot(self, div_id, obj):
        raise ValueError("Plotly is not defined")

    async def react(self, div_id, obj):
        raise ValueError("Plotly is not defined")


class FakeOutput:
    def __init__(self):
        self.cleared = 0

    def clear_output(self, wait=False):
        self.cleared += 1

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


@pytest.fixture
def plot():
    return (Plot()
            .add_trace(Scatter([1, 2], [3, 4]).name("a"))
            .set_layout(Layout().title("T")))


class TestPlotlyBridge:

    @pytest.mark.asyncio
    async def test_new_plot_passes_plot_object(self, plot):
        runtime = RecordingRuntime()
        await PlotlyBridge(runtime).new_plot("chart", plot)
        assert runtime.calls == [('new_plot', 'chart', plot.to_dict())]

    @pytest.mark.asyncio
    async def test_react(self, plot):
        runtime = RecordingRuntime()
        await PlotlyBridge(runtime).react("chart", plot)
        assert runtime.calls == [('react', 'chart', plot.to_dict())]

    @pytest.mark.asyncio
    async def test_runtime_errors_are_wrapped(self, plot):
        with pytest.raises(RuntimeError, match="chart") as excinfo:
            await PlotlyBridge(FailingRuntime()).new_plot("chart", plot)
        assert isinstance(excinfo.value.__cause__, ValueError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", ['[1]', '{', '{"data": [NaN]}', '{"data": [], "meta": Infinity}'])
    async def test_invalid_json_is_rejected(self, monkeypatch, plot, payload):
        runtime = RecordingRuntime()
        monkeypatch.setattr(plot, 'to_json', lambda: payload)
        with pytest.raises(RuntimeError):
            await PlotlyBridge(runtime).new_plot("chart", plot)
        assert runtime.calls == []

    def test_no_runtime_available(self, monkeypatch):
        monkeypatch.setattr(bridge, 'PYODIDE_AVAILABLE', False)
        monkeypatch.setattr(bridge, 'JUPYTER_AVAILABLE', False)
        with pytest.raises(RuntimeError, match="No plotly.js runtime"):
            PlotlyBridge()

    @pytest.mark.asyncio
    async def test_module_functions_use_default_bridge(self, monkeypatch, plot):
        runtime = RecordingRuntime()
        monkeypatch.setattr(bridge, '_default_bridge', PlotlyBridge(runtime))
        await bridge.new_plot("a", plot)
        await bridge.react("b", plot)
        assert [(name, div_id) for name, div_id, _ in runtime.calls] == [('new_plot', 'a'), ('react', 'b')]


class TestNotebookRuntime:

    @pytest.fixture
    def displayed(self, monkeypatch):
        shown = []
        monkeypatch.setattr(bridge, 'JUPYTER_AVAILABLE', True)
        monkeypatch.setattr(bridge, 'Javascript', lambda script: ('js', script))
        monkeypatch.setattr(bridge, 'display', shown.append)
        return shown

    @pytest.mark.asyncio
    async def test_emits_new_plot_script(self, displayed):
        output = FakeOutput()
        await NotebookRuntime(output).new_plot("chart", {'data': []})
        assert displayed == [('js', 'Plotly.newPlot("chart", {"data": []});')]
        assert output.cleared == 1

    @pytest.mark.asyncio
    async def test_react_replaces_previous_script(self, displayed):
        output = FakeOutput()
        runtime = NotebookRuntime(output)
        await runtime.new_plot("chart", {'data': []})
        await runtime.react("chart", {'data': [{'type': 'scatter'}]})
        assert displayed[-1] == ('js', 'Plotly.react("chart", {"data": [{"type": "scatter"}]});')
        assert output.cleared == 2


class TestBridgeSerialization:

    @pytest.mark.asyncio
    async def test_non_finite_values_reach_runtime_as_null(self):
        runtime = RecordingRuntime()
        plot = Plot().add_trace(Scatter([1, 2], [1.0, float('nan')]).meta(float('inf')))
        await PlotlyBridge(runtime).new_plot("chart", plot)
        _, _, obj = runtime.calls[0]
        assert obj['data'][0]['y'] == [1.0, None]
        assert obj['data'][0]['meta'] is None

    @pytest.mark.asyncio
    async def test_unserializable_value_raises_runtime_error(self):
        runtime = RecordingRuntime()
        plot = Plot().add_trace(Scatter([object()], [1]))
        with pytest.raises(RuntimeError, match="serialize") as excinfo:
            await PlotlyBridge(runtime).new_plot("chart", plot)
        assert isinstance(excinfo.value.__cause__, TypeError)
        assert runtime.calls == []


class FakePlotly:
    def __init__(self):
        self.calls = []

    async def newPlot(self, div_id, obj):
        self.calls.append(('newPlot', div_id, obj))

    async def react(self, div_id, obj):
        self.calls.append(('react', div_id, obj))


class TestPyodideRuntime:

    @pytest.fixture
    def fake_js(self, monkeypatch):
        fake = SimpleNamespace(Plotly=FakePlotly(), Object=SimpleNamespace(fromEntries=object()))
        monkeypatch.setattr(bridge, 'PYODIDE_AVAILABLE', True)
        monkeypatch.setattr(bridge, 'js', fake)
        monkeypatch.setattr(bridge, 'to_js', lambda obj, dict_converter: ('js-object', obj, dict_converter))
        return fake

    @pytest.mark.asyncio
    async def test_new_plot_converts_dicts_to_js_objects(self, fake_js):
        await PyodideRuntime().new_plot("chart", {'data': []})
        assert fake_js.Plotly.calls == [
            ('newPlot', 'chart', ('js-object', {'data': []}, fake_js.Object.fromEntries)),
        ]

    @pytest.mark.asyncio
    async def test_react(self, fake_js, plot):
        await PlotlyBridge(PyodideRuntime()).react("chart", plot)
        name, div_id, (_, obj, _) = fake_js.Plotly.calls[0]
        assert (name, div_id) == ('react', 'chart')
        assert obj == plot.to_dict()

    def test_detection_prefers_pyodide(self, fake_js, monkeypatch):
        monkeypatch.setattr(bridge, 'JUPYTER_AVAILABLE', True)
        assert isinstance(PlotlyBridge().runtime, PyodideRuntime)

    def test_requires_pyodide(self, monkeypatch):
        monkeypatch.setattr(bridge, 'PYODIDE_AVAILABLE', False)
        with pytest.raises(RuntimeError, match="Pyodide"):
            PyodideRuntime()
