"""
plotly.js Bridge - hands serialized plots to plotly.js running in the browser
Handles JSON conversion and dispatch to Plotly.newPlot / Plotly.react
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

from .plot import Plot

logger = logging.getLogger(__name__)

# Pyodide exposes the page's JavaScript globals through the `js` module
if sys.platform == 'emscripten':
    import js
    from pyodide.ffi import to_js
    PYODIDE_AVAILABLE = True
else:
    js = None
    to_js = None
    PYODIDE_AVAILABLE = False

# Optional imports for Jupyter notebook support
try:
    import ipywidgets as widgets
    from IPython.display import Javascript, display
    JUPYTER_AVAILABLE = True
except ImportError:
    widgets = None
    Javascript = None
    display = None
    JUPYTER_AVAILABLE = False


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are Python extensions; JSON.parse rejects them
    raise ValueError(f"Out of range float value: {name}")


class PyodideRuntime:
    """Calls the page's global ``Plotly`` object from Python running under Pyodide."""

    def __init__(self):
        if not PYODIDE_AVAILABLE:
            raise RuntimeError("PyodideRuntime requires Python running under Pyodide")

    @staticmethod
    def _to_js(obj: Dict[str, Any]) -> Any:
        # dicts must become plain JS objects, not Maps, for plotly.js
        return to_js(obj, dict_converter=js.Object.fromEntries)

    async def new_plot(self, div_id: str, obj: Dict[str, Any]) -> None:
        await js.Plotly.newPlot(div_id, self._to_js(obj))

    async def react(self, div_id: str, obj: Dict[str, Any]) -> None:
        await js.Plotly.react(div_id, self._to_js(obj))


class NotebookRuntime:
    """
    Emits plotly.js calls into a Jupyter front-end.

    The calls run in the browser against an existing ``div`` and a ``Plotly``
    global already loaded on the page. Scripts are displayed inside an
    ipywidgets Output so repeated calls replace each other instead of piling
    up in the cell output.
    """

    def __init__(self, output: Optional[Any] = None):
        """
        Initialize the notebook runtime.

        Args:
            output: ipywidgets.Output to emit scripts into (default: a new one,
                    displayed on first use)
        """
        if not JUPYTER_AVAILABLE:
            raise RuntimeError("NotebookRuntime requires IPython and ipywidgets")
        self._owns_output = output is None
        self.output = output if output is not None else widgets.Output()
        self._displayed = False

    def _run_script(self, script: str) -> None:
        if self._owns_output and not self._displayed:
            display(self.output)
            self._displayed = True
        self.output.clear_output(wait=True)
        with self.output:
            display(Javascript(script))

    @staticmethod
    def _call(function: str, div_id: str, obj: Dict[str, Any]) -> str:
        return f"Plotly.{function}({json.dumps(div_id)}, {json.dumps(obj, ensure_ascii=False, allow_nan=False)});"

    async def new_plot(self, div_id: str, obj: Dict[str, Any]) -> None:
        self._run_script(self._call('newPlot', div_id, obj))

    async def react(self, div_id: str, obj: Dict[str, Any]) -> None:
        self._run_script(self._call('react', div_id, obj))


class PlotlyBridge:
    """
    Bridge between Python plot documents and plotly.js.
    Handles serialization, re-parsing and dispatch to the runtime.
    """

    def __init__(self, runtime: Optional[Any] = None):
        """
        Initialize the plotly.js bridge.

        Args:
            runtime: Object with coroutine methods ``new_plot(div_id, obj)`` and
                     ``react(div_id, obj)``. Detected from the environment when
                     omitted: Pyodide first, then a Jupyter notebook.
        """
        self.runtime = runtime if runtime is not None else self._detect_runtime()

    @staticmethod
    def _detect_runtime() -> Any:
        if PYODIDE_AVAILABLE:
            return PyodideRuntime()
        if JUPYTER_AVAILABLE:
            return NotebookRuntime()
        logger.warning("Neither Pyodide nor Jupyter is available for plotly.js rendering")
        raise RuntimeError("No plotly.js runtime available: run under Pyodide or Jupyter, or pass runtime=")

    def _plot_object(self, plot: Plot) -> Dict[str, Any]:
        """
        Serialize a plot and parse it back into a generic JSON object.

        Raises:
            RuntimeError: If the plot cannot be serialized or is not a valid JSON object
        """
        try:
            payload = plot.to_json()
        except (TypeError, ValueError) as e:
            raise RuntimeError(f"Failed to serialize plot: {e}") from e
        try:
            obj = json.loads(payload, parse_constant=_reject_constant)
        except ValueError as e:
            raise RuntimeError(f"Invalid JSON produced for plot: {e}") from e
        if not isinstance(obj, dict):
            raise RuntimeError("Invalid JSON structure - expected a top-level object")
        return obj

    async def _dispatch(self, entry_point: str, div_id: str, plot: Plot) -> None:
        obj = self._plot_object(plot)
        logger.debug("Calling %s for element '%s' with %d trace(s)", entry_point, div_id, len(obj['data']))
        try:
            await getattr(self.runtime, entry_point)(div_id, obj)
        except Exception as e:
            raise RuntimeError(f"Error plotting chart in '{div_id}': {e}") from e

    async def new_plot(self, div_id: str, plot: Plot) -> None:
        """
        Draw a new chart with plotly.js ``newPlot``.

        Args:
            div_id: id of an existing HTML element to draw into
            plot: Plot document to draw

        Raises:
            RuntimeError: If the plot cannot be serialized or plotly.js fails
        """
        await self._dispatch('new_plot', div_id, plot)

    async def react(self, div_id: str, plot: Plot) -> None:
        """
        Redraw an existing chart in place with plotly.js ``react``.

        Args:
            div_id: id of the element already holding a chart
            plot: Plot document replacing the current one

        Raises:
            RuntimeError: If the plot cannot be serialized or plotly.js fails
        """
        await self._dispatch('react', div_id, plot)


# Global instance for the module-level functions
_default_bridge = None

def _get_default_bridge() -> PlotlyBridge:
    """Get or create the default plotly.js bridge instance."""
    global _default_bridge
    if _default_bridge is None:
        _default_bridge = PlotlyBridge()
    return _default_bridge


async def new_plot(div_id: str, plot: Plot) -> None:
    """Draw ``plot`` into the element ``div_id`` using the default bridge."""
    await _get_default_bridge().new_plot(div_id, plot)


async def react(div_id: str, plot: Plot) -> None:
    """Redraw the chart in ``div_id`` with ``plot`` using the default bridge."""
    await _get_default_bridge().react(div_id, plot)
