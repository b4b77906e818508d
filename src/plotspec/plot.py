"""
Plot document - traces plus layout and configuration, serialized as the single
object plotly.js ``newPlot`` / ``react`` accept.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from .configuration import Configuration
from .layout import Layout
from .serialize import serialize
from .traces.base import Trace

logger = logging.getLogger(__name__)


class Plot:
    """
    A complete figure: ``{"data": [...], "layout": {...}, "config": {...}}``.

    Examples:
        plot = Plot()
        plot.add_trace(Scatter([1, 2, 3], [2, 4, 8]).name("growth"))
        plot.set_layout(Layout().title("Growth").height(400))
        plot.to_json()
    """

    def __init__(self):
        self._traces: List[Trace] = []
        self._layout: Optional[Layout] = None
        self._configuration: Optional[Configuration] = None

    @property
    def traces(self) -> List[Trace]:
        return list(self._traces)

    @property
    def layout(self) -> Optional[Layout]:
        return self._layout

    @property
    def configuration(self) -> Optional[Configuration]:
        return self._configuration

    def add_trace(self, trace: Trace) -> 'Plot':
        if not isinstance(trace, Trace):
            raise TypeError(f"Expected a trace, got {type(trace).__name__}")
        self._traces.append(trace)
        return self

    def add_traces(self, traces: Iterable[Trace]) -> 'Plot':
        for trace in traces:
            self.add_trace(trace)
        return self

    def set_layout(self, layout: Layout) -> 'Plot':
        self._layout = layout
        return self

    def set_configuration(self, configuration: Configuration) -> 'Plot':
        self._configuration = configuration
        return self

    def validate(self) -> None:
        """Run every trace's per-point length check (see Trace.validate)."""
        for trace in self._traces:
            trace.validate()

    def to_dict(self) -> Dict[str, Any]:
        data = {'data': [trace.to_dict() for trace in self._traces]}
        if self._layout is not None:
            data['layout'] = serialize(self._layout)
        if self._configuration is not None:
            data['config'] = serialize(self._configuration)
        return data

    def to_json(self) -> str:
        payload = json.dumps(self.to_dict(), ensure_ascii=False, allow_nan=False)
        logger.debug("Serialized plot with %d trace(s) to %d characters", len(self._traces), len(payload))
        return payload
