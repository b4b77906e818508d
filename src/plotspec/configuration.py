"""plotly.js ``config`` object - interaction and mode bar options"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .serialize import optional_field
from .values import TruthyEnum


class DisplayModeBar(Enum):
    HOVER = 'hover'
    TRUE = 'true'
    FALSE = 'false'


@dataclass
class Configuration:
    _static_plot: Optional[bool] = optional_field('staticPlot')
    _editable: Optional[bool] = optional_field()
    _responsive: Optional[bool] = optional_field()
    _scroll_zoom: Optional[bool] = optional_field('scrollZoom')
    _display_mode_bar: Optional[TruthyEnum] = optional_field('displayModeBar')
    _display_logo: Optional[bool] = optional_field('displaylogo')
    _fill_frame: Optional[bool] = optional_field('fillFrame')

    def static_plot(self, static_plot: bool) -> 'Configuration':
        self._static_plot = static_plot
        return self

    def editable(self, editable: bool) -> 'Configuration':
        self._editable = editable
        return self

    def responsive(self, responsive: bool) -> 'Configuration':
        self._responsive = responsive
        return self

    def scroll_zoom(self, scroll_zoom: bool) -> 'Configuration':
        self._scroll_zoom = scroll_zoom
        return self

    def display_mode_bar(self, display_mode_bar: DisplayModeBar) -> 'Configuration':
        """Always show the mode bar (TRUE), never (FALSE), or only on hover."""
        self._display_mode_bar = TruthyEnum(display_mode_bar)
        return self

    def display_logo(self, display_logo: bool) -> 'Configuration':
        self._display_logo = display_logo
        return self

    def fill_frame(self, fill_frame: bool) -> 'Configuration':
        self._fill_frame = fill_frame
        return self
