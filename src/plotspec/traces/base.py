"""
Trace base class - fields every plotly.js trace accepts plus the shared
serialization and fluent-setter protocol.
"""

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from ..common import HoverInfo, Label, LegendGroupTitle, PlotType, Visible, visible_value
from ..serialize import field_key, optional_field, serialize_fields
from ..values import (
    Dim,
    NumOrString,
    TruthyEnum,
    check_range,
    owned_string_vector,
    to_num_or_string_wrapper,
)

T = TypeVar('T', bound='Trace')


def _per_point_values(obj: Any, prefix: str = '') -> Iterator[Tuple[str, Dim]]:
    """Yield (dotted key, Dim) for every vector Dim set on obj or its nested objects."""
    for field in dataclasses.fields(obj):
        value = getattr(obj, field.name)
        key = prefix + field_key(field)
        if isinstance(value, Dim):
            if value.is_vector:
                yield key, value
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            yield from _per_point_values(value, key + '.')


@dataclass
class Trace:
    """
    Base for all trace builders.

    Subclasses set ``plot_type`` and declare their required geometry as
    constructor fields; everything else is an optional field configured with
    chained setters, each returning the trace itself. Setting a field twice
    keeps the last value.
    """
    plot_type: ClassVar[PlotType]

    _name: Optional[str] = optional_field()
    _visible: Optional[Union[bool, TruthyEnum]] = optional_field()
    _show_legend: Optional[bool] = optional_field('showlegend')
    _legend_rank: Optional[int] = optional_field('legendrank')
    _legend_group: Optional[str] = optional_field('legendgroup')
    _legend_group_title: Optional[LegendGroupTitle] = optional_field('legendgrouptitle')
    _opacity: Optional[float] = optional_field()
    _ids: Optional[List[str]] = optional_field()
    _text: Optional[Dim[str]] = optional_field()
    _hover_text: Optional[Dim[str]] = optional_field('hovertext')
    _hover_info: Optional[HoverInfo] = optional_field('hoverinfo')
    _hover_template: Optional[Dim[str]] = optional_field('hovertemplate')
    _hover_label: Optional[Label] = optional_field('hoverlabel')
    _meta: Optional[NumOrString] = optional_field()
    _custom_data: Optional[List[NumOrString]] = optional_field('customdata')
    _ui_revision: Optional[NumOrString] = optional_field('uirevision')

    def to_dict(self) -> Dict[str, Any]:
        """JSON tree for this trace: ``type`` first, unset fields omitted."""
        data = {'type': self.plot_type.value}
        data.update(serialize_fields(self))
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, allow_nan=False)

    def point_count(self) -> Optional[int]:
        """Number of data points per-point arrays should match, if well defined."""
        return None

    def validate(self) -> None:
        """
        Check per-point arrays against the trace's point count.

        Nothing calls this implicitly; plotly.js itself tolerates mismatched
        lengths, so the check is opt-in.

        Raises:
            ValueError: If a per-point field has a different number of values
        """
        points = self.point_count()
        if points is None:
            return
        for key, value in _per_point_values(self):
            if value.length() != points:
                raise ValueError(
                    f"{self.plot_type.value} field '{key}' has "
                    f"{value.length()} values but the trace has {points} points"
                )

    def name(self: T, name: str) -> T:
        self._name = str(name)
        return self

    def visible(self: T, visible: Union[bool, Visible]) -> T:
        """Show or hide the trace; Visible.LEGEND_ONLY keeps only its legend entry."""
        self._visible = visible_value(visible)
        return self

    def show_legend(self: T, show_legend: bool) -> T:
        self._show_legend = show_legend
        return self

    def legend_rank(self: T, legend_rank: int) -> T:
        self._legend_rank = legend_rank
        return self

    def legend_group(self: T, legend_group: str) -> T:
        self._legend_group = str(legend_group)
        return self

    def legend_group_title(self: T, legend_group_title: LegendGroupTitle) -> T:
        self._legend_group_title = legend_group_title
        return self

    def opacity(self: T, opacity: float) -> T:
        check_range('opacity', opacity, 0.0, 1.0)
        self._opacity = opacity
        return self

    def ids(self: T, ids: Iterable[Any]) -> T:
        self._ids = owned_string_vector(ids)
        return self

    def text(self: T, text: str) -> T:
        self._text = Dim.scalar(str(text))
        return self

    def text_array(self: T, text: Iterable[Any]) -> T:
        self._text = Dim.vector(owned_string_vector(text))
        return self

    def hover_text(self: T, hover_text: str) -> T:
        self._hover_text = Dim.scalar(str(hover_text))
        return self

    def hover_text_array(self: T, hover_text: Iterable[Any]) -> T:
        self._hover_text = Dim.vector(owned_string_vector(hover_text))
        return self

    def hover_info(self: T, hover_info: HoverInfo) -> T:
        self._hover_info = hover_info
        return self

    def hover_template(self: T, hover_template: str) -> T:
        self._hover_template = Dim.scalar(str(hover_template))
        return self

    def hover_template_array(self: T, hover_template: Iterable[Any]) -> T:
        self._hover_template = Dim.vector(owned_string_vector(hover_template))
        return self

    def hover_label(self: T, hover_label: Label) -> T:
        self._hover_label = hover_label
        return self

    def meta(self: T, meta: Any) -> T:
        """Extra value available to templates as ``%{meta}``."""
        self._meta = NumOrString.of(meta)
        return self

    def custom_data(self: T, custom_data: Iterable[Any]) -> T:
        """Per-point values passed back in hover, click and selection events."""
        self._custom_data = to_num_or_string_wrapper(custom_data)
        return self

    def ui_revision(self: T, ui_revision: Any) -> T:
        """Keeps user-driven changes to the trace while this value stays the same."""
        self._ui_revision = NumOrString.of(ui_revision)
        return self
