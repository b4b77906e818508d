"""
Colors - every color-bearing value is reduced to a ColorWrapper before serialization.

plotly.js accepts a color either as text (named, hex, rgb/rgba strings) or as a
number that is mapped through the trace's colorscale. ColorWrapper is the closed
union of those two representations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Protocol, Union, runtime_checkable

from .values import check_range, unwrap_scalar


@dataclass(frozen=True)
class ColorWrapper:
    """Numeric or textual color, serialized as the bare number or string."""
    value: Union[float, str]

    @property
    def is_numeric(self) -> bool:
        return not isinstance(self.value, str)

    def to_json_value(self) -> Union[float, str]:
        return self.value


@runtime_checkable
class Color(Protocol):
    """Anything that can be converted into a ColorWrapper."""

    def to_color(self) -> ColorWrapper:
        ...


@dataclass(frozen=True)
class Rgb:
    """Opaque color from 0-255 channel values."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in ('r', 'g', 'b'):
            check_range(channel, getattr(self, channel), 0, 255)

    def to_color(self) -> ColorWrapper:
        return ColorWrapper(f"rgb({self.r}, {self.g}, {self.b})")


@dataclass(frozen=True)
class Rgba:
    """Color with alpha; channels 0-255, alpha 0-1."""
    r: int
    g: int
    b: int
    a: float

    def __post_init__(self):
        for channel in ('r', 'g', 'b'):
            check_range(channel, getattr(self, channel), 0, 255)
        check_range('a', self.a, 0.0, 1.0)

    def to_color(self) -> ColorWrapper:
        return ColorWrapper(f"rgba({self.r}, {self.g}, {self.b}, {self.a})")


class NamedColor(Enum):
    """CSS named colors understood by plotly.js."""
    ALICE_BLUE = 'aliceblue'
    ANTIQUE_WHITE = 'antiquewhite'
    AQUA = 'aqua'
    AQUAMARINE = 'aquamarine'
    AZURE = 'azure'
    BEIGE = 'beige'
    BISQUE = 'bisque'
    BLACK = 'black'
    BLANCHED_ALMOND = 'blanchedalmond'
    BLUE = 'blue'
    BLUE_VIOLET = 'blueviolet'
    BROWN = 'brown'
    BURLY_WOOD = 'burlywood'
    CADET_BLUE = 'cadetblue'
    CHARTREUSE = 'chartreuse'
    CHOCOLATE = 'chocolate'
    CORAL = 'coral'
    CORNFLOWER_BLUE = 'cornflowerblue'
    CORNSILK = 'cornsilk'
    CRIMSON = 'crimson'
    CYAN = 'cyan'
    DARK_BLUE = 'darkblue'
    DARK_CYAN = 'darkcyan'
    DARK_GOLDENROD = 'darkgoldenrod'
    DARK_GRAY = 'darkgray'
    DARK_GREEN = 'darkgreen'
    DARK_KHAKI = 'darkkhaki'
    DARK_MAGENTA = 'darkmagenta'
    DARK_OLIVE_GREEN = 'darkolivegreen'
    DARK_ORANGE = 'darkorange'
    DARK_ORCHID = 'darkorchid'
    DARK_RED = 'darkred'
    DARK_SALMON = 'darksalmon'
    DARK_SEA_GREEN = 'darkseagreen'
    DARK_SLATE_BLUE = 'darkslateblue'
    DARK_SLATE_GRAY = 'darkslategray'
    DARK_TURQUOISE = 'darkturquoise'
    DARK_VIOLET = 'darkviolet'
    DEEP_PINK = 'deeppink'
    DEEP_SKY_BLUE = 'deepskyblue'
    DIM_GRAY = 'dimgray'
    DODGER_BLUE = 'dodgerblue'
    FIRE_BRICK = 'firebrick'
    FLORAL_WHITE = 'floralwhite'
    FOREST_GREEN = 'forestgreen'
    FUCHSIA = 'fuchsia'
    GAINSBORO = 'gainsboro'
    GHOST_WHITE = 'ghostwhite'
    GOLD = 'gold'
    GOLDENROD = 'goldenrod'
    GRAY = 'gray'
    GREEN = 'green'
    GREEN_YELLOW = 'greenyellow'
    HONEYDEW = 'honeydew'
    HOT_PINK = 'hotpink'
    INDIAN_RED = 'indianred'
    INDIGO = 'indigo'
    IVORY = 'ivory'
    KHAKI = 'khaki'
    LAVENDER = 'lavender'
    LAVENDER_BLUSH = 'lavenderblush'
    LAWN_GREEN = 'lawngreen'
    LEMON_CHIFFON = 'lemonchiffon'
    LIGHT_BLUE = 'lightblue'
    LIGHT_CORAL = 'lightcoral'
    LIGHT_CYAN = 'lightcyan'
    LIGHT_GOLDENROD_YELLOW = 'lightgoldenrodyellow'
    LIGHT_GRAY = 'lightgray'
    LIGHT_GREEN = 'lightgreen'
    LIGHT_PINK = 'lightpink'
    LIGHT_SALMON = 'lightsalmon'
    LIGHT_SEA_GREEN = 'lightseagreen'
    LIGHT_SKY_BLUE = 'lightskyblue'
    LIGHT_SLATE_GRAY = 'lightslategray'
    LIGHT_STEEL_BLUE = 'lightsteelblue'
    LIGHT_YELLOW = 'lightyellow'
    LIME = 'lime'
    LIME_GREEN = 'limegreen'
    LINEN = 'linen'
    MAGENTA = 'magenta'
    MAROON = 'maroon'
    MEDIUM_AQUAMARINE = 'mediumaquamarine'
    MEDIUM_BLUE = 'mediumblue'
    MEDIUM_ORCHID = 'mediumorchid'
    MEDIUM_PURPLE = 'mediumpurple'
    MEDIUM_SEA_GREEN = 'mediumseagreen'
    MEDIUM_SLATE_BLUE = 'mediumslateblue'
    MEDIUM_SPRING_GREEN = 'mediumspringgreen'
    MEDIUM_TURQUOISE = 'mediumturquoise'
    MEDIUM_VIOLET_RED = 'mediumvioletred'
    MIDNIGHT_BLUE = 'midnightblue'
    MINT_CREAM = 'mintcream'
    MISTY_ROSE = 'mistyrose'
    MOCCASIN = 'moccasin'
    NAVAJO_WHITE = 'navajowhite'
    NAVY = 'navy'
    OLD_LACE = 'oldlace'
    OLIVE = 'olive'
    OLIVE_DRAB = 'olivedrab'
    ORANGE = 'orange'
    ORANGE_RED = 'orangered'
    ORCHID = 'orchid'
    PALE_GOLDENROD = 'palegoldenrod'
    PALE_GREEN = 'palegreen'
    PALE_TURQUOISE = 'paleturquoise'
    PALE_VIOLET_RED = 'palevioletred'
    PAPAYA_WHIP = 'papayawhip'
    PEACH_PUFF = 'peachpuff'
    PERU = 'peru'
    PINK = 'pink'
    PLUM = 'plum'
    POWDER_BLUE = 'powderblue'
    PURPLE = 'purple'
    REBECCA_PURPLE = 'rebeccapurple'
    RED = 'red'
    ROSY_BROWN = 'rosybrown'
    ROYAL_BLUE = 'royalblue'
    SADDLE_BROWN = 'saddlebrown'
    SALMON = 'salmon'
    SANDY_BROWN = 'sandybrown'
    SEA_GREEN = 'seagreen'
    SEASHELL = 'seashell'
    SIENNA = 'sienna'
    SILVER = 'silver'
    SKY_BLUE = 'skyblue'
    SLATE_BLUE = 'slateblue'
    SLATE_GRAY = 'slategray'
    SNOW = 'snow'
    SPRING_GREEN = 'springgreen'
    STEEL_BLUE = 'steelblue'
    TAN = 'tan'
    TEAL = 'teal'
    THISTLE = 'thistle'
    TOMATO = 'tomato'
    TRANSPARENT = 'transparent'
    TURQUOISE = 'turquoise'
    VIOLET = 'violet'
    WHEAT = 'wheat'
    WHITE = 'white'
    WHITE_SMOKE = 'whitesmoke'
    YELLOW = 'yellow'
    YELLOW_GREEN = 'yellowgreen'

    def to_color(self) -> ColorWrapper:
        return ColorWrapper(self.value)


def to_color(value: Any) -> ColorWrapper:
    """
    Convert a color-bearing value into a ColorWrapper.

    Args:
        value: ColorWrapper, any object with ``to_color()`` (NamedColor, Rgb,
               Rgba), a color string, or a number relative to the colorscale

    Raises:
        TypeError: If the value cannot represent a color
    """
    if isinstance(value, ColorWrapper):
        return value
    if isinstance(value, Color):
        return value.to_color()
    value = unwrap_scalar(value)
    if isinstance(value, str):
        return ColorWrapper(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return ColorWrapper(float(value))
    raise TypeError(f"Cannot use {type(value).__name__} as a color")


def to_color_array(values: Iterable[Any]) -> List[ColorWrapper]:
    """Convert each element of a collection with to_color, preserving order."""
    return [to_color(v) for v in values]


def is_valid_color_array(array: Iterable[ColorWrapper]) -> bool:
    """
    Whether a color array mixes numeric and textual entries.

    Returns False for an empty array and for arrays holding only one kind.
    """
    has_number = False
    has_text = False
    for color in array:
        if color.is_numeric:
            has_number = True
        else:
            has_text = True
    return has_number and has_text


is_mixed_color_array = is_valid_color_array
