"""Model classes for the elements of a slide.

Coordinates and sizes are percentages of the canvas width or height. They are not \
validated: the nominal range is 0 to 100 but anything is serialized as is. Colors, \
fonts, types, alignments and links are free text copied verbatim into the markup.

Text-like elements embed a [`CommonAttr`][deckgen.models.elements.CommonAttr] and \
shapes with an extent embed a [`Dimension`][deckgen.models.elements.Dimension], which \
itself embeds a `CommonAttr`. Embedding is done by composition; read-only shortcuts \
such as `Text.xp` or `Rect.color` forward to the embedded bundle.
"""

from dataclasses import dataclass, field
from typing import Any


def _forward(*path: str) -> property:
    def getter(self: Any) -> Any:
        value = self
        for name in path:
            value = getattr(value, name)
        return value

    return property(getter, doc=f"Shortcut to `{'.'.join(path)}`.")


@dataclass
class CommonAttr:
    """Attributes shared by texts, lists and, through dimensions, shapes."""

    xp: float = 0.0
    """X coordinate."""

    yp: float = 0.0
    """Y coordinate."""

    sp: float = 0.0
    """Size."""

    lp: float = 0.0
    """Line spacing (leading) percentage."""

    rotation: float = 0.0
    """Rotation in degrees (0-360)."""

    type: str = ""
    """Content type: block, plain, code, number, bullet..."""

    align: str = ""
    """Alignment: center, right..."""

    color: str = ""
    gradcolor1: str = ""
    gradcolor2: str = ""
    gradpercent: float = 0.0
    opacity: float = 0.0

    font: str = ""
    """Font family: sans, serif, mono..."""

    link: str = ""
    """Reference to other content (http:// or mailto: URLs for instance)."""


@dataclass
class Dimension:
    """Position and style of a shape, with a width and three ways to give a height.

    `hp` is a percentage of the canvas height, `hr` is a percentage of the width \
    (so `hr=100` gives a circle or a square whatever the canvas aspect ratio) and \
    `hw` is a height-by-width ratio.
    """

    common: CommonAttr = field(default_factory=CommonAttr)
    wp: float = 0.0
    hp: float = 0.0
    hr: float = 0.0
    hw: float = 0.0

    xp = _forward("common", "xp")
    yp = _forward("common", "yp")
    color = _forward("common", "color")
    opacity = _forward("common", "opacity")


@dataclass
class ListItem:
    """One line of a list, with optional overrides of the list style."""

    text: str = ""
    color: str = ""
    opacity: float = 0.0
    font: str = ""


@dataclass
class List:
    common: CommonAttr = field(default_factory=CommonAttr)
    wp: float = 0.0
    """Wrap width."""

    items: list[ListItem] = field(default_factory=list)

    xp = _forward("common", "xp")
    yp = _forward("common", "yp")
    sp = _forward("common", "sp")
    lp = _forward("common", "lp")
    type = _forward("common", "type")
    font = _forward("common", "font")
    color = _forward("common", "color")


@dataclass
class Text:
    common: CommonAttr = field(default_factory=CommonAttr)
    wp: float = 0.0
    """Wrap width."""

    file: str = ""
    """Reserved reference to a file holding the text, never serialized."""

    tdata: str = ""
    """The text itself."""

    xp = _forward("common", "xp")
    yp = _forward("common", "yp")
    sp = _forward("common", "sp")
    align = _forward("common", "align")
    type = _forward("common", "type")
    font = _forward("common", "font")
    color = _forward("common", "color")
    opacity = _forward("common", "opacity")
    link = _forward("common", "link")
    rotation = _forward("common", "rotation")


@dataclass
class Image:
    common: CommonAttr = field(default_factory=CommonAttr)
    width: int = 0
    """Width in device units."""

    height: int = 0
    """Height in device units."""

    scale: float = 0.0
    autoscale: str = ""

    name: str = ""
    """File name of the image."""

    caption: str = ""

    xp = _forward("common", "xp")
    yp = _forward("common", "yp")
    link = _forward("common", "link")


@dataclass
class Rect:
    dimension: Dimension = field(default_factory=Dimension)

    xp = _forward("dimension", "common", "xp")
    yp = _forward("dimension", "common", "yp")
    wp = _forward("dimension", "wp")
    hp = _forward("dimension", "hp")
    hr = _forward("dimension", "hr")
    color = _forward("dimension", "common", "color")
    opacity = _forward("dimension", "common", "opacity")


@dataclass
class Ellipse:
    dimension: Dimension = field(default_factory=Dimension)

    xp = _forward("dimension", "common", "xp")
    yp = _forward("dimension", "common", "yp")
    wp = _forward("dimension", "wp")
    hp = _forward("dimension", "hp")
    hr = _forward("dimension", "hr")
    color = _forward("dimension", "common", "color")
    opacity = _forward("dimension", "common", "opacity")


@dataclass
class Arc:
    """Elliptical arc between the angles `a1` and `a2`, in degrees.

    The arc carries its own `sp` and `opacity`: those are the values serialized, not \
    the ones of the embedded dimension.
    """

    dimension: Dimension = field(default_factory=Dimension)
    a1: float = 0.0
    a2: float = 0.0
    sp: float = 0.0
    opacity: float = 0.0

    xp = _forward("dimension", "common", "xp")
    yp = _forward("dimension", "common", "yp")
    wp = _forward("dimension", "wp")
    hp = _forward("dimension", "hp")
    color = _forward("dimension", "common", "color")


@dataclass
class Line:
    xp1: float = 0.0
    yp1: float = 0.0
    xp2: float = 0.0
    yp2: float = 0.0
    sp: float = 0.0
    """Thickness."""

    color: str = ""
    opacity: float = 0.0


@dataclass
class Curve:
    """Quadratic Bezier curve from point 1 to point 2, with point 3 as control point."""

    xp1: float = 0.0
    yp1: float = 0.0
    xp2: float = 0.0
    yp2: float = 0.0
    xp3: float = 0.0
    yp3: float = 0.0
    sp: float = 0.0
    color: str = ""
    opacity: float = 0.0


@dataclass
class Polygon:
    """Polygon whose coordinates are strings of space separated percentages.

    See [`polycoord`][deckgen.coordinates.polycoord] to build them.
    """

    xc: str = ""
    yc: str = ""
    color: str = ""
    opacity: float = 0.0


@dataclass
class Polyline:
    xc: str = ""
    yc: str = ""
    sp: float = 0.0
    color: str = ""
    opacity: float = 0.0
