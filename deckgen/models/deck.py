"""Model classes for a whole deck.

A [`Deck`][deckgen.models.deck.Deck] is a [`Canvas`][deckgen.models.deck.Canvas] \
and a sequence of [`Slide`][deckgen.models.deck.Slide]s. Those classes describe a \
presentation, the emitter never walks them: callers drive the emission themselves, in \
the order they want the markup to appear.
"""

from dataclasses import dataclass, field

from .elements import (
    Arc,
    Curve,
    Ellipse,
    Image,
    Line,
    List,
    Polygon,
    Polyline,
    Rect,
    Text,
)


@dataclass(frozen=True)
class Canvas:
    """Size of the drawing surface all percentages are relative to."""

    width: int = 0
    """Width in device units."""

    height: int = 0
    """Height in device units."""


@dataclass
class Slide:
    """One frame of a presentation.

    A flat background (`bg`/`fg`) and a two colors gradient (`gradcolor1`, \
    `gradcolor2`, `gradpercent`) are alternative ways to style a slide. Picking one \
    is left to the caller.
    """

    bg: str = ""
    """Background color."""

    fg: str = ""
    """Foreground color."""

    gradcolor1: str = ""
    gradcolor2: str = ""
    gradpercent: float = 0.0

    duration: str = ""
    """Free-form duration, for instance `2s`."""

    note: str = ""
    """Speaker note."""

    lists: list[List] = field(default_factory=list)
    texts: list[Text] = field(default_factory=list)
    images: list[Image] = field(default_factory=list)
    ellipses: list[Ellipse] = field(default_factory=list)
    lines: list[Line] = field(default_factory=list)
    rects: list[Rect] = field(default_factory=list)
    curves: list[Curve] = field(default_factory=list)
    arcs: list[Arc] = field(default_factory=list)
    polygons: list[Polygon] = field(default_factory=list)
    polylines: list[Polyline] = field(default_factory=list)


@dataclass
class Deck:
    """A presentation: metadata, a canvas and an ordered sequence of slides.

    The metadata fields are never written by the emitter.
    """

    title: str = ""
    creator: str = ""
    subject: str = ""
    publisher: str = ""
    description: str = ""
    date: str = ""
    canvas: Canvas = field(default_factory=Canvas)
    slides: list[Slide] = field(default_factory=list)
