"""Model classes describing decks and the elements they are made of.

The classes defined in this package are plain data: they hold no logic besides a few \
read-only shortcuts. Serializing them is the job of \
[`Emitter`][deckgen.emitting.Emitter].

- [`deck`][deckgen.models.deck] contains the deck, its canvas and its slides
- [`elements`][deckgen.models.elements] contains the drawable and textual elements \
    of a slide, along with the attribute bundles they share
"""

from .deck import Canvas, Deck, Slide
from .elements import (
    Arc,
    CommonAttr,
    Curve,
    Dimension,
    Ellipse,
    Image,
    Line,
    List,
    ListItem,
    Polygon,
    Polyline,
    Rect,
    Text,
)

__all__ = [
    "Arc",
    "Canvas",
    "CommonAttr",
    "Curve",
    "Deck",
    "Dimension",
    "Ellipse",
    "Image",
    "Line",
    "List",
    "ListItem",
    "Polygon",
    "Polyline",
    "Rect",
    "Slide",
    "Text",
]
