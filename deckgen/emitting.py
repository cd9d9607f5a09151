from collections.abc import Iterable, Sequence
from enum import Enum
from io import BufferedIOBase, RawIOBase
from logging import getLogger
from typing import IO, Any

from .coordinates import polycoord
from .exceptions import LifecycleError, SinkWriteError
from .markup import render
from .models import (
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
from .settings import EmitterSettings

_logger = getLogger(__name__)

_default_opacity = 100.0


class _State(Enum):
    IDLE = "idle"
    DECK = "deck open"
    SLIDE = "slide open"
    CLOSED = "deck closed"


def _opacity(opacity: float | None) -> float:
    return _default_opacity if opacity is None else opacity


class Emitter:
    """Write deck markup to a sink, one call at a time.

    The emitter is bound to one sink and one canvas size for its whole life. Every \
    call writes its markup immediately, in call order, with a single write to the \
    sink. The sink is never flushed nor closed: it belongs to the caller.

    Nothing is validated. In particular the deck and slide brackets must be balanced \
    by the caller: `start_deck`, then any number of `start_slide`/`end_slide` pairs \
    with elements in between, then `end_deck`. Setting \
    [`check_nesting`][deckgen.settings.EmitterSettings.check_nesting] turns misordered \
    calls into [`LifecycleError`][deckgen.exceptions.LifecycleError]s, as a debugging \
    aid.

    There are two families of element methods. The `emit_*` methods serialize a \
    fully populated model record with its canonical template. The other ones \
    (`rect`, `text`, `circle`...) build the record from scalar arguments and emit it. \
    Their trailing `opacity` defaults to fully opaque (100) when omitted, while an \
    explicit value, including 0, is used as is.
    """

    def __init__(
        self,
        sink: IO[Any],
        width: int,
        height: int,
        settings: EmitterSettings | None = None,
    ) -> None:
        self._sink = sink
        self._width = width
        self._height = height
        self._settings = EmitterSettings() if settings is None else settings
        self._binary = isinstance(sink, RawIOBase | BufferedIOBase)
        self._state = _State.IDLE

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # Deck and slide brackets

    def start_deck(self) -> None:
        _logger.debug("Starting deck of size %dx%d", self._width, self._height)
        self._transition(
            {_State.IDLE},
            _State.DECK,
            "start a deck",
            render("deck", width=self._width, height=self._height),
        )

    def end_deck(self) -> None:
        _logger.debug("Ending deck")
        self._transition(
            {_State.DECK}, _State.CLOSED, "end a deck", render("closedeck")
        )

    def start_slide(self, *colors: str) -> None:
        """Open a slide.

        Args:
            colors: Nothing for a bare slide, a background color, or a background \
                and a foreground color. Any other number of colors is ignored and a \
                bare slide is opened.
        """
        match colors:
            case ():
                markup = render("slide")
            case (bg,):
                markup = render("slidebg", bg=bg)
            case (bg, fg):
                markup = render("slidebgfg", bg=bg, fg=fg)
            case _:
                _logger.warning(
                    "Ignoring %d slide colors, expected at most 2", len(colors)
                )
                markup = render("slide")
        self._transition({_State.DECK}, _State.SLIDE, "start a slide", markup)

    def end_slide(self) -> None:
        self._transition(
            {_State.SLIDE}, _State.DECK, "end a slide", render("closeslide")
        )

    # Canonical serializers

    def emit_square(self, r: Rect) -> None:
        self._element(
            "square",
            xp=r.xp,
            yp=r.yp,
            wp=r.wp,
            hr=r.hr,
            opacity=r.opacity,
            color=r.color,
        )

    def emit_circle(self, e: Ellipse) -> None:
        self._element(
            "circle",
            xp=e.xp,
            yp=e.yp,
            wp=e.wp,
            hr=e.hr,
            opacity=e.opacity,
            color=e.color,
        )

    def emit_ellipse(self, e: Ellipse) -> None:
        self._element(
            "ellipse",
            xp=e.xp,
            yp=e.yp,
            wp=e.wp,
            hp=e.hp,
            opacity=e.opacity,
            color=e.color,
        )

    def emit_rect(self, r: Rect) -> None:
        self._element(
            "rect",
            xp=r.xp,
            yp=r.yp,
            wp=r.wp,
            hp=r.hp,
            opacity=r.opacity,
            color=r.color,
        )

    def emit_line(self, line: Line) -> None:
        self._element(
            "line",
            xp1=line.xp1,
            yp1=line.yp1,
            xp2=line.xp2,
            yp2=line.yp2,
            sp=line.sp,
            opacity=line.opacity,
            color=line.color,
        )

    def emit_curve(self, c: Curve) -> None:
        self._element(
            "curve",
            xp1=c.xp1,
            yp1=c.yp1,
            xp2=c.xp2,
            yp2=c.yp2,
            xp3=c.xp3,
            yp3=c.yp3,
            sp=c.sp,
            opacity=c.opacity,
            color=c.color,
        )

    def emit_arc(self, a: Arc) -> None:
        self._element(
            "arc",
            xp=a.xp,
            yp=a.yp,
            wp=a.wp,
            hp=a.hp,
            sp=a.sp,
            a1=a.a1,
            a2=a.a2,
            opacity=a.opacity,
            color=a.color,
        )

    def emit_polygon(self, poly: Polygon) -> None:
        self._element(
            "polygon", xc=poly.xc, yc=poly.yc, opacity=poly.opacity, color=poly.color
        )

    def emit_polyline(self, poly: Polyline) -> None:
        self._element(
            "polyline",
            xc=poly.xc,
            yc=poly.yc,
            sp=poly.sp,
            opacity=poly.opacity,
            color=poly.color,
        )

    def emit_text(self, t: Text) -> None:
        """Emit a text without link nor rotation."""
        self._element("text", **self._text_values(t))

    def emit_text_link(self, t: Text) -> None:
        """Emit a text with its link."""
        self._element("textlink", link=t.link, **self._text_values(t))

    def emit_text_rotate(self, t: Text) -> None:
        """Emit a text with its link and its rotation."""
        self._element(
            "textrotate", link=t.link, rotation=t.rotation, **self._text_values(t)
        )

    def emit_image(self, pic: Image) -> None:
        self._element(
            "image",
            xp=pic.xp,
            yp=pic.yp,
            width=pic.width,
            height=pic.height,
            name=pic.name,
            link=pic.link,
        )

    def emit_list(self, lst: List) -> None:
        """Emit a list: its opening tag, one `li` tag per item and its closing tag.

        Only the text of the items is written, their style overrides are not part of \
        the markup.
        """
        self._element(
            "list",
            type=lst.type,
            xp=lst.xp,
            yp=lst.yp,
            sp=lst.sp,
            lp=lst.lp,
            wp=lst.wp,
            font=lst.font,
            color=lst.color,
            items=[item.text for item in lst.items],
        )

    # Convenience operations

    def text(
        self,
        x: float,
        y: float,
        s: str,
        font: str,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place plain text at (x, y)."""
        self.emit_text(self._text(x, y, s, font, size, color, opacity))

    def text_mid(
        self,
        x: float,
        y: float,
        s: str,
        font: str,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place text centered on (x, y)."""
        self.emit_text(self._text(x, y, s, font, size, color, opacity, align="center"))

    def text_end(
        self,
        x: float,
        y: float,
        s: str,
        font: str,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place text right-justified on (x, y)."""
        self.emit_text(self._text(x, y, s, font, size, color, opacity, align="right"))

    def text_block(
        self,
        x: float,
        y: float,
        s: str,
        font: str,
        size: float,
        margin: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place a block of text at (x, y), wrapped at `margin`."""
        t = self._text(x, y, s, font, size, color, opacity, type="block")
        t.wp = margin
        self.emit_text(t)

    def text_link(
        self,
        x: float,
        y: float,
        s: str,
        link: str,
        font: str,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place text at (x, y) pointing to `link`."""
        t = self._text(x, y, s, font, size, color, opacity, type="plain", link=link)
        self.emit_text_link(t)

    def text_rotate(
        self,
        x: float,
        y: float,
        s: str,
        link: str,
        font: str,
        rotation: float,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place text at (x, y), rotated by `rotation` degrees."""
        t = self._text(
            x,
            y,
            s,
            font,
            size,
            color,
            opacity,
            type="plain",
            link=link,
            rotation=rotation,
        )
        self.emit_text_rotate(t)

    def code(
        self,
        x: float,
        y: float,
        s: str,
        size: float,
        margin: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Place a code block at (x, y), wrapped at `margin`."""
        t = self._text(x, y, s, "", size, color, opacity, type="code")
        t.wp = margin
        self.emit_text(t)

    def text_list(
        self,
        x: float,
        y: float,
        size: float,
        spacing: float,
        wrap: float,
        items: Iterable[str],
        ltype: str,
        font: str,
        color: str,
    ) -> None:
        """Place a list of items at (x, y).

        Args:
            x: X coordinate.
            y: Y coordinate.
            size: Font size.
            spacing: Line spacing.
            wrap: Wrap width.
            items: Text of each item.
            ltype: Kind of list: plain, bullet, number...
            font: Font family.
            color: Color of the items.
        """
        lst = List(
            common=CommonAttr(
                xp=x, yp=y, sp=size, lp=spacing, type=ltype, font=font, color=color
            ),
            wp=wrap,
            items=[ListItem(text=item) for item in items],
        )
        self.emit_list(lst)

    def square(
        self, x: float, y: float, w: float, color: str, opacity: float | None = None
    ) -> None:
        """Draw a square centered on (x, y) with width `w`."""
        self.emit_square(Rect(self._dimension(x, y, w, color, opacity, hr=100)))

    def circle(
        self, x: float, y: float, w: float, color: str, opacity: float | None = None
    ) -> None:
        """Draw a circle centered on (x, y) with diameter `w`."""
        self.emit_circle(Ellipse(self._dimension(x, y, w, color, opacity, hr=100)))

    def rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Draw a rectangle centered on (x, y) with dimensions (w, h)."""
        self.emit_rect(Rect(self._dimension(x, y, w, color, opacity, hp=h)))

    def ellipse(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Draw an ellipse centered on (x, y) with dimensions (w, h)."""
        self.emit_ellipse(Ellipse(self._dimension(x, y, w, color, opacity, hp=h)))

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Draw a line from (x1, y1) to (x2, y2) with thickness `size`."""
        self.emit_line(
            Line(
                xp1=x1,
                yp1=y1,
                xp2=x2,
                yp2=y2,
                sp=size,
                color=color,
                opacity=_opacity(opacity),
            )
        )

    def arc(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        size: float,
        a1: float,
        a2: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Draw an arc centered on (x, y) with dimensions (w, h), from `a1` to `a2`.

        Angles are in degrees.
        """
        self.emit_arc(
            Arc(
                dimension=Dimension(
                    common=CommonAttr(xp=x, yp=y, color=color), wp=w, hp=h
                ),
                a1=a1,
                a2=a2,
                sp=size,
                opacity=_opacity(opacity),
            )
        )

    def curve(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Draw a Bezier curve from (x1, y1) to (x2, y2) with (x3, y3) as control."""
        self.emit_curve(
            Curve(
                xp1=x1,
                yp1=y1,
                xp2=x2,
                yp2=y2,
                xp3=x3,
                yp3=y3,
                sp=size,
                color=color,
                opacity=_opacity(opacity),
            )
        )

    def polygon(
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        color: str,
        opacity: float | None = None,
    ) -> None:
        """Draw a filled polygon.

        If the coordinates cannot be encoded (see \
        [`polycoord`][deckgen.coordinates.polycoord]), a polygon with empty \
        coordinates is still written.
        """
        xc, yc = polycoord(xs, ys)
        self.emit_polygon(Polygon(xc=xc, yc=yc, color=color, opacity=_opacity(opacity)))

    def polyline(
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        size: float,
        color: str,
        opacity: float | None = None,
    ) -> None:
        xc, yc = polycoord(xs, ys)
        self.emit_polyline(
            Polyline(xc=xc, yc=yc, sp=size, color=color, opacity=_opacity(opacity))
        )

    def image(
        self, x: float, y: float, w: int, h: int, name: str, link: str = ""
    ) -> None:
        """Place the image `name` centered on (x, y), with size (w, h)."""
        self.emit_image(
            Image(
                common=CommonAttr(xp=x, yp=y, link=link), width=w, height=h, name=name
            )
        )

    # Internals

    def _text(
        self,
        x: float,
        y: float,
        s: str,
        font: str,
        size: float,
        color: str,
        opacity: float | None,
        **attributes: Any,
    ) -> Text:
        common = CommonAttr(
            xp=x,
            yp=y,
            sp=size,
            font=font,
            color=color,
            opacity=_opacity(opacity),
            **attributes,
        )
        return Text(common=common, tdata=s)

    def _dimension(
        self,
        x: float,
        y: float,
        w: float,
        color: str,
        opacity: float | None,
        **heights: float,
    ) -> Dimension:
        common = CommonAttr(xp=x, yp=y, color=color, opacity=_opacity(opacity))
        return Dimension(common=common, wp=w, **heights)

    def _text_values(self, t: Text) -> dict[str, Any]:
        return {
            "xp": t.xp,
            "yp": t.yp,
            "sp": t.sp,
            "align": t.align,
            "wp": t.wp,
            "font": t.font,
            "opacity": t.opacity,
            "color": t.color,
            "type": t.type,
            "tdata": t.tdata,
        }

    def _element(self, template: str, **values: Any) -> None:
        if self._settings.check_nesting and self._state is not _State.SLIDE:
            msg = f"cannot emit a {template} element while {self._state.value}"
            raise LifecycleError(msg)
        self._write(render(template, **values))

    def _transition(
        self, allowed: set[_State], target: _State, action: str, markup: str
    ) -> None:
        if self._settings.check_nesting and self._state not in allowed:
            msg = f"cannot {action} while {self._state.value}"
            raise LifecycleError(msg)
        self._write(markup)
        self._state = target

    def _write(self, markup: str) -> None:
        line = f"{markup}\n"
        try:
            if self._binary:
                self._sink.write(line.encode(self._settings.encoding))
            else:
                self._sink.write(line)
        except (OSError, ValueError) as e:
            msg = f"could not write markup to {self._sink!r}: {e}"
            raise SinkWriteError(msg) from e
