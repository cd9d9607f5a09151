"""Templates of the deck markup.

Each template renders a single tag (or, for lists, a tag block) without the final \
newline. Numbers go through the `pct` filter (two decimals fixed point) except canvas \
and image sizes which go through the `integer` filter. Strings are inserted verbatim: \
autoescaping is disabled on purpose since escaping is up to the caller.
"""

from functools import cache

from jinja2 import DictLoader, Environment, StrictUndefined, Template

_templates = {
    "deck": (
        '<deck><canvas width="{{ width|integer }}" height="{{ height|integer }}"/>'
    ),
    "closedeck": "</deck>",
    "slide": "<slide>",
    "slidebg": '<slide bg="{{ bg }}">',
    "slidebgfg": '<slide bg="{{ bg }}" fg="{{ fg }}">',
    "closeslide": "</slide>",
    "circle": (
        '<ellipse xp="{{ xp|pct }}" yp="{{ yp|pct }}" wp="{{ wp|pct }}" '
        'hr="{{ hr|pct }}" opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "square": (
        '<rect xp="{{ xp|pct }}" yp="{{ yp|pct }}" wp="{{ wp|pct }}" '
        'hr="{{ hr|pct }}" opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "ellipse": (
        '<ellipse xp="{{ xp|pct }}" yp="{{ yp|pct }}" wp="{{ wp|pct }}" '
        'hp="{{ hp|pct }}" opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "rect": (
        '<rect xp="{{ xp|pct }}" yp="{{ yp|pct }}" wp="{{ wp|pct }}" '
        'hp="{{ hp|pct }}" opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "arc": (
        '<arc xp="{{ xp|pct }}" yp="{{ yp|pct }}" wp="{{ wp|pct }}" '
        'hp="{{ hp|pct }}" sp="{{ sp|pct }}" a1="{{ a1|pct }}" a2="{{ a2|pct }}" '
        'opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "line": (
        '<line xp1="{{ xp1|pct }}" yp1="{{ yp1|pct }}" xp2="{{ xp2|pct }}" '
        'yp2="{{ yp2|pct }}" sp="{{ sp|pct }}" opacity="{{ opacity|pct }}" '
        'color="{{ color }}"/>'
    ),
    "curve": (
        '<curve xp1="{{ xp1|pct }}" yp1="{{ yp1|pct }}" xp2="{{ xp2|pct }}" '
        'yp2="{{ yp2|pct }}" xp3="{{ xp3|pct }}" yp3="{{ yp3|pct }}" '
        'sp="{{ sp|pct }}" opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "polygon": (
        '<polygon xc="{{ xc }}" yc="{{ yc }}" opacity="{{ opacity|pct }}" '
        'color="{{ color }}"/>'
    ),
    "polyline": (
        '<polyline xc="{{ xc }}" yc="{{ yc }}" sp="{{ sp|pct }}" '
        'opacity="{{ opacity|pct }}" color="{{ color }}"/>'
    ),
    "text": (
        '<text xp="{{ xp|pct }}" yp="{{ yp|pct }}" sp="{{ sp|pct }}" '
        'align="{{ align }}" wp="{{ wp|pct }}" font="{{ font }}" '
        'opacity="{{ opacity|pct }}" color="{{ color }}" type="{{ type }}"'
        "{% block extra %}{% endblock %}>{{ tdata }}</text>"
    ),
    "textlink": (
        '{% extends "text" %}{% block extra %} link="{{ link }}"{% endblock %}'
    ),
    "textrotate": (
        '{% extends "text" %}'
        '{% block extra %} link="{{ link }}" rotation="{{ rotation|pct }}"'
        "{% endblock %}"
    ),
    "image": (
        '<image xp="{{ xp|pct }}" yp="{{ yp|pct }}" width="{{ width|integer }}" '
        'height="{{ height|integer }}" name="{{ name }}" link="{{ link }}"/>'
    ),
    "list": (
        '<list type="{{ type }}" xp="{{ xp|pct }}" yp="{{ yp|pct }}" '
        'sp="{{ sp|pct }}" lp="{{ lp|pct }}" wp="{{ wp|pct }}" font="{{ font }}" '
        'color="{{ color }}">\n'
        "{% for item in items %}<li>{{ item }}</li>\n{% endfor %}"
        "</list>"
    ),
}


def _pct(value: float) -> str:
    return "%.2f" % value


def _integer(value: int) -> str:
    return "%d" % value


@cache
def _env() -> Environment:
    env = Environment(
        loader=DictLoader(_templates),
        autoescape=False,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
    )
    env.filters["pct"] = _pct
    env.filters["integer"] = _integer
    return env


def get_template(name: str) -> Template:
    return _env().get_template(name)


def render(template_name: str, /, **values: object) -> str:
    """Render the tag called `template_name` with the given attribute values.

    Args:
        template_name: Name of the template, for instance `rect` or `textlink`.
        values: Attribute values. Every variable used by the template must be given.

    Returns:
        The rendered markup, without a trailing newline.
    """
    return get_template(template_name).render(**values)
