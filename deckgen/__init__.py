from typing import Any

__version__ = "0.1.0"

app_name = "deckgen"


def __getattr__(name: str) -> Any:
    """Lazy-load the public attributes of the deckgen package.

    Keeping the imports lazy lets ``setup.py`` read ``__version__`` from this file \
    without having Jinja2 or pydantic installed yet.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "Emitter":
            from .emitting import Emitter

            return Emitter
        case "EmitterSettings":
            from .settings import EmitterSettings

            return EmitterSettings
        case "polycoord":
            from .coordinates import polycoord

            return polycoord
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
