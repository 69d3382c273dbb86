from urllib.parse import urlparse

from loguru import logger
from rich.markup import escape

from pokescroll.exceptions import ImageLoadError
from pokescroll.ui.constants import DEFAULT_TYPE_COLOR, FALLBACK_IMAGE, TYPE_COLORS


def check_image_ref(src: str | None) -> str:
    """Validate an image reference.

    Accepts absolute http(s) URLs and site-relative paths.

    Raises:
        ImageLoadError: if the reference cannot be displayed.
    """
    if not src or not src.strip():
        raise ImageLoadError("Empty image reference")
    src = src.strip()
    if src.startswith("/"):
        return src
    parsed = urlparse(src)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ImageLoadError(f"Unsupported image reference: {src!r}")
    return src


def resolve_image(src: str | None) -> str:
    """Return ``src`` if it can be displayed, otherwise the fallback image."""
    try:
        return check_image_ref(src)
    except ImageLoadError as e:
        logger.debug(f"Using fallback image: {e}")
        return FALLBACK_IMAGE


def format_display_name(name: str) -> str:
    """Capitalize each dash-separated part of a pokemon name.

    Args:
        name: Raw name as served (e.g. "mr-mime")

    Returns:
        Display name (e.g. "Mr-Mime")
    """
    return "-".join(part.capitalize() for part in name.split("-"))


def format_height(decimetres: int | float) -> str:
    """Format a height given in decimetres as metres."""
    return f"{decimetres / 10:.1f} m"


def format_weight(hectograms: int | float) -> str:
    """Format a weight given in hectograms as kilograms."""
    return f"{hectograms / 10:.1f} kg"


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def format_type_badges(types: tuple[str, ...]) -> str:
    """Render type names as coloured Rich markup badges."""
    return " ".join(f"[bold {type_color(t)}] {escape(t)} [/]" for t in types)


def format_slide_dots(index: int, count: int) -> str:
    return " ".join("●" if i == index else "○" for i in range(count))
