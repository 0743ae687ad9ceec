"""Bundled stylesheet and fonts, loaded once at import."""

import logging
from importlib.resources import files
from typing import Optional

logger = logging.getLogger(__name__)

_ASSETS = files(__name__)

DEFAULT_CSS = _ASSETS.joinpath("style.css").read_text(encoding="utf-8")

# Primary language subtag → font file under assets/fonts/
LANGUAGE_FONTS = {
    "zh": "NotoSansTC-Regular.otf",
}

FONT_MEDIA_TYPES = {
    ".otf": "font/otf",
    ".ttf": "font/ttf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}


def primary_subtag(language: str) -> str:
    """'zh-Hant-TW' → 'zh'."""
    return language.replace("_", "-").split("-")[0].lower()


def font_for_language(language: str) -> Optional[tuple[str, bytes]]:
    """Return (file name, font bytes) for the language, if a font is bundled."""
    name = LANGUAGE_FONTS.get(primary_subtag(language))
    if name is None:
        return None

    resource = _ASSETS.joinpath("fonts").joinpath(name)
    if not resource.is_file():
        logger.debug("No bundled font %s for language '%s'", name, language)
        return None

    return name, resource.read_bytes()


def font_media_type(file_name: str) -> str:
    """Guess the manifest media type of a font from its extension."""
    for ext, media_type in FONT_MEDIA_TYPES.items():
        if file_name.lower().endswith(ext):
            return media_type
    return "application/octet-stream"


def font_face_rule(file_name: str, family: str = "EmbeddedFont") -> str:
    """CSS that declares the embedded font and applies it to the body.

    The stylesheet sits in style/, fonts in fonts/.
    """
    return (
        "\n@font-face {\n"
        f"    font-family: \"{family}\";\n"
        f"    src: url(\"../fonts/{file_name}\");\n"
        "}\n\n"
        "body {\n"
        f"    font-family: \"{family}\", serif;\n"
        "}\n"
    )
