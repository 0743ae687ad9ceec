"""Cover page markup."""

COVER_TEMPLATE = """<div class="cover-page">
\t<h1 class="cover-title">{title}</h1>
</div>"""


def generate_cover_page(title: str) -> str:
    """Return the cover page body for *title*. The title is not escaped."""
    return COVER_TEMPLATE.format(title=title)
