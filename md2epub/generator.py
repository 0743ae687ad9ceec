"""Generator - orchestrates the Markdown → EPUB pipeline."""

import logging
from pathlib import Path

from md2epub.epub_builder import EpubAssembler
from md2epub.errors import AssemblyError, ConversionError, ReadError
from md2epub.markdown_converter import convert_markdown_to_html
from md2epub.models import GenerateOptions
from md2epub.title import resolve_title
from md2epub.validation import validate_options

logger = logging.getLogger(__name__)


def generate(options: GenerateOptions) -> Path:
    """Run the full pipeline: validate → read → convert → title → assemble.

    Args:
        options: Paths and book metadata for this run.

    Returns:
        Path of the written EPUB file.

    Raises:
        ValidationError: Before any work, if the paths are unusable.
        ReadError, ConversionError, AssemblyError: At the first failing step.
    """
    validate_options(options)

    # 1. Read
    logger.debug("Reading %s", options.markdown_path)
    try:
        content = Path(options.markdown_path).read_bytes()
    except OSError as e:
        raise ReadError(f"failed to read markdown file: {e}") from e

    # 2. Convert
    try:
        html_content = convert_markdown_to_html(content)
    except Exception as e:
        raise ConversionError(f"failed to convert markdown to HTML: {e}") from e
    logger.debug("Converted %d bytes of Markdown to %d characters of XHTML",
                 len(content), len(html_content))

    # 3. Title
    title = resolve_title(
        options.title,
        content.decode("utf-8-sig", errors="replace"),
        options.markdown_path,
    )
    logger.info("Title: '%s'", title)

    # 4. Assemble
    assembler = EpubAssembler(language=options.language, author=options.author)
    try:
        assembler.assemble(title, html_content, options.epub_path)
    except AssemblyError as e:
        raise AssemblyError(f"failed to create epub: {e}") from e

    return Path(options.epub_path)
