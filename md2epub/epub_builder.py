"""EPUB assembler - builds the container with ebooklib and writes it to disk."""

import logging
import os
import tempfile
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ebooklib import epub

from md2epub.assets import DEFAULT_CSS, font_face_rule, font_for_language, font_media_type
from md2epub.cover import generate_cover_page
from md2epub.errors import AssemblyError

logger = logging.getLogger(__name__)

STYLESHEET_NAME = "style.css"
COVER_FILE_NAME = "cover.xhtml"
CONTENT_FILE_NAME = "content.xhtml"
COVER_LABEL = "Cover"

TEMP_CSS_PREFIX = "epub-style-"
TEMP_CSS_SUFFIX = ".css"

# ebooklib cannot serialize an empty body
EMPTY_BODY = "<div></div>"


@contextmanager
def materialized_stylesheet(css: str) -> Iterator[str]:
    """Write *css* to a temporary file and yield its path.

    The file is removed when the block exits, however it exits.
    """
    try:
        fd, path = tempfile.mkstemp(prefix=TEMP_CSS_PREFIX, suffix=TEMP_CSS_SUFFIX)
    except OSError as e:
        raise AssemblyError(f"failed to create temp CSS file: {e}") from e

    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(css)
        except OSError as e:
            raise AssemblyError(f"failed to write CSS to temp file: {e}") from e
        yield path
    finally:
        Path(path).unlink(missing_ok=True)
        logger.debug("Removed temporary stylesheet %s", path)


def add_css(book: epub.EpubBook, css_path: str, name: str) -> epub.EpubItem:
    """Attach the stylesheet at *css_path* to *book* as style/<name>."""
    item = epub.EpubItem(
        uid="style",
        file_name=f"style/{name}",
        media_type="text/css",
        content=Path(css_path).read_bytes(),
    )
    book.add_item(item)
    return item


class EpubAssembler:
    """Builds a two-section EPUB (cover, then content) and writes it out."""

    def __init__(
        self,
        language: str = "en",
        author: Optional[str] = None,
        stylesheet: str = DEFAULT_CSS,
    ):
        self.language = language
        self.author = author
        self.stylesheet = stylesheet

    def assemble(self, title: str, html_content: str, output_path: str) -> None:
        """Build the book and write it to *output_path*.

        Raises:
            AssemblyError: At the first failing step, naming that step.
        """
        book = self._create_book(title)
        self._set_metadata(book)

        font = font_for_language(self.language)
        css = self.stylesheet
        if font:
            css += font_face_rule(font[0])

        with materialized_stylesheet(css) as css_path:
            try:
                css_item = add_css(book, css_path, STYLESHEET_NAME)
            except Exception as e:
                raise AssemblyError(f"failed to add CSS: {e}") from e

            if font:
                self._add_font(book, *font)

            cover = self._add_section(
                book,
                generate_cover_page(title),
                COVER_LABEL,
                COVER_FILE_NAME,
                "cover-page",
                css_item,
                step="failed to add cover page",
            )
            content = self._add_section(
                book,
                html_content,
                title,
                CONTENT_FILE_NAME,
                "content",
                css_item,
                step="failed to add section",
            )

            # Readers render the spine in order: cover first.
            book.toc = [cover, content]
            book.spine = [cover, content]
            book.add_item(epub.EpubNcx())
            book.add_item(epub.EpubNav())

            self._write(book, output_path)

    def _create_book(self, title: str) -> epub.EpubBook:
        try:
            book = epub.EpubBook()
            book.set_identifier(f"urn:uuid:{uuid.uuid4()}")
            book.set_title(title)
        except Exception as e:
            raise AssemblyError(f"failed to create epub: {e}") from e
        return book

    def _set_metadata(self, book: epub.EpubBook) -> None:
        try:
            book.set_language(self.language)
        except Exception as e:
            raise AssemblyError(f"failed to set language: {e}") from e

        if self.author:
            try:
                book.add_author(self.author)
            except Exception as e:
                raise AssemblyError(f"failed to set author: {e}") from e

    def _add_font(self, book: epub.EpubBook, file_name: str, data: bytes) -> None:
        try:
            book.add_item(epub.EpubItem(
                uid="font",
                file_name=f"fonts/{file_name}",
                media_type=font_media_type(file_name),
                content=data,
            ))
        except Exception as e:
            raise AssemblyError(f"failed to add font: {e}") from e
        logger.info("Embedded font %s for language '%s'", file_name, self.language)

    def _add_section(
        self,
        book: epub.EpubBook,
        body: str,
        label: str,
        file_name: str,
        uid: str,
        css_item: epub.EpubItem,
        step: str,
    ) -> epub.EpubHtml:
        try:
            section = epub.EpubHtml(
                uid=uid,
                title=label,
                file_name=file_name,
                lang=self.language,
            )
            section.content = body if body.strip() else EMPTY_BODY
            section.add_item(css_item)
            book.add_item(section)
        except Exception as e:
            raise AssemblyError(f"{step}: {e}") from e
        logger.debug("Added section %s (%s)", file_name, label)
        return section

    @staticmethod
    def _write(book: epub.EpubBook, output_path: str) -> None:
        # EpubWriter is used directly: epub.write_epub() hides I/O errors.
        try:
            writer = epub.EpubWriter(str(output_path), book, {})
            writer.process()
            writer.write()
        except Exception as e:
            raise AssemblyError(f"failed to write epub file: {e}") from e
        logger.info("Wrote %s", output_path)
