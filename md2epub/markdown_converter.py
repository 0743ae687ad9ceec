"""Markdown → XHTML conversion with GitHub-flavoured extensions."""

import re

import markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor
from markdown.postprocessors import Postprocessor

# EPUB content documents must be XHTML, so void elements are self-closed.
OUTPUT_FORMAT = "xhtml"

MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "toc",          # id attributes on headings
    "nl2br",        # single newlines become <br />
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]

EXTENSION_CONFIGS = {
    # ~x~ is strikethrough, not subscript
    "pymdownx.tilde": {"subscript": False},
}

SINGLE_TILDE_RE = r"(?<!~)(~)(?![~\s])(.+?)(?<![~\s])~(?!~)"

INPUT_TAG_RE = re.compile(r"<input\b[^>]*>")
BARE_ATTRIBUTE_RE = re.compile(r"\s(checked|disabled)(?=[\s/>])")


class SingleTildeExtension(Extension):
    """Strike through text wrapped in single tildes, after pymdownx.tilde
    has taken the double ones."""

    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(SINGLE_TILDE_RE, "del"), "single_tilde", 60
        )


class XhtmlInputPostprocessor(Postprocessor):
    """Rewrite task list checkboxes as XML: pymdownx.tasklist stores them with
    minimized boolean attributes."""

    def run(self, text):
        return INPUT_TAG_RE.sub(self._fix_tag, text)

    @staticmethod
    def _fix_tag(match):
        tag = BARE_ATTRIBUTE_RE.sub(r' \1="\1"', match.group(0))
        if not tag.endswith("/>"):
            tag = tag[:-1].rstrip() + " />"
        return tag


class XhtmlInputExtension(Extension):
    def extendMarkdown(self, md):
        # after raw_html (30) has restored the stash
        md.postprocessors.register(XhtmlInputPostprocessor(md), "xhtml_input", 5)


def convert_markdown_to_html(content: bytes) -> str:
    """Convert raw Markdown bytes to an XHTML fragment.

    Raw HTML in the source is escaped as text. Decoding and parser errors are
    not caught here.
    """
    text = content.decode("utf-8-sig")
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS + [SingleTildeExtension(), XhtmlInputExtension()],
        extension_configs=EXTENSION_CONFIGS,
        output_format=OUTPUT_FORMAT,
    )
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md.convert(text)
