"""Command-line interface for md2epub."""

import argparse
import logging
import sys

from md2epub import __version__
from md2epub.config import load_config
from md2epub.errors import Md2EpubError
from md2epub.models import Config, GenerateOptions

DEFAULT_LANGUAGE = "en"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2epub",
        description="Convert Markdown files to EPUB",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        default=None,
        help="Config file with default author/language (default: ~/.md2epub.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser(
        "generate",
        help="Generate an EPUB file from the specified Markdown file",
    )
    gen.add_argument("-i", "--input", required=True, help="Path to markdown file")
    gen.add_argument("-o", "--output", required=True, help="Path to output epub file")
    gen.add_argument(
        "-f", "--overwrite",
        action="store_true",
        help="Overwrite existing epub file",
    )
    gen.add_argument(
        "-t", "--title",
        default="",
        help="Title of the book (defaults to the first H1 heading, then the filename)",
    )
    gen.add_argument("-a", "--author", default=None, help="Author of the book")
    gen.add_argument(
        "-l", "--language",
        default=None,
        help=f"Language code, e.g. en, ja, zh (default: {DEFAULT_LANGUAGE})",
    )

    return parser


def options_from_args(args: argparse.Namespace, config: Config) -> GenerateOptions:
    """Merge parsed flags over config defaults."""
    author = args.author if args.author is not None else config.author
    if args.language is not None:
        language = args.language
    else:
        language = config.language or DEFAULT_LANGUAGE
    return GenerateOptions(
        markdown_path=args.input,
        epub_path=args.output,
        overwrite=args.overwrite,
        title=args.title or None,
        author=author or None,
        language=language,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    from md2epub.generator import generate

    try:
        config = load_config(args.config)
        output_path = generate(options_from_args(args, config))
    except Md2EpubError as e:
        logging.error("Error: %s", e)
        if args.verbose:
            logging.exception("Details:")
        sys.exit(1)

    print(f"Successfully created {output_path}")


if __name__ == "__main__":
    main()
