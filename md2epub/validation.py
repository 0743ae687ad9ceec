"""Pre-flight checks on the generate options."""

from pathlib import Path

from md2epub.errors import ValidationError
from md2epub.models import GenerateOptions


def validate_options(options: GenerateOptions) -> None:
    """Check input and output paths before any conversion work.

    Raises:
        ValidationError: If the Markdown file does not exist, or the EPUB file
            exists and overwriting was not requested.
    """
    if not Path(options.markdown_path).is_file():
        raise ValidationError(f"markdown file {options.markdown_path} does not exist")

    if Path(options.epub_path).exists() and not options.overwrite:
        raise ValidationError(
            f"epub file {options.epub_path} already exists, use option -f to overwrite"
        )
