"""Data models for the md2epub pipeline."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GenerateOptions:
    """Options for a single Markdown → EPUB run."""
    markdown_path: str
    epub_path: str
    overwrite: bool = False
    title: Optional[str] = None
    author: Optional[str] = None
    language: str = "en"


@dataclass
class Config:
    """Defaults read from the YAML config file."""
    author: Optional[str] = None
    language: Optional[str] = None
