"""Parsers turning post files into ``Document`` instances."""

from poststore.parsers.base import DocumentParser
from poststore.parsers.markdown_post import MarkdownPostParser

__all__ = ["DocumentParser", "MarkdownPostParser"]
