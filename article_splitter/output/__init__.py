"""
Output handling.

File naming, directory preparation and the writers that receive
article content.
"""

from .layout import OutputLayout
from .writers import ArticleWriter, FileSystemWriter, MemoryWriter

__all__ = ["OutputLayout", "ArticleWriter", "FileSystemWriter", "MemoryWriter"]
