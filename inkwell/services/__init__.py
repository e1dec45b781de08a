# inkwell/services/__init__.py
"""
Services layer for logic that spans several entities.
"""

from inkwell.services.search_service import ArticleSearchService

__all__ = [
    "ArticleSearchService",
]
