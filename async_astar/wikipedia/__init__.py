"""
Wikipedia interaction module.

Provides live Wikipedia articles as a remote graph:
- WikiScraper: Fetches pages and extracts article links
- WikiLinkEdgeSource: Async edge source for the search engine
"""

from async_astar.wikipedia.edges import WikiLinkEdgeSource
from async_astar.wikipedia.scraper import WikiPage, WikiScraper

__all__ = [
    "WikiLinkEdgeSource",
    "WikiPage",
    "WikiScraper",
]
