"""
Async edge source over live Wikipedia.

Every link in an article's main content becomes an edge of cost 1, so the
cheapest path is the one with the fewest clicks. Pages are fetched in a
worker thread so the search coroutine doesn't block the event loop.
"""

from __future__ import annotations

import asyncio
import logging

from async_astar.config import DEFAULT_EDGE_COST
from async_astar.graph.types import Edge, NodeId
from async_astar.wikipedia.scraper import WikiScraper

logger = logging.getLogger(__name__)


class WikiLinkEdgeSource:
    """
    Edge source that scrapes Wikipedia on demand.

    Links are cached per instance, so repeated searches against the same
    source only fetch each article once. Fetch errors propagate and abort
    the search.
    """

    def __init__(
        self,
        scraper: WikiScraper | None = None,
        edge_cost: float = DEFAULT_EDGE_COST,
    ) -> None:
        """
        Initialize the edge source.

        Args:
            scraper: Scraper to fetch pages with (default: a new WikiScraper)
            edge_cost: Cost assigned to every link
        """
        self._scraper = scraper or WikiScraper()
        self._edge_cost = edge_cost
        self._cache: dict[NodeId, list[str]] = {}

    async def links(self, title: NodeId) -> list[str]:
        """Outgoing article links of ``title``, fetched once."""
        if title not in self._cache:
            links = await asyncio.to_thread(self._scraper.get_links, title)
            logger.info(f"Scraped '{title}' ({len(links)} links)")
            self._cache[title] = links
        return self._cache[title]

    async def __call__(self, title: NodeId) -> list[Edge]:
        links = await self.links(title)
        return [Edge(source=title, target=link, cost=self._edge_cost) for link in links]

    @property
    def pages_scraped(self) -> int:
        return len(self._cache)

    def get_stats(self) -> dict:
        """Return scraping statistics."""
        return {
            "pages_scraped": self.pages_scraped,
            "links_seen": sum(len(links) for links in self._cache.values()),
        }
