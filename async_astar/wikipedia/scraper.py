"""
Wikipedia link scraper used as a remote graph.

Each article is a node; each link in its main content is an outgoing edge.
Uses requests + BeautifulSoup for link extraction.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from urllib.parse import quote, unquote, urljoin

import requests
from bs4 import BeautifulSoup

from async_astar.config import (
    USER_AGENT,
    WIKIPEDIA_BASE_URL,
    WIKIPEDIA_REQUEST_DELAY,
    WIKIPEDIA_TIMEOUT,
)

logger = logging.getLogger(__name__)


@dataclass
class WikiPage:
    """
    A fetched Wikipedia article.

    Attributes:
        title: The article title (from page heading)
        url: Full URL of the page
        links: Article titles linked from the main content, in page order
    """

    title: str
    url: str
    links: list[str]


class WikiScraper:
    """
    Fetches Wikipedia articles and extracts their outgoing article links.

    Links inside navigation boxes, infoboxes, reference lists and other
    non-article containers are ignored, as are non-article namespaces.
    """

    ARTICLE_PATTERN = re.compile(r"^/wiki/([^#?]+)")

    # Titles use spaces, not underscores
    EXCLUDED_PREFIXES = (
        "Wikipedia:",
        "Help:",
        "Template:",
        "Template talk:",
        "Category:",
        "Portal:",
        "File:",
        "Special:",
        "Talk:",
        "User:",
        "User talk:",
        "Module:",
        "MediaWiki:",
        "Draft:",
        "MOS:",
        "WP:",
    )

    SKIP_CLASSES = frozenset({
        "navbox",
        "infobox",
        "sidebar",
        "references",
        "reflist",
        "refbegin",
        "mw-references-wrap",
        "toc",
        "vertical-navbox",
        "navigation-not-searchable",
    })

    def __init__(
        self,
        rate_limit: float = WIKIPEDIA_REQUEST_DELAY,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            rate_limit: Minimum seconds between requests
            session: HTTP session to reuse (a new one is created by default)
        """
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})
        self._rate_limit = rate_limit
        self._last_request_time: float = 0
        self.requests_made = 0

    def _wait_for_rate_limit(self) -> None:
        elapsed = time.time() - self._last_request_time
        if elapsed < self._rate_limit:
            time.sleep(self._rate_limit - elapsed)

    @staticmethod
    def title_to_url(title: str) -> str:
        """Convert an article title to its Wikipedia URL."""
        url_title = quote(title.replace(" ", "_"), safe="_/")
        return urljoin(WIKIPEDIA_BASE_URL, url_title)

    def link_title(self, href: str | None) -> str | None:
        """Article title an href points to, or None if it isn't an article link."""
        if not href:
            return None
        match = self.ARTICLE_PATTERN.match(href)
        if not match:
            return None

        title = unquote(match.group(1)).replace("_", " ")
        if title.startswith(self.EXCLUDED_PREFIXES):
            return None
        return title

    def get_page(self, title: str) -> WikiPage:
        """
        Fetch and parse a Wikipedia article.

        Raises:
            requests.RequestException: If the fetch fails
        """
        self._wait_for_rate_limit()

        url = self.title_to_url(title)
        logger.debug(f"Fetching: {url}")

        response = self._session.get(url, timeout=WIKIPEDIA_TIMEOUT)
        response.raise_for_status()
        self._last_request_time = time.time()
        self.requests_made += 1

        return self.parse_page(response.text, url, fallback_title=title)

    def parse_page(self, html: str, url: str, fallback_title: str = "") -> WikiPage:
        """Extract the title and main-content article links from page HTML."""
        soup = BeautifulSoup(html, "lxml")

        heading = soup.find("h1", {"id": "firstHeading"})
        title = heading.get_text(strip=True) if heading else fallback_title

        content = soup.find("div", {"id": "mw-content-text"})
        if not content:
            logger.warning(f"No content found for {url}")
            return WikiPage(title=title, url=url, links=[])
        content = content.find("div", {"class": "mw-parser-output"}) or content

        links: list[str] = []
        seen: set[str] = set()
        for elem in content.find_all(["p", "li", "td", "th", "dd"]):
            if self._in_skipped_container(elem):
                continue
            for anchor in elem.find_all("a", href=True):
                link = self.link_title(anchor.get("href"))
                if link and link not in seen:
                    links.append(link)
                    seen.add(link)

        logger.debug(f"Found {len(links)} links on '{title}'")
        return WikiPage(title=title, url=url, links=links)

    def _in_skipped_container(self, elem) -> bool:
        for parent in elem.parents:
            if self.SKIP_CLASSES.intersection(parent.get("class") or []):
                return True
        return False

    def get_links(self, title: str) -> list[str]:
        """Outgoing article links of ``title``."""
        return self.get_page(title).links
