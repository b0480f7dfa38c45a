"""
Configuration constants for the async A* search engine.

Search defaults, remote graph settings and logging are defined here.
Tunable values are read from environment variables where it makes sense.
"""

import os

from dotenv import load_dotenv

# Settings may come from a .env file in the working directory
load_dotenv()

# =============================================================================
# Search Configuration
# =============================================================================

# Failure reason reported when the open set is exhausted
NO_PATH_REASON = "No path to goal"

# Cost given to edges that don't carry one (e.g. article links)
DEFAULT_EDGE_COST = 1.0

# Optional wall-clock bound for CLI searches, in seconds.
# The engine itself never times out; callers wrap it in asyncio.wait_for.
_timeout = os.environ.get("ASTAR_SEARCH_TIMEOUT")
SEARCH_TIMEOUT = float(_timeout) if _timeout else None

# =============================================================================
# Graph File Configuration
# =============================================================================

# File formats StaticEdgeSource.load() understands
SUPPORTED_GRAPH_SUFFIXES = (".json", ".msgpack")

# =============================================================================
# Wikipedia Scraping Configuration
# =============================================================================

# Base URL for Wikipedia
WIKIPEDIA_BASE_URL = "https://en.wikipedia.org/wiki/"

# Rate limiting: minimum seconds between requests
# Set to 0 for max speed, 1.0 to be polite to Wikipedia
WIKIPEDIA_REQUEST_DELAY = float(os.environ.get("WIKIPEDIA_REQUEST_DELAY", "0.0"))

# Request timeout in seconds
WIKIPEDIA_TIMEOUT = 10

# User agent for requests (be a good citizen)
USER_AGENT = "AsyncAstar/0.1 (graph search over live Wikipedia links)"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
