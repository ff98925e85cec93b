"""Configuration for the tracklist harvester."""

# Upstream API
API_BASE_URL = "https://www.nts.live/api/v2"

# Shows whose path contains this segment have no episode list
GUEST_SHOW_MARKER = "/guests/"

# Rate limiting (token bucket shared by every request)
REQUESTS_PER_SECOND = 5.0
RATE_LIMIT_BURST = 5

# Episode pagination
EPISODE_PAGE_SIZE = 12
PAGE_DELAY_SECONDS = 0.2

# Seconds before an HTTP request is abandoned
REQUEST_TIMEOUT = 30

# Local files
DEFAULT_CATALOG_FILE = "mixtapes.json"
DEFAULT_OUTPUT_DIR = "nts_tracklists"
DEFAULT_CHECKPOINT_FILE = "checkpoint.json"
TRACKLIST_SUFFIX = "_tracklist.json"

# User agent for requests
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
