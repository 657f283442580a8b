"""
Static settings for the watcher.

Everything here can be overridden from the command line where it makes sense;
nothing is read from disk and nothing is persisted between runs.
"""

# VATSIM endpoints
STATUS_URL = "https://status.vatsim.net/status.json"
RATINGS_URL = "https://api.vatsim.net/api/ratings/{cid}/rating_times"
STATS_URL = "https://stats.vatsim.net/stats/{cid}"
USER_AGENT = "github.com/celeo/vatsim_online"

REQUEST_TIMEOUT_SECONDS = 5
REFRESH_INTERVAL_SECONDS = 15      # the v3 feed only updates every 15 seconds
DEFAULT_VIEW_DISTANCE_NM = 20
MAX_CONCURRENT_FETCHES = 8         # ratings requests in flight per cycle

EARTH_RADIUS_KM = 6371.0
KM_PER_NM = 1.852

INSTRUCTIONS = "Auto-refreshes every {interval} sec. Up/down to select row, 'O' to view stats, Esc to clear, 'Q' to quit."
