from pathlib import Path

DEFAULT_DATA_DIR = (Path(__file__).parent.parent.resolve() / "data").absolute().resolve()

# Leaderboard API
SOURCE_URL_ENV = "CROSSBENCH_SOURCE_URL"
DEFAULT_SOURCE_URL = "https://api.zeroeval.com/leaderboard/models/full?justCanonicals=true"
HTTP_TIMEOUT_SECONDS = 30.0
USER_AGENT = "CrossBench/1.0"

# Export artifacts
LEADERBOARD_JSON = "leaderboard_all.json"
PERFORMANCE_CSV = "leaderboard_performance.csv"
PRICE_CSV = "leaderboard_price.csv"
VALUE_CSV = "leaderboard_value.csv"
LEGACY_TEXT = "output.txt"
CSV_ROW_LIMIT = 100
LEGACY_ROW_LIMIT = 50

# Prices at or above this are treated as unknown in exports
UNKNOWN_PRICE = 999_999.0

# Aggregates outside this band are logged at debug level
EXTREME_SCORE_HIGH = 0.9
EXTREME_SCORE_LOW = 0.1
EXTREME_CONFIDENCE_HIGH = 90.0
EXTREME_CONFIDENCE_LOW = 20.0
