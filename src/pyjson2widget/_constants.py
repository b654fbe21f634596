"""Default limits for discovery, projection and caching."""

DEFAULT_MAX_FIELDS = 20
"""Maximum number of discovered field paths."""

DEFAULT_TABLE_MAX_ROWS = 10
"""Maximum number of rows in a table projection."""

DEFAULT_CARD_MAX_FIELDS = 8
"""Maximum number of label/value pairs in a card projection."""

DEFAULT_SERIES_MAX_POINTS = 30
"""Maximum number of points in a chart projection."""

DEFAULT_CACHE_TTL_SECONDS = 30.0
"""Lifetime of a cached API response."""

DEFAULT_CURRENCY_CODE = "USD"
"""Currency used when a currency format does not name one."""
