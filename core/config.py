# =============================================================================
# core/config.py  —  Fixed server identity and upstream endpoints
# =============================================================================
#
# Tool behaviour has no configuration surface: the upstream services are
# free, keyless, and fixed.  These constants live in one place so the
# adapters and the server binding agree on them.
# =============================================================================

SERVER_NAME = "geo-weather-mcp-server"
SERVER_VERSION = "1.0.0"

# OpenStreetMap Nominatim (free, no API key).  Its usage policy requires an
# identifying User-Agent on every request.
NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
GEOCODE_USER_AGENT = "MCP-Geocode-Server/1.0.0"

# Open-Meteo (free, no API key).
OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_CURRENT_FIELDS = (
    "temperature_2m",
    "weather_code",
    "relative_humidity_2m",
    "wind_speed_10m",
)
