"""Internal constants shared across the library."""

WEATHER_BASE_URL = "https://api.weatherapi.com/v1"
USER_AGENT = "fleetdash/0 (+aiohttp)"

DEFAULT_TICK_INTERVAL: float = 3.0
DEFAULT_ALERT_LIFETIME: float = 3.0
DEFAULT_SPEED_THRESHOLD: int = 50
DEFAULT_SPEED_MIN: int = 20
DEFAULT_SPEED_MAX: int = 70
DEFAULT_POSITION_JITTER: float = 0.005
DEFAULT_COORDINATE_PRECISION: int = 4
DEFAULT_FORECAST_DAYS: int = 7
DEFAULT_HOURLY_POINTS: int = 12

# ------------------------------------------------------------------
# Weather status messages shown in place of the weather section
# ------------------------------------------------------------------

STATUS_LOADING = "Detecting location & fetching weather data..."
STATUS_DISABLED = "Weather disabled"
STATUS_GEOLOCATION_UNSUPPORTED = "Geolocation not supported"
STATUS_FETCH_FAILED = "Failed to fetch weather data"
STATUS_MALFORMED = "Weather data unavailable"

# ------------------------------------------------------------------
# Default fleet (Dhanbad-Sindri mining region)
# ------------------------------------------------------------------

MINING_SITES: tuple[dict[str, object], ...] = (
    {"name": "Dhanbad", "latitude": 23.7998, "longitude": 86.4305},
    {"name": "Sindri", "latitude": 23.6805, "longitude": 86.4874},
    {"name": "Jharia", "latitude": 23.7515, "longitude": 86.4203},
)

DEFAULT_FLEET: tuple[dict[str, object], ...] = (
    {"id": "1", "label": "Truck 1", "driver_name": "Rajesh Kumar", "cargo_kind": "Coal", "home": MINING_SITES[0]},
    {"id": "2", "label": "Truck 2", "driver_name": "Priya Sharma", "cargo_kind": "Iron Ore", "home": MINING_SITES[1]},
    {"id": "3", "label": "Truck 3", "driver_name": "Amit Singh", "cargo_kind": "Limestone", "home": MINING_SITES[2]},
    {"id": "4", "label": "Truck 4", "driver_name": "Sanjay Yadav", "cargo_kind": "Coal", "home": MINING_SITES[0]},
    {"id": "5", "label": "Truck 5", "driver_name": "Deepak Patel", "cargo_kind": "Overburden", "home": MINING_SITES[1]},
)

# Payload in tons; a fixed series, not derived from telemetry.
PAYLOAD_TONS: tuple[tuple[str, int], ...] = (
    ("Truck A", 120),
    ("Truck B", 150),
    ("Truck C", 90),
    ("Truck D", 110),
    ("Truck E", 135),
)
