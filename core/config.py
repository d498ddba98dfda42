import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

class Settings:
    # Overpass API (places provider)
    OVERPASS_URL: str = os.getenv("OVERPASS_URL", "https://overpass-api.de/api/interpreter")
    PLACES_TIMEOUT_SECONDS: float = float(os.getenv("PLACES_TIMEOUT_SECONDS", "25"))

    # OSRM (routing provider)
    OSRM_URL: str = os.getenv("OSRM_URL", "https://router.project-osrm.org")
    OSRM_PROFILE: str = os.getenv("OSRM_PROFILE", "driving")
    ROUTING_TIMEOUT_SECONDS: float = float(os.getenv("ROUTING_TIMEOUT_SECONDS", "10"))

    # Nominatim (geocoding provider)
    NOMINATIM_USER_AGENT: str = os.getenv("NOMINATIM_USER_AGENT", "nearby-navigator/1.0")
    GEOCODING_TIMEOUT_SECONDS: int = int(os.getenv("GEOCODING_TIMEOUT_SECONDS", "10"))

    # Position used when the caller cannot supply one (New Delhi)
    DEFAULT_LAT: float = float(os.getenv("DEFAULT_LAT", "28.6139"))
    DEFAULT_LNG: float = float(os.getenv("DEFAULT_LNG", "77.2090"))

    # City named in synthesized fallback addresses
    FALLBACK_CITY: str = os.getenv("FALLBACK_CITY", "Delhi")

    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
