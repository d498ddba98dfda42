"""
Startup script for deployment
Handles:
- Provider configuration summary
- Uvicorn server launch
"""

import os
import sys

from core.config import settings


def report_providers():
    """Print which external providers the API will call"""
    print(f"✓ Places provider:    {settings.OVERPASS_URL} (timeout {settings.PLACES_TIMEOUT_SECONDS:g}s)")
    print(f"✓ Routing provider:   {settings.OSRM_URL} [{settings.OSRM_PROFILE}] (timeout {settings.ROUTING_TIMEOUT_SECONDS:g}s)")
    print(f"✓ Geocoding provider: Nominatim as '{settings.NOMINATIM_USER_AGENT}'")


def main():
    """Main startup sequence"""
    print("=" * 60)
    print("🚀 Nearby Navigator - Startup")
    print("=" * 60)

    print("\n[1/2] Checking providers...")
    report_providers()

    print("\n[2/2] Starting uvicorn server...")
    print("=" * 60)

    port = int(os.getenv("PORT", "8000"))

    import uvicorn

    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=port,
            log_level=settings.LOG_LEVEL.lower(),
            access_log=True
        )
    except KeyboardInterrupt:
        print("\n⏹️  Shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
