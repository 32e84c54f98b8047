#!/usr/bin/env python3
"""
Pexels client demo.

Searches Pexels for photos and prints the first page of results along with
the number of API calls left in the current period.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

import config
from services import PexelsClient, PexelsError

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def check_api_keys():
    """Check if the Pexels API key is configured."""
    if not config.PEXELS_API_KEY:
        print("Warning: Missing API key:")
        print("  - PEXELS_API_KEY")
        print("Please set it in your .env file or environment variables.")


def main():
    """Main entry point."""
    check_api_keys()
    query = sys.argv[1] if len(sys.argv) > 1 else "waves"

    with PexelsClient() as client:
        try:
            result = client.search_photos(query, per_page=15, page=1)
        except PexelsError as e:
            print(f"Search error: {e}")
            sys.exit(1)

        if result.page == 0:
            print("Search result is wrong: page 0 reported")
        print(result)
        print(f"Remaining requests this period: {client.get_remaining_requests_this_period()}")


if __name__ == "__main__":
    main()
