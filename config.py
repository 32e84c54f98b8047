import os
from dotenv import load_dotenv

load_dotenv()

PEXELS_API_KEY = os.getenv("PEXELS_API_KEY", "")

# Photo and video endpoints live under different roots
PEXELS_BASE_URL = os.getenv("PEXELS_BASE_URL", "https://api.pexels.com/v1")
PEXELS_VIDEO_BASE_URL = os.getenv("PEXELS_VIDEO_BASE_URL", "https://api.pexels.com/videos")

REQUEST_TIMEOUT = float(os.getenv("PEXELS_REQUEST_TIMEOUT", "30.0"))

# Upper bound (inclusive) of the page drawn for random picks
RANDOM_PAGE_MAX = 1000

RATE_LIMIT_HEADER = "X-Ratelimit-Remaining"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
