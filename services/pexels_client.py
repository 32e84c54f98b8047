import logging
import random
import threading
import time
from typing import Optional, TypeVar

import httpx

import config
from services.errors import DecodeError, RateLimitHeaderError, TransportError
from services.models import (
    CuratedResult,
    IncompleteRecord,
    Photo,
    PopularVideos,
    SearchResults,
    Video,
    VideoSearchResult,
)

logger = logging.getLogger("Pexels")

T = TypeVar("T")


class PexelsClient:
    """Thin synchronous client for the Pexels photo and video API.

    Docs: https://www.pexels.com/api/documentation/
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.token = token if token is not None else config.PEXELS_API_KEY
        self.base_url = config.PEXELS_BASE_URL.rstrip("/")
        self.video_base_url = config.PEXELS_VIDEO_BASE_URL.rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._remaining = 0
        self._lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    headers={"Authorization": self.token},
                    timeout=self.timeout,
                    transport=self._transport,
                )
            return self._client

    @property
    def remaining_requests(self) -> int:
        with self._lock:
            return self._remaining

    def get_remaining_requests_this_period(self) -> int:
        """Return the last X-Ratelimit-Remaining value seen, 0 before any call."""
        return self.remaining_requests

    def _request_with_auth(self, url: str) -> httpx.Response:
        """Issue an authenticated GET and record the rate limit header.

        Raises:
            TransportError: the request could not be completed
            RateLimitHeaderError: the response has no integer rate limit header
        """
        logger.debug(f"GET {url}")
        try:
            response = self.client.get(url)
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            logger.warning(f"Pexels returned HTTP {response.status_code} for {url}")

        header = response.headers.get(config.RATE_LIMIT_HEADER)
        try:
            remaining = int(header)
        except (TypeError, ValueError) as e:
            logger.warning(f"Unusable rate limit header {header!r} for {url}")
            raise RateLimitHeaderError(header) from e

        with self._lock:
            self._remaining = remaining
        logger.debug(f"Rate limit remaining: {remaining}")
        return response

    def _get(self, url: str, result_type: type[T]) -> T:
        response = self._request_with_auth(url)
        try:
            return result_type.from_dict(response.json())
        except IncompleteRecord as e:
            raise DecodeError(
                f"Could not decode {result_type.__name__} from {url}: {e}",
                partial=e.partial,
            ) from e
        except (TypeError, ValueError) as e:
            raise DecodeError(
                f"Could not decode {result_type.__name__} from {url}: {e}",
                partial=result_type(),
            ) from e

    def search_photos(self, query: str, per_page: int = 15, page: int = 1) -> SearchResults:
        """Search for photos on Pexels.

        Args:
            query: Search terms, sent as given
            per_page: Number of results per page
            page: Page number for pagination

        Returns:
            SearchResults for the requested page
        """
        _check_paging(per_page, page)
        url = f"{self.base_url}/search?query={query}&per_page={per_page}&page={page}"
        return self._get(url, SearchResults)

    def curated_photos(self, per_page: int = 15, page: int = 1) -> CuratedResult:
        """Fetch one page of the curated photo listing."""
        _check_paging(per_page, page)
        return self._curated(per_page, page)

    def _curated(self, per_page: int, page: int) -> CuratedResult:
        url = f"{self.base_url}/curated?per_page={per_page}&page={page}"
        return self._get(url, CuratedResult)

    def get_photo(self, photo_id: int) -> Photo:
        """Fetch a single photo by its id."""
        return self._get(f"{self.base_url}/photos/{photo_id}", Photo)

    def get_random_photo(self) -> Optional[Photo]:
        """Pick a curated photo by loading a random page of size one.

        Returns None when the drawn page holds no photo.
        """
        result = self._curated(1, self._draw_page())
        if len(result.photos) == 1:
            return result.photos[0]
        logger.info(f"Random curated page {result.page} returned {len(result.photos)} photos")
        return None

    def search_video(self, query: str, per_page: int = 15, page: int = 1) -> VideoSearchResult:
        """Search for videos on Pexels.

        Args:
            query: Search terms, sent as given
            per_page: Number of results per page
            page: Page number for pagination

        Returns:
            VideoSearchResult for the requested page
        """
        _check_paging(per_page, page)
        url = f"{self.video_base_url}/search?query={query}&per_page={per_page}&page={page}"
        return self._get(url, VideoSearchResult)

    def popular_video(self, per_page: int = 15, page: int = 1) -> PopularVideos:
        """Fetch one page of the popular video listing."""
        _check_paging(per_page, page)
        return self._popular(per_page, page)

    def _popular(self, per_page: int, page: int) -> PopularVideos:
        url = f"{self.video_base_url}/popular?per_page={per_page}&page={page}"
        return self._get(url, PopularVideos)

    def get_random_video(self) -> Optional[Video]:
        """Pick a popular video by loading a random page of size one."""
        result = self._popular(1, self._draw_page())
        if len(result.videos) == 1:
            return result.videos[0]
        logger.info(f"Random popular page {result.page} returned {len(result.videos)} videos")
        return None

    @staticmethod
    def _draw_page() -> int:
        # The draw is a page number, not an index into the catalogue
        rng = random.Random(time.time())
        return rng.randint(0, config.RANDOM_PAGE_MAX)

    def close(self):
        with self._lock:
            if self._client:
                self._client.close()
                self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def new_client(token: str) -> PexelsClient:
    return PexelsClient(token)


def _check_paging(per_page: int, page: int):
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")
    if page < 1:
        raise ValueError(f"page must be positive, got {page}")
