from .pexels_client import PexelsClient, new_client
from .errors import PexelsError, TransportError, RateLimitHeaderError, DecodeError
from .models import (
    Photo,
    PhotoSource,
    SearchResults,
    CuratedResult,
    Video,
    VideoFile,
    VideoPicture,
    VideoSearchResult,
    PopularVideos,
)

__all__ = [
    "PexelsClient",
    "new_client",
    "PexelsError",
    "TransportError",
    "RateLimitHeaderError",
    "DecodeError",
    "Photo",
    "PhotoSource",
    "SearchResults",
    "CuratedResult",
    "Video",
    "VideoFile",
    "VideoPicture",
    "VideoSearchResult",
    "PopularVideos",
]
