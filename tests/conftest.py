"""Shared fixtures for the Pexels client tests."""

import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from services.pexels_client import PexelsClient


class FakePexels:
    """Serves a canned response and records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = {}
        self.content = None
        self.headers = {"X-Ratelimit-Remaining": "199"}
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, headers=self.headers, content=self.content)
        return httpx.Response(self.status_code, headers=self.headers, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_api():
    return FakePexels()


@pytest.fixture
def client(fake_api):
    c = PexelsClient("test-token", transport=httpx.MockTransport(fake_api))
    yield c
    c.close()


@pytest.fixture
def photo_json():
    return {
        "id": 2014422,
        "width": 3024,
        "height": 3024,
        "url": "https://www.pexels.com/photo/brown-rocks-during-golden-hour-2014422/",
        "photographer": "Joey Farina",
        "photographer_url": "https://www.pexels.com/@joey",
        "src": {
            "original": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg",
            "large2x": "https://images.pexels.com/photos/2014422/large2x.jpeg",
            "large": "https://images.pexels.com/photos/2014422/large.jpeg",
            "medium": "https://images.pexels.com/photos/2014422/medium.jpeg",
            "small": "https://images.pexels.com/photos/2014422/small.jpeg",
            "portrait": "https://images.pexels.com/photos/2014422/portrait.jpeg",
            "landscape": "https://images.pexels.com/photos/2014422/landscape.jpeg",
            "square": "https://images.pexels.com/photos/2014422/square.jpeg",
            "tiny": "https://images.pexels.com/photos/2014422/tiny.jpeg",
        },
    }


@pytest.fixture
def video_json():
    return {
        "id": 2499611,
        "width": 1080,
        "height": 1920,
        "url": "https://www.pexels.com/video/2499611/",
        "image": "https://images.pexels.com/videos/2499611/preview.jpeg",
        "full_res": None,
        "duration": 22,
        "video_files": [
            {
                "id": 125004,
                "quality": "hd",
                "file_type": "video/mp4",
                "width": 1080,
                "height": 1920,
                "link": "https://player.vimeo.com/external/342571552.hd.mp4",
            },
            {
                "id": 125005,
                "quality": "sd",
                "file_type": "video/mp4",
                "width": 540,
                "height": 960,
                "link": "https://player.vimeo.com/external/342571552.sd.mp4",
            },
        ],
        "video_pictures": [
            {"id": 308178, "picture": "https://static-videos.pexels.com/pictures/0.jpg", "nr": 0},
            {"id": 308179, "picture": "https://static-videos.pexels.com/pictures/1.jpg", "nr": 1},
        ],
    }
