"""
Record types returned by the Pexels client.

Each record mirrors one JSON object of the Pexels API. Records are built
with `from_dict`, which fills missing keys with zero values. A key holding a
value of the wrong JSON type decodes to the zero value as well, decoding
carries on with the remaining keys, and once the record is built
`IncompleteRecord` is raised with that record attached.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


class IncompleteRecord(TypeError):
    """Some fields could not be decoded; `partial` holds everything that could."""

    def __init__(self, message: str, partial: Any):
        self.partial = partial
        super().__init__(message)


def _finish(record, errors: list, owner: bool):
    # Only the outermost from_dict call reports; nested calls share its list
    if owner and errors:
        raise IncompleteRecord(str(errors[0]), record) from errors[0]
    return record


def _object(data: Any, name: str, errors: list) -> dict:
    if not isinstance(data, dict):
        errors.append(TypeError(f"{name}: expected a JSON object, got {type(data).__name__}"))
        return {}
    return data


def _int(data: dict, key: str, errors: list) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid count or id
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(TypeError(f"{key}: expected an integer, got {value!r}"))
        return 0
    return value


def _float(data: dict, key: str, errors: list) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        errors.append(TypeError(f"{key}: expected a number, got {value!r}"))
        return 0.0
    return float(value)


def _str(data: dict, key: str, errors: list) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        errors.append(TypeError(f"{key}: expected a string, got {value!r}"))
        return ""
    return value


def _list(data: dict, key: str, errors: list) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        errors.append(TypeError(f"{key}: expected an array, got {type(value).__name__}"))
        return []
    return value


@dataclass(frozen=True)
class PhotoSource:
    original: str = ""
    large: str = ""
    large2x: str = ""
    medium: str = ""
    small: str = ""
    portrait: str = ""
    square: str = ""
    landscape: str = ""
    tiny: str = ""

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "PhotoSource":
        errs = [] if errors is None else errors
        data = _object(data, "src", errs)
        record = cls(
            original=_str(data, "original", errs),
            large=_str(data, "large", errs),
            large2x=_str(data, "large2x", errs),
            medium=_str(data, "medium", errs),
            small=_str(data, "small", errs),
            portrait=_str(data, "portrait", errs),
            square=_str(data, "square", errs),
            landscape=_str(data, "landscape", errs),
            tiny=_str(data, "tiny", errs),
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class Photo:
    id: int = 0
    width: int = 0
    height: int = 0
    url: str = ""
    photographer: str = ""
    photographer_url: str = ""
    src: PhotoSource = field(default_factory=PhotoSource)

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "Photo":
        errs = [] if errors is None else errors
        data = _object(data, "photo", errs)
        src = data.get("src")
        record = cls(
            id=_int(data, "id", errs),
            width=_int(data, "width", errs),
            height=_int(data, "height", errs),
            url=_str(data, "url", errs),
            photographer=_str(data, "photographer", errs),
            photographer_url=_str(data, "photographer_url", errs),
            src=PhotoSource() if src is None else PhotoSource.from_dict(src, errs),
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class SearchResults:
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    next_page: str = ""
    photos: list[Photo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "SearchResults":
        errs = [] if errors is None else errors
        data = _object(data, "search results", errs)
        record = cls(
            page=_int(data, "page", errs),
            per_page=_int(data, "per_page", errs),
            total_results=_int(data, "total_results", errs),
            next_page=_str(data, "next_page", errs),
            photos=[Photo.from_dict(p, errs) for p in _list(data, "photos", errs)],
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class CuratedResult:
    page: int = 0
    per_page: int = 0
    next_page: str = ""
    photos: list[Photo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "CuratedResult":
        errs = [] if errors is None else errors
        data = _object(data, "curated result", errs)
        record = cls(
            page=_int(data, "page", errs),
            per_page=_int(data, "per_page", errs),
            next_page=_str(data, "next_page", errs),
            photos=[Photo.from_dict(p, errs) for p in _list(data, "photos", errs)],
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class VideoFile:
    id: int = 0
    quality: str = ""
    file_type: str = ""
    width: int = 0
    height: int = 0
    link: str = ""

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "VideoFile":
        errs = [] if errors is None else errors
        data = _object(data, "video file", errs)
        record = cls(
            id=_int(data, "id", errs),
            quality=_str(data, "quality", errs),
            file_type=_str(data, "file_type", errs),
            width=_int(data, "width", errs),
            height=_int(data, "height", errs),
            link=_str(data, "link", errs),
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class VideoPicture:
    id: int = 0
    picture: str = ""
    nr: int = 0

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "VideoPicture":
        errs = [] if errors is None else errors
        data = _object(data, "video picture", errs)
        record = cls(
            id=_int(data, "id", errs),
            picture=_str(data, "picture", errs),
            nr=_int(data, "nr", errs),
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class Video:
    id: int = 0
    width: int = 0
    height: int = 0
    url: str = ""
    image: str = ""
    # Undocumented upstream; kept exactly as decoded (usually null)
    full_res: Optional[Any] = None
    duration: float = 0.0
    video_files: list[VideoFile] = field(default_factory=list)
    video_pictures: list[VideoPicture] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "Video":
        errs = [] if errors is None else errors
        data = _object(data, "video", errs)
        record = cls(
            id=_int(data, "id", errs),
            width=_int(data, "width", errs),
            height=_int(data, "height", errs),
            url=_str(data, "url", errs),
            image=_str(data, "image", errs),
            full_res=data.get("full_res"),
            duration=_float(data, "duration", errs),
            video_files=[VideoFile.from_dict(f, errs) for f in _list(data, "video_files", errs)],
            video_pictures=[
                VideoPicture.from_dict(p, errs) for p in _list(data, "video_pictures", errs)
            ],
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class VideoSearchResult:
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    next_page: str = ""
    videos: list[Video] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "VideoSearchResult":
        errs = [] if errors is None else errors
        data = _object(data, "video search result", errs)
        record = cls(
            page=_int(data, "page", errs),
            per_page=_int(data, "per_page", errs),
            total_results=_int(data, "total_results", errs),
            next_page=_str(data, "next_page", errs),
            videos=[Video.from_dict(v, errs) for v in _list(data, "videos", errs)],
        )
        return _finish(record, errs, errors is None)


@dataclass(frozen=True)
class PopularVideos:
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    url: str = ""
    videos: list[Video] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, errors: Optional[list] = None) -> "PopularVideos":
        errs = [] if errors is None else errors
        data = _object(data, "popular videos", errs)
        record = cls(
            page=_int(data, "page", errs),
            per_page=_int(data, "per_page", errs),
            total_results=_int(data, "total_results", errs),
            url=_str(data, "url", errs),
            videos=[Video.from_dict(v, errs) for v in _list(data, "videos", errs)],
        )
        return _finish(record, errs, errors is None)
