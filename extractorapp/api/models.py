"""
Struktur data hasil ekstraksi. Semua objek dibuat baru per request dan tidak
diubah setelah dibuat.
"""
from dataclasses import dataclass, field
from enum import Enum


class ContentType(Enum):
    MOVIE = "movie"
    SERIES = "series"


@dataclass(frozen=True)
class StreamLink:
    quality: str
    url: str

    def to_dict(self):
        return {"quality": self.quality, "url": self.url}


@dataclass(frozen=True)
class SubtitleLink:
    language: str
    label: str
    url: str

    def to_dict(self):
        return {"language": self.language, "label": self.label, "url": self.url}


@dataclass(frozen=True)
class NavRef:
    """Link navigasi (season atau episode) yang belum di-resolve isinya."""
    name: str
    url: str
    is_active: bool = False

    def to_dict(self):
        return {"name": self.name, "url": self.url, "isActive": self.is_active}


@dataclass(frozen=True)
class Episode:
    name: str
    streams: tuple = ()
    subtitles: tuple = ()

    def to_dict(self):
        return {
            "name": self.name,
            "streams": [s.to_dict() for s in self.streams],
            "subtitles": [s.to_dict() for s in self.subtitles],
        }


@dataclass(frozen=True)
class Season:
    name: str
    episodes: tuple = ()

    def to_dict(self):
        return {"name": self.name, "episodes": [ep.to_dict() for ep in self.episodes]}


@dataclass(frozen=True)
class Movie:
    title: str
    streams: tuple = ()
    subtitles: tuple = ()
    type: ContentType = field(default=ContentType.MOVIE, init=False)

    def to_dict(self):
        return {
            "type": self.type.value,
            "title": self.title,
            "streams": [s.to_dict() for s in self.streams],
            "subtitles": [s.to_dict() for s in self.subtitles],
        }


@dataclass(frozen=True)
class Series:
    title: str
    seasons: tuple = ()
    type: ContentType = field(default=ContentType.SERIES, init=False)

    def to_dict(self):
        return {
            "type": self.type.value,
            "title": self.title,
            "seasons": [season.to_dict() for season in self.seasons],
        }


@dataclass(frozen=True)
class NavigationResult:
    """Proyeksi datar satu level: isi halaman ini + daftar season/episode."""
    type: ContentType
    title: str
    streams: tuple = ()
    subtitles: tuple = ()
    seasons: tuple = ()
    episodes: tuple = ()

    def to_dict(self):
        return {
            "type": self.type.value,
            "title": self.title,
            "streams": [s.to_dict() for s in self.streams],
            "subtitles": [s.to_dict() for s in self.subtitles],
            "seasons": [ref.to_dict() for ref in self.seasons],
            "episodes": [ref.to_dict() for ref in self.episodes],
        }
