import json
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the sources importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from photocat.bootstrap import build_catalog_service
from photocat.domain.services.formatter import PhotoFormatter
from photocat.domain.services.lookup import PhotoLookup
from photocat.infrastructure.repositories.json_catalog_store import JsonCatalogStore

PHOTOS = [
    {
        "id": 1,
        "filename": "beach.jpg",
        "title": "Old",
        "description": "Sunset at the beach",
        "date": "2023-05-01",
        "albums": [10],
        "tags": ["x"],
    },
    {
        "id": 2,
        "filename": "mountain.jpg",
        "title": "Summit",
        "description": "Top of the ridge",
        "date": "2022-12-25T08:30:00Z",
        "albums": [10, 20],
        "tags": [],
    },
    {
        "id": "3",
        "filename": "cat.jpg",
        "title": "Cat",
        "description": "Sleeping",
        "date": "2021-01-09",
        "albums": [99],
        "tags": ["pets", "home"],
    },
]

ALBUMS = [
    {"id": 10, "name": "Trips"},
    {"id": 20, "name": "Nature"},
    {"id": 30, "name": "Family"},
]


def write_catalog(directory: Path, photos=None, albums=None) -> None:
    (directory / "photos.json").write_text(json.dumps(PHOTOS if photos is None else photos, indent=2), encoding="utf-8")
    (directory / "albums.json").write_text(json.dumps(ALBUMS if albums is None else albums, indent=2), encoding="utf-8")


def read_photos(directory: Path):
    return json.loads((directory / "photos.json").read_text(encoding="utf-8"))


@pytest.fixture
def catalog_dir(tmp_path):
    write_catalog(tmp_path)
    return tmp_path


@pytest.fixture
def notifier():
    return Mock()


@pytest.fixture
def store(catalog_dir, notifier):
    return JsonCatalogStore(catalog_dir, notifier=notifier)


@pytest.fixture
def lookup(store, notifier):
    return PhotoLookup(store, notifier=notifier)


@pytest.fixture
def formatter(store, lookup):
    return PhotoFormatter(store, lookup)


@pytest.fixture
def service(catalog_dir, notifier):
    return build_catalog_service(catalog_dir, notifier=notifier)
