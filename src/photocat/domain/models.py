from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import NO_ALBUM_NAME


def normalize_id(value: Any) -> str:
    """Return the canonical string form of a catalog id.

    ``1``, ``1.0``, ``"1"``, ``"01"``, ``"1.0"`` and ``" 1 "`` all map to
    ``"1"`` so the rest of the code base can compare ids with plain equality.
    Non-numeric ids are only stripped.
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    if not text or "_" in text:
        return text
    try:
        return str(int(text))
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    if number.is_integer():
        return str(int(number))
    return text


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


@dataclass
class Photo:
    id: str
    filename: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    albums: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    # Raw JSON object the record was loaded from; untouched keys are written
    # back from here verbatim.
    source: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> Photo:
        return cls(
            id=normalize_id(payload.get("id")),
            filename=payload.get("filename"),
            title=payload.get("title"),
            description=payload.get("description"),
            date=payload.get("date"),
            albums=[normalize_id(album_id) for album_id in _as_list(payload.get("albums"))],
            tags=_as_list(payload.get("tags")),
            source=dict(payload),
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.source:
            payload = dict(self.source)
        else:
            payload = {
                "id": self.id,
                "filename": self.filename,
                "date": self.date,
                "albums": list(self.albums),
            }
        for key, value in (
            ("title", self.title),
            ("description", self.description),
            ("tags", list(self.tags)),
        ):
            if key in payload or value:
                payload[key] = value
        return payload


@dataclass
class Album:
    id: str
    name: str = ""
    source: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> Album:
        name = payload.get("name")
        return cls(
            id=normalize_id(payload.get("id")),
            name=name if isinstance(name, str) else "",
            source=dict(payload),
        )


@dataclass(frozen=True)
class FormattedPhoto:
    """Display projection of a :class:`Photo`. Never persisted."""

    id: str
    filename: Optional[str]
    title: Optional[str]
    formatted_date: str
    album_names: List[str]
    tags: List[str]

    def to_display(self) -> Dict[str, Any]:
        """Return the JSON-shaped mapping printed by the shell."""

        album_names: Any = list(self.album_names)
        if not album_names:
            album_names = {"name": NO_ALBUM_NAME}
        return {
            "id": self.id,
            "filename": self.filename,
            "title": self.title,
            "formattedDate": self.formatted_date,
            "albumNames": album_names,
            "tags": list(self.tags),
        }
