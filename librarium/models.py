"""
Domain models shared by the search core and the API layer.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional


@dataclass(frozen=True)
class Book:
    """
    A book record as seen by the search core.

    Only ``title``, ``author``, ``genre`` and ``description`` take part in
    local matching; the remaining fields are carried through for display.
    """
    id: str
    title: str
    author: str
    genre: Optional[str] = None
    description: Optional[str] = None
    isbn: Optional[str] = None
    cover_image: Optional[str] = None
    published_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Book":
        """
        Build a Book from a mapping, ignoring unknown keys.

        Raises:
            ValueError: If ``id`` or ``title`` is missing.
        """
        if not data.get("id"):
            raise ValueError(f"Book record is missing an id: {data!r}")
        if not data.get("title"):
            raise ValueError(f"Book {data['id']} is missing a title")

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values["id"] = str(values["id"])
        values.setdefault("author", "")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
