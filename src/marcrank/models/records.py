"""MARC record data models for marcrank.

Records are consumed read-only by every extractor. The JSON shape accepted by
``Record.from_dict`` is::

    {"leader": "...", "fields": [{"tag": "008", "value": "..."},
                                 {"tag": "LOW", "subfields": [{"code": "a", "value": "..."}]}]}
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Subfield", "Field", "Record"]


@dataclass(frozen=True, slots=True)
class Subfield:
    """Single subfield of a data field.

    Attributes
    ----------
    code : str
        One-character subfield code (e.g., 'a').
    value : str
        Subfield content.
    """

    code: str
    value: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Subfield":
        """Build a subfield from its JSON representation.

        Raises
        ------
        ValueError
            If the code or the value is missing or not a string.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Subfield must be an object, got {data!r}")
        code = data.get("code")
        value = data.get("value")
        if not isinstance(code, str) or not isinstance(value, str):
            raise ValueError(f"Subfield code and value must be strings: {dict(data)!r}")
        return cls(code=code, value=value)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"code": self.code, "value": self.value}


@dataclass(frozen=True, slots=True)
class Field:
    """Tagged record field.

    Control fields carry ``value``; data fields carry ``subfields``.

    Attributes
    ----------
    tag : str
        Three-character field tag (e.g., '008', 'LOW').
    value : str | None
        Raw value of a control field, None for data fields.
    subfields : tuple[Subfield, ...] | None
        Ordered subfields of a data field, None for control fields.
    ind1 : str
        First indicator (data fields only).
    ind2 : str
        Second indicator (data fields only).
    """

    tag: str
    value: str | None = None
    subfields: tuple[Subfield, ...] | None = None
    ind1: str = " "
    ind2: str = " "

    @property
    def is_control(self) -> bool:
        """Whether this is a control field."""
        return self.subfields is None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Field":
        """Build a field from its JSON representation.

        Parameters
        ----------
        data : Mapping[str, Any]
            Field object with ``tag`` and either ``value`` or ``subfields``.

        Returns
        -------
        Field
            Parsed field.

        Raises
        ------
        ValueError
            If the tag is missing or the field has neither value nor subfields.
        """
        tag = data.get("tag")
        if not isinstance(tag, str) or not tag:
            raise ValueError(f"Field without tag: {dict(data)!r}")

        if data.get("subfields") is not None:
            subfields = tuple(Subfield.from_dict(sub) for sub in data["subfields"])
            return cls(
                tag=tag,
                subfields=subfields,
                ind1=str(data.get("ind1", " ")),
                ind2=str(data.get("ind2", " ")),
            )

        if data.get("value") is not None:
            return cls(tag=tag, value=str(data["value"]))

        raise ValueError(f"Field {tag} has neither value nor subfields")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.subfields is None:
            return {"tag": self.tag, "value": self.value}
        return {
            "tag": self.tag,
            "ind1": self.ind1,
            "ind2": self.ind2,
            "subfields": [sub.to_dict() for sub in self.subfields],
        }


@dataclass(frozen=True, slots=True)
class Record:
    """Bibliographic catalog record.

    Attributes
    ----------
    leader : str | None
        Record leader, None if absent.
    fields : tuple[Field, ...]
        Fields in record order. Several fields may share a tag.
    """

    leader: str | None = None
    fields: tuple[Field, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """Build a record from its JSON representation.

        Parameters
        ----------
        data : Mapping[str, Any]
            Record object with ``leader`` and ``fields``.

        Returns
        -------
        Record
            Parsed record.
        """
        leader = data.get("leader")
        return cls(
            leader=str(leader) if leader is not None else None,
            fields=tuple(Field.from_dict(item) for item in data.get("fields", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"leader": self.leader, "fields": [f.to_dict() for f in self.fields]}
