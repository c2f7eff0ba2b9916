"""Entry models: the summaries shown in the grid and the detail shown in the reader."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mushaf.config.constants import OPENING_FORMULA
from mushaf.exceptions import ApiResponseError


class RevelationType(str, Enum):
    """Classification tag of an entry."""

    MECCAN = "Meccan"
    MEDINAN = "Medinan"

    @property
    def label(self) -> str:
        return "مكية" if self is RevelationType.MECCAN else "مدنية"


@dataclass(frozen=True)
class EntrySummary:
    """One cell of the browsing grid."""

    number: int
    name: str
    english_name: str
    english_name_translation: str
    revelation_type: RevelationType
    number_of_ayahs: int

    @classmethod
    def from_payload(cls, payload: Any) -> EntrySummary:
        """Build a summary from one item of the provider's list response.

        Raises:
            ApiResponseError: If the payload does not have the expected shape.
        """
        try:
            return cls(
                number=_positive_int(payload["number"]),
                name=str(payload["name"]),
                english_name=str(payload["englishName"]),
                english_name_translation=str(payload.get("englishNameTranslation", "")),
                revelation_type=RevelationType(payload["revelationType"]),
                number_of_ayahs=int(payload["numberOfAyahs"]),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ApiResponseError(f"Malformed entry payload: {e}") from e


@dataclass(frozen=True)
class SubItem:
    """A numbered component of an entry's body."""

    number_in_surah: int
    text: str

    @property
    def display_text(self) -> str:
        """Body text with the opening formula removed; the reader shows it once in the header."""
        return self.text.replace(OPENING_FORMULA, "", 1).strip()


@dataclass(frozen=True)
class EntryDetail:
    """Full content of a single entry."""

    number: int
    name: str
    english_name: str
    revelation_type: RevelationType
    number_of_ayahs: int
    ayahs: tuple[SubItem, ...]

    @classmethod
    def from_payload(cls, payload: Any) -> EntryDetail:
        """Build a detail from the provider's single-entry response.

        Raises:
            ApiResponseError: If the payload does not have the expected shape.
        """
        try:
            ayahs = tuple(
                SubItem(number_in_surah=int(a["numberInSurah"]), text=str(a["text"]))
                for a in payload["ayahs"]
            )
            return cls(
                number=_positive_int(payload["number"]),
                name=str(payload["name"]),
                english_name=str(payload.get("englishName", "")),
                revelation_type=RevelationType(payload["revelationType"]),
                number_of_ayahs=int(payload["numberOfAyahs"]),
                ayahs=ayahs,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ApiResponseError(f"Malformed entry detail payload: {e}") from e


def _positive_int(value: Any) -> int:
    number = int(value)
    if number <= 0:
        raise ValueError(f"identifier must be positive, got {number}")
    return number
