"""Movie records read from a TMDB-style table and their weighted similarity."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from moviecbr import cbr

BUDGET_WEIGHT = 0.3
GENRES_WEIGHT = 1.0
HOMEPAGE_WEIGHT = 0.2
KEYWORDS_WEIGHT = 2.0
PRODUCTION_COMPANIES_WEIGHT = 1.0
TITLE_WEIGHT = 2.5
TOTAL_WEIGHT = (
    BUDGET_WEIGHT
    + GENRES_WEIGHT
    + HOMEPAGE_WEIGHT
    + KEYWORDS_WEIGHT
    + PRODUCTION_COMPANIES_WEIGHT
    + TITLE_WEIGHT
)

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Genre:
    """A movie genre."""

    id: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Keyword:
    """A keyword attached to a movie."""

    id: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Company:
    """A production company."""

    id: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Country:
    """A production country."""

    iso_3166_1: str
    name: str


@dataclass(frozen=True)
class Language:
    """A spoken language."""

    iso_639_1: str
    name: str


def _json_u32(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: expected an unsigned integer, got {value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{where}: {value} is out of range")
    return value


def _json_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected a string, got {value!r}")
    return value


_Converter = Callable[[Any, str], Any]

_ENTITY_SCHEMAS: dict[type, tuple[tuple[str, _Converter], ...]] = {
    Genre: (("id", _json_u32), ("name", _json_str)),
    Keyword: (("id", _json_u32), ("name", _json_str)),
    Company: (("id", _json_u32), ("name", _json_str)),
    Country: (("iso_3166_1", _json_str), ("name", _json_str)),
    Language: (("iso_639_1", _json_str), ("name", _json_str)),
}

_E = TypeVar("_E")


def _parse_entities(text: str, cls: type[_E], column: str) -> list[_E]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"column {column!r}: invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError(f"column {column!r}: expected a JSON array")
    entities = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"column {column!r}: expected a JSON object, got {item!r}")
        values = {}
        for key, convert in _ENTITY_SCHEMAS[cls]:
            if key not in item:
                raise ValueError(f"column {column!r}: missing field {key!r}")
            values[key] = convert(item[key], f"column {column!r} field {key!r}")
        entities.append(cls(**values))
    return entities


def _require(row: Mapping[str, str | None], column: str) -> str:
    value = row.get(column)
    if value is None:
        raise ValueError(f"missing field {column!r}")
    return value


def _parse_u32(text: str, column: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise ValueError(f"column {column!r}: invalid integer {text!r}") from exc
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"column {column!r}: {value} is out of range")
    return value


def _parse_float(text: str, column: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"column {column!r}: invalid number {text!r}") from exc


@dataclass
class Movie:
    """A movie with the attributes used for case-based retrieval."""

    budget: int
    genres: list[Genre]
    homepage: str
    id: int
    keywords: list[Keyword]
    original_language: str
    original_title: str
    overview: str
    popularity: float
    production_companies: list[Company]
    production_countries: list[Country]
    release_date: str
    revenue: str
    runtime: float | None
    spoken_languages: list[Language]
    status: str
    tagline: str
    title: str
    vote_average: float
    vote_count: int = field(default=0)

    @classmethod
    def from_row(cls, row: Mapping[str, str | None]) -> Movie:
        """Build a movie from one table row keyed by column name.

        List columns hold JSON arrays; an empty ``runtime`` means unknown.
        Raises ValueError for missing or malformed fields.
        """
        runtime_text = row.get("runtime")
        runtime = (
            _parse_float(runtime_text, "runtime")
            if runtime_text is not None and runtime_text != ""
            else None
        )
        return cls(
            budget=_parse_u32(_require(row, "budget"), "budget"),
            genres=_parse_entities(_require(row, "genres"), Genre, "genres"),
            homepage=_require(row, "homepage"),
            id=_parse_u32(_require(row, "id"), "id"),
            keywords=_parse_entities(_require(row, "keywords"), Keyword, "keywords"),
            original_language=_require(row, "original_language"),
            original_title=_require(row, "original_title"),
            overview=_require(row, "overview"),
            popularity=_parse_float(_require(row, "popularity"), "popularity"),
            production_companies=_parse_entities(
                _require(row, "production_companies"), Company, "production_companies"
            ),
            production_countries=_parse_entities(
                _require(row, "production_countries"), Country, "production_countries"
            ),
            release_date=_require(row, "release_date"),
            revenue=_require(row, "revenue"),
            runtime=runtime,
            spoken_languages=_parse_entities(
                _require(row, "spoken_languages"), Language, "spoken_languages"
            ),
            status=_require(row, "status"),
            tagline=_require(row, "tagline"),
            title=_require(row, "title"),
            vote_average=_parse_float(_require(row, "vote_average"), "vote_average"),
            vote_count=_parse_u32(_require(row, "vote_count"), "vote_count"),
        )

    def similarity(self, other: Movie, min_budget: int, max_budget: int) -> float:
        """Weighted similarity to ``other``, normalised to 0.0..1.0."""
        total = (
            cbr.similarity_number(self.budget, other.budget, max_budget, min_budget)
            * BUDGET_WEIGHT
            + cbr.similarity_id(self.genres, other.genres) * GENRES_WEIGHT
            + cbr.similarity_string(self.homepage, other.homepage) * HOMEPAGE_WEIGHT
            + cbr.similarity_id(self.keywords, other.keywords) * KEYWORDS_WEIGHT
            + cbr.similarity_id(self.production_companies, other.production_companies)
            * PRODUCTION_COMPANIES_WEIGHT
            + cbr.similarity_string(self.title, other.title) * TITLE_WEIGHT
        )
        return total / TOTAL_WEIGHT