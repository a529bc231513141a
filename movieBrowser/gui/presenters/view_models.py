"""
Presentation-ready values handed to the widgets.

Everything here is frozen: presenters build a new state on every fetch and
replace the old one in one go.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, NamedTuple, Protocol, Union


class IndexPath(NamedTuple):
    row: int
    section: int = 0


class Navigator(Protocol):
    def go_to_details(self, movie_id: int) -> None: ...


# ── list rows ─────────────────────────────────────────────────────────────
@dataclass(slots=True, frozen=True)
class MovieRowViewModel:
    id: int
    title: str
    release_date: str          # already formatted for display
    poster_url: str


# ── detail rows: tagged union ─────────────────────────────────────────────
class RowKind(Enum):
    IMAGE       = "image"
    DESCRIPTION = "description"
    TITLE_VALUE = "title_value"


@dataclass(slots=True, frozen=True)
class ImageRow:
    image_url: str
    kind: Literal[RowKind.IMAGE] = RowKind.IMAGE


@dataclass(slots=True, frozen=True)
class DescriptionRow:
    text: str
    kind: Literal[RowKind.DESCRIPTION] = RowKind.DESCRIPTION


@dataclass(slots=True, frozen=True)
class TitleValueRow:
    title: str
    value: str
    kind: Literal[RowKind.TITLE_VALUE] = RowKind.TITLE_VALUE


DetailRow = Union[ImageRow, DescriptionRow, TitleValueRow]


# ── screen states ─────────────────────────────────────────────────────────
@dataclass(slots=True, frozen=True)
class MoviesListState:
    rows: tuple[MovieRowViewModel, ...] = ()
    error: Exception | None = None


@dataclass(slots=True, frozen=True)
class MovieDetailsState:
    title: str | None = None
    rows: tuple[DetailRow, ...] = field(default=())
    error: Exception | None = None
