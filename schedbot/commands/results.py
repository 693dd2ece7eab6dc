from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from ..exporter import Exporter
from ..nlp.dates import format_date
from ..schemas import StoreState
from ..settings import Settings


@dataclass(frozen=True)
class NoMatch:
    """The handler's own pattern did not match the message."""


@dataclass(frozen=True)
class Handled:
    reply: str


@dataclass(frozen=True)
class HandledWithMutation:
    """A reply plus the new store state that must be persisted before replying."""

    reply: str
    state: StoreState


HandlerResult = Union[NoMatch, Handled, HandledWithMutation]


@dataclass
class CommandContext:
    # Original casing with whitespace collapsed.
    text: str
    # Lower-cased form used for keyword checks.
    message: str
    # Freshly loaded for this message; handlers may modify it and return it.
    state: StoreState
    now: datetime
    settings: Settings
    exporter: Optional[Exporter] = None

    @property
    def today(self) -> str:
        return format_date(self.now.date())
