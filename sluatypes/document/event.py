"""Markup events."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeAlias, assert_never


@dataclass(frozen=True, slots=True)
class OpenEvent:
    tag: str


@dataclass(frozen=True, slots=True)
class TextEvent:
    content: str


@dataclass(frozen=True, slots=True)
class CloseEvent:
    pass


MarkupEvent: TypeAlias = OpenEvent | TextEvent | CloseEvent


class MarkupSink(Protocol):
    def open(self, tag: str) -> None: ...

    def text(self, content: str) -> None: ...

    def close(self) -> None: ...


def process_events(sink: MarkupSink, events: Iterable[MarkupEvent]) -> None:
    """Replay a recorded event sequence into a sink."""
    for event in events:
        match event:
            case OpenEvent(tag=tag):
                sink.open(tag)
            case TextEvent(content=content):
                sink.text(content)
            case CloseEvent():
                sink.close()
            case _:
                assert_never(event)
