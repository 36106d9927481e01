"""Text templates with ``{name:arg}`` placeholders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Dict, Iterator, List, Optional, Tuple, Union

from ..shell import notify_send

log = logging.getLogger(__name__)

_NOTIFY_SUMMARY = "Way-Edges"


class TemplateArg(ABC):
    """A parsed placeholder; ``name`` says which kind it is."""

    name: ClassVar[str]


class TemplateArgProcessor(ABC):
    """Turns the argument text of a placeholder into a :class:`TemplateArg`."""

    name: ClassVar[str]

    @abstractmethod
    def process(self, param: str) -> TemplateArg:
        """Parse ``param``; raise ValueError if it is invalid."""


class TemplateProcessor:
    """A registry of placeholder processors keyed by name."""

    def __init__(self) -> None:
        self._processors: Dict[str, TemplateArgProcessor] = {}

    def add_processor(self, processor: TemplateArgProcessor) -> "TemplateProcessor":
        """Register ``processor`` and return this registry for chaining."""
        self._processors[processor.name] = processor
        return self

    def get(self, name: str) -> Optional[TemplateArgProcessor]:
        return self._processors.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._processors


TemplateContent = Union[str, TemplateArg]


def _extract_braces(text: str) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) spans of unescaped ``{...}`` groups, end exclusive."""
    start = -1
    escaped = False
    for index, char in enumerate(text):
        if char == "\\":
            escaped = not escaped
        elif char == "{" and not escaped:
            start = index
        elif char == "}" and not escaped:
            if start != -1:
                yield (start, index + 1)
            start = -1


def _report(message: str) -> None:
    notify_send(_NOTIFY_SUMMARY, message, True)
    log.error("%s", message)


@dataclass
class Template:
    """A sequence of literal strings and parsed placeholders."""

    contents: List[TemplateContent] = field(default_factory=list)

    @classmethod
    def from_str(cls, raw: str, processors: TemplateProcessor) -> "Template":
        """Parse ``raw``; unknown or invalid placeholders are reported and dropped."""
        contents: List[TemplateContent] = []
        record_index = 0

        for start, end in _extract_braces(raw):
            if start > record_index:
                contents.append(raw[record_index:start].replace("\\", ""))
            record_index = end

            inner = raw[start + 1 : end - 1]
            if ":" in inner:
                name, arg = inner.split(":", 1)
                name, arg = name.strip(), arg.strip()
            else:
                name, arg = inner.strip(), ""

            processor = processors.get(name)
            if processor is None:
                _report(f"Unknown template: {name}")
                continue

            try:
                parsed = processor.process(arg)
            except ValueError as exc:
                _report(f"Faild to parse template: {name}: {exc}")
                continue

            contents.append(parsed)

        if record_index < len(raw):
            contents.append(raw[record_index:].replace("\\", ""))

        return cls(contents)

    def render(self, callback: Callable[[TemplateArg], str]) -> str:
        """Join the literal parts with ``callback``'s text for each placeholder."""
        return "".join(
            part if isinstance(part, str) else callback(part) for part in self.contents
        )