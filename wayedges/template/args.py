"""Placeholder kinds: formatted floats and ring presets."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .base import TemplateArg, TemplateArgProcessor

TEMPLATE_ARG_FLOAT = "float"
TEMPLATE_ARG_RING_PRESET = "preset"

_PRECISION_RE = re.compile(r"\+?[0-9]+")


def _parse_precision(text: str) -> int:
    if not _PRECISION_RE.fullmatch(text):
        raise ValueError(f"invalid precision: {text!r}")
    return int(text)


def _parse_multiply(text: str) -> float:
    if "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"invalid float literal: {text!r}") from None


@dataclass(frozen=True)
class FloatArg(TemplateArg):
    """Formats a number with a fixed precision, optionally scaled first."""

    name: ClassVar[str] = TEMPLATE_ARG_FLOAT

    precision: int = 2
    multiply: Optional[float] = None

    @classmethod
    def from_str(cls, s: str) -> "FloatArg":
        """Parse ``"<precision>,<multiply>"``; either part may be empty."""
        s = s.strip()
        if not s:
            return cls()

        precision_text = s
        multiply_text: Optional[str] = None
        if "," in s:
            p, m = s.split(",", 1)
            precision_text = p.strip()
            m = m.strip()
            if m:
                multiply_text = m

        precision = _parse_precision(precision_text) if precision_text else 2
        multiply = _parse_multiply(multiply_text) if multiply_text is not None else None
        return cls(precision=precision, multiply=multiply)

    def format(self, value: float) -> str:
        if self.multiply is not None:
            value *= self.multiply
        if math.isnan(value):
            return "NaN"
        return f"{value:.{self.precision}f}"


class FloatArgProcessor(TemplateArgProcessor):
    """Builds :class:`FloatArg` placeholders."""

    name: ClassVar[str] = TEMPLATE_ARG_FLOAT

    def process(self, param: str) -> FloatArg:
        return FloatArg.from_str(param)


@dataclass(frozen=True)
class RingPresetArg(TemplateArg):
    """Stands for a preset text supplied at render time."""

    name: ClassVar[str] = TEMPLATE_ARG_RING_PRESET

    def parse(self, arg: str) -> str:
        return arg


class RingPresetArgProcessor(TemplateArgProcessor):
    """Builds :class:`RingPresetArg` placeholders; the argument is ignored."""

    name: ClassVar[str] = TEMPLATE_ARG_RING_PRESET

    def process(self, param: str) -> RingPresetArg:
        return RingPresetArg()