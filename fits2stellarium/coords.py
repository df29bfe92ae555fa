"""RA/DEC (degrés décimaux) -> vecteur unitaire J2000.

FR: La conversion texte -> float ne retombe plus silencieusement sur 0:
    `parse_degrees` retourne soit `Degrees`, soit `ParseFailure`.
EN: Text -> float conversion no longer silently defaults to 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np


@dataclass(frozen=True)
class Degrees:
    value: float


@dataclass(frozen=True)
class ParseFailure:
    text: str
    reason: str


DegreesResult = Union[Degrees, ParseFailure]


def parse_degrees(text: str) -> DegreesResult:
    # float() ignore la locale: le séparateur décimal est toujours '.'
    s = (text or "").strip()
    if not s:
        return ParseFailure(text, "empty value")
    try:
        v = float(s)
    except ValueError:
        return ParseFailure(text, f"not a decimal number: {s!r}")
    if not math.isfinite(v):
        return ParseFailure(text, f"not a finite number: {s!r}")
    return Degrees(v)


def radec_to_j2000(ra_deg: float, dec_deg: float) -> np.ndarray:
    ra = ra_deg * (np.pi / 180.0)
    dec = dec_deg * (np.pi / 180.0)
    return np.array([
        np.cos(dec) * np.cos(ra),
        np.cos(dec) * np.sin(ra),
        np.sin(dec),
    ])


def format_j2000(vector) -> str:
    return "[" + ",".join(repr(float(x)) for x in vector) + "]"
