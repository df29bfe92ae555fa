"""Couche FITS (lecture du header primaire + extraction clé/valeur/commentaire).

FR: Lecture par blocs de 2880 octets, découpage en cartes de 80 caractères,
    arrêt sur END ou au plafond de blocs; recherche d'un mot-clé et séparation
    valeur / commentaire en respectant les chaînes entre apostrophes.
EN: Reads 2880-byte blocks, slices them into 80-char cards, stops on END or at
    the block ceiling; keyword lookup and quote-aware value/comment split.

Ce n'est pas une librairie FITS: seulement de quoi trouver quelques mots-clés.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence

from fits2stellarium import config
from fits2stellarium.logging_utils import dbg


# ------------------------------------------------------------
# Records / blocks
# ------------------------------------------------------------
class ByteCursor:
    """Offset explicite sur un bloc d'octets (lecture bornée)."""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    @property
    def at_end(self) -> bool:
        return self.remaining <= 0

    def take(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"negative read size: {n}")
        n = min(n, self.remaining)
        chunk = self.data[self.offset:self.offset + n]
        self.offset += n
        return chunk


@dataclass(frozen=True)
class HeaderRecord:
    text: str

    @classmethod
    def from_bytes(cls, raw: bytes) -> "HeaderRecord":
        # ASCII: un caractère par octet, padding si la carte est tronquée
        s = raw.decode("ascii", errors="replace")
        return cls(s.ljust(config.RECORD_WIDTH))

    @property
    def is_end(self) -> bool:
        return self.text[:4].upper() == "END "

    def __str__(self) -> str:
        return self.text


def split_records(data: bytes) -> Iterator[HeaderRecord]:
    """Découpe un bloc en cartes de 80 caractères; s'arrête après la carte END (incluse)."""
    cursor = ByteCursor(data)
    while not cursor.at_end:
        rec = HeaderRecord.from_bytes(cursor.take(config.RECORD_WIDTH))
        yield rec
        if rec.is_end:
            return


def _read_block(stream: BinaryIO) -> bytes:
    # read() peut rendre moins que demandé avant la fin du flux
    chunks = []
    missing = config.BLOCK_SIZE
    while missing > 0:
        chunk = stream.read(missing)
        if not chunk:
            break
        chunks.append(chunk)
        missing -= len(chunk)
    return b"".join(chunks)


def read_header_records(stream: BinaryIO, max_blocks: int = None) -> List[HeaderRecord]:
    """
    Lit au plus `max_blocks` blocs de 2880 octets et retourne les cartes dans
    l'ordre du fichier. S'arrête juste après la carte END (incluse).
    Un bloc incomplet en fin de flux est traité tel quel; un bloc vide termine la boucle.
    """
    if max_blocks is None:
        max_blocks = config.MAX_HEADER_BLOCKS
    if max_blocks < 1:
        raise ValueError(f"max_blocks must be >= 1 (got {max_blocks})")

    records: List[HeaderRecord] = []
    for block_no in range(max_blocks):
        block = _read_block(stream)
        if not block:
            dbg(f"EOF after {block_no} block(s)")
            return records

        records.extend(split_records(block))
        if records[-1].is_end:
            dbg(f"END found in block {block_no + 1} (record {len(records)})")
            return records

    dbg(f"No END within {max_blocks} block(s); {len(records)} record(s) kept")
    return records


def read_header_file(path, max_blocks: int = None) -> List[HeaderRecord]:
    with open(Path(path), "rb") as f:
        return read_header_records(f, max_blocks=max_blocks)


# ------------------------------------------------------------
# Keyword lookup
# ------------------------------------------------------------
class KeywordEntry(NamedTuple):
    value: str
    comment: str

    @property
    def text(self) -> str:
        """Valeur nettoyée pour affichage: espaces retirés, apostrophes FITS enlevées."""
        s = self.value.strip()
        if len(s) >= 2 and s[0] == "'" and s[-1] == "'":
            s = s[1:-1].replace("''", "'").rstrip()
        return s


class ScanState(enum.Enum):
    VALUE = "value"
    COMMENT = "comment"


def parse_value(remainder: str) -> KeywordEntry:
    """
    Sépare "valeur / commentaire". Chaque apostrophe bascule `in_string` (les
    apostrophes sont conservées); un '/' hors chaîne fait passer en COMMENT et
    n'est copié nulle part, y compris s'il apparaît déjà dans le commentaire.
    Rien n'est trimé.
    """
    state = ScanState.VALUE
    in_string = False
    out = {ScanState.VALUE: [], ScanState.COMMENT: []}

    for c in remainder:
        if c == "'":
            in_string = not in_string
        elif c == "/" and not in_string:
            state = ScanState.COMMENT
            continue
        out[state].append(c)

    return KeywordEntry("".join(out[ScanState.VALUE]), "".join(out[ScanState.COMMENT]))


class HeaderIndex:
    """Recherche de mots-clés dans une séquence ordonnée de cartes (première trouvée gagne)."""

    def __init__(self, records: Iterable):
        self.records: Sequence[str] = [str(r) for r in records]

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, key: str) -> bool:
        return self.find_record(key) is not None

    @staticmethod
    def _prefix(key: str) -> str:
        if len(key) > config.KEYWORD_WIDTH:
            raise ValueError(f"FITS keyword longer than {config.KEYWORD_WIDTH} chars: {key!r}")
        return (key.ljust(config.KEYWORD_WIDTH) + "=").upper()

    def find_record(self, key: str) -> Optional[str]:
        prefix = self._prefix(key)
        for rec in self.records:
            if rec[:len(prefix)].upper() == prefix:
                return rec[config.VALUE_OFFSET:]
        return None

    def get_value(self, key: str) -> Optional[KeywordEntry]:
        s = self.find_record(key)
        if s is None:
            return None
        return parse_value(s)

    def summary(self, keys: Sequence[str] = config.SUMMARY_KEYWORDS) -> Dict[str, Optional[str]]:
        out = {}
        for k in keys:
            entry = self.get_value(k)
            out[k] = entry.text if entry is not None else None
        return out
