"""Journalisation console (bilingue).

FR: Centraliser les messages [INFO]/[WARN]/[ERROR]/[DBG].
EN: Centralize [INFO]/[WARN]/[ERROR]/[DBG] console messages.
"""

from fits2stellarium import config


def info(msg: str) -> None:
    print(f"[INFO] {msg}")

def warn(msg: str) -> None:
    print(f"[WARN] {msg}")

def error(msg: str) -> None:
    print(f"[ERROR] {msg}")

def dbg(msg: str) -> None:
    if config.DEBUG:
        print(f"[DBG] {msg}")
