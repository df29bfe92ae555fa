#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Pointe Stellarium sur le RA/DEC lu dans le header d'un fichier FITS.

Usage:
    point-stellarium <fichier.fits>

Variables d'environnement: FITS2STELLARIUM_URL, FITS2STELLARIUM_MAX_BLOCKS,
FITS2STELLARIUM_TIMEOUT, FITS2STELLARIUM_PAUSE, FITS2STELLARIUM_DEBUG.
"""

import sys
import time
from pathlib import Path

from fits2stellarium import config
from fits2stellarium.coords import ParseFailure, format_j2000, parse_degrees, radec_to_j2000
from fits2stellarium.fits_utils import HeaderIndex, read_header_file
from fits2stellarium.logging_utils import error, info, warn
from fits2stellarium.stellarium import StellariumError, send_view


def print_usage():
    print("Send View Post command to Stellarium with the RA/DEC Value from a Fits file")
    print("Commandline Parameter: Path to Fits File")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print_usage()
        return 0

    fits_path = Path(args[0])
    if not fits_path.is_file():
        error(f"File {args[0]} does not exist.")
        return 1

    info(f"Reading {fits_path.resolve()}")
    header = HeaderIndex(read_header_file(fits_path, max_blocks=config.MAX_HEADER_BLOCKS))
    for key, value in header.summary().items():
        print(f"{key} {value if value is not None else ''}")

    coords = {}
    for key in ("RA", "DEC"):
        entry = header.get_value(key)
        if entry is None:
            error(f"No {key} value found in fits file")
            return 1
        parsed = parse_degrees(entry.value)
        if isinstance(parsed, ParseFailure):
            error(f"Invalid {key} value in fits file: {parsed.reason}")
            return 1
        coords[key] = parsed.value

    vector = radec_to_j2000(coords["RA"], coords["DEC"])
    info(f"Sending Stellarium to {format_j2000(vector)}")
    try:
        result = send_view(vector)
    except StellariumError as e:
        error(str(e))
        time.sleep(config.PAUSE_S)
        return 1

    if result.ok:
        print(result.text)
    else:
        warn(f"Error: {result.status_code}")

    time.sleep(config.PAUSE_S)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
