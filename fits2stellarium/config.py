"""Configuration centralisée.

FR: Constantes du format FITS + réglages surchargeables par variables d'environnement.
EN: FITS format constants + settings overridable through environment variables.
"""

import os

VERSION = "0.1.0"

# Format FITS (fixes, non configurables)
BLOCK_SIZE = 2880     # octets par bloc
RECORD_WIDTH = 80     # caractères par enregistrement (carte)
KEYWORD_WIDTH = 8
VALUE_OFFSET = 10     # "KEYWORD =" + espace

# Plafond de blocs lus avant d'abandonner la recherche de END.
# Les headers réels peuvent dépasser 10 blocs: augmenter au besoin.
MAX_HEADER_BLOCKS = int(os.environ.get("FITS2STELLARIUM_MAX_BLOCKS", "10"))

# Plugin "Remote Control" de Stellarium
STELLARIUM_URL = os.environ.get("FITS2STELLARIUM_URL", "http://localhost:8090/api/main/view")
HTTP_TIMEOUT_S = float(os.environ.get("FITS2STELLARIUM_TIMEOUT", "30"))

# Pause avant la sortie (laisse la console lisible)
PAUSE_S = float(os.environ.get("FITS2STELLARIUM_PAUSE", "2"))

DEBUG = os.environ.get("FITS2STELLARIUM_DEBUG", "").strip().lower() in ("1", "true", "yes")

SUMMARY_KEYWORDS = ("NAXIS1", "NAXIS2", "INSTRUME", "RA", "DEC")
