"""Client du plugin "Remote Control" de Stellarium.

Équivalent curl:
    curl -d "j2000=[-0.269,-0.757,0.594]" http://localhost:8090/api/main/view
"""

from __future__ import annotations

from typing import NamedTuple

import requests

from fits2stellarium import config
from fits2stellarium.coords import format_j2000
from fits2stellarium.logging_utils import dbg


class StellariumError(RuntimeError):
    pass


class ViewResult(NamedTuple):
    ok: bool
    status_code: int
    text: str


def send_view(vector, url: str = None, timeout: float = None) -> ViewResult:
    """POST du vecteur J2000. Pas de nouvel essai si le statut HTTP est en erreur."""
    url = url or config.STELLARIUM_URL
    timeout = config.HTTP_TIMEOUT_S if timeout is None else timeout
    data = {"j2000": format_j2000(vector)}

    dbg(f"POST {url} {data}")
    try:
        r = requests.post(url, data=data, timeout=timeout)
    except requests.RequestException as e:
        raise StellariumError(f"Stellarium injoignable ({url}): {e}") from e

    return ViewResult(200 <= r.status_code < 300, r.status_code, r.text)
