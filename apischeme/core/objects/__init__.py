from __future__ import annotations

from typing import Callable, Dict

from apischeme.core.runtime.scheme import Scheme

from . import v1beta1, v1beta3

# version -> registration hook; order is the order versions are installed
INSTALLERS: Dict[str, Callable[[Scheme], None]] = {
    v1beta1.VERSION: v1beta1.add_to_scheme,
    v1beta3.VERSION: v1beta3.add_to_scheme,
}


def build_scheme() -> Scheme:
    """Build the process scheme: register every wire version, then freeze it."""
    scheme = Scheme()
    for install in INSTALLERS.values():
        install(scheme)
    return scheme.freeze()
