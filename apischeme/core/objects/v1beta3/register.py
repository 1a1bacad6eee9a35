from __future__ import annotations

from apischeme.core.runtime.codec import Codec, codec_for
from apischeme.core.runtime.scheme import Scheme

from . import types as t

VERSION = "v1beta3"

KNOWN_TYPES = (
    t.Pod,
    t.PodList,
    t.Node,
    t.NodeList,
    t.Service,
    t.ServiceList,
    t.Event,
    t.EventList,
    t.Status,
)

# Legacy names still decode; encoding always uses Node/NodeList.
ALIASES = {
    "Minion": t.Node,
    "MinionList": t.NodeList,
}


def add_to_scheme(scheme: Scheme) -> None:
    scheme.add_known_types(VERSION, *KNOWN_TYPES)
    for kind, typ in ALIASES.items():
        scheme.add_known_type_with_name(VERSION, kind, typ)


def codec(scheme: Scheme) -> Codec:
    return codec_for(scheme, VERSION)
