from __future__ import annotations

from apischeme.core.runtime.codec import Codec, codec_for
from apischeme.core.runtime.scheme import Scheme

from . import types as t

VERSION = "v1beta1"

KNOWN_TYPES = (
    t.Pod,
    t.PodStatusResult,
    t.PodList,
    t.ReplicationController,
    t.ReplicationControllerList,
    t.Service,
    t.ServiceList,
    t.Endpoints,
    t.EndpointsList,
    t.Minion,
    t.MinionList,
    t.Binding,
    t.Status,
    t.ServerOp,
    t.ServerOpList,
    t.Event,
    t.EventList,
    t.ContainerManifest,
    t.ContainerManifestList,
    t.BoundPod,
    t.BoundPods,
    t.List,
    t.LimitRange,
    t.LimitRangeList,
    t.ResourceQuota,
    t.ResourceQuotaList,
    t.ResourceQuotaUsage,
)

# Future names are accepted on decode; encoding keeps the old names.
ALIASES = {
    "Node": t.Minion,
    "NodeList": t.MinionList,
    "Operation": t.ServerOp,
    "OperationList": t.ServerOpList,
}


def add_to_scheme(scheme: Scheme) -> None:
    scheme.add_known_types(VERSION, *KNOWN_TYPES)
    for kind, typ in ALIASES.items():
        scheme.add_known_type_with_name(VERSION, kind, typ)


def codec(scheme: Scheme) -> Codec:
    return codec_for(scheme, VERSION)
