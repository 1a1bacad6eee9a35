from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import Field

from apischeme.core.objects.base import WireModel, WireObject


# ------------------------------------------------------------
# Shared fields
# ------------------------------------------------------------
class JSONBase(WireObject):
    """Flat object metadata carried by every v1beta1 object."""

    id: Optional[str] = None
    uid: Optional[str] = None
    creation_timestamp: Optional[datetime] = None
    self_link: Optional[str] = None
    resource_version: Optional[int] = None
    namespace: Optional[str] = None
    annotations: Optional[Dict[str, str]] = None


class ObjectReference(WireModel):
    kind: Optional[str] = None
    namespace: Optional[str] = None
    id: Optional[str] = None
    uid: Optional[str] = None
    api_version: Optional[str] = None
    resource_version: Optional[str] = None
    field_path: Optional[str] = None


# ------------------------------------------------------------
# Containers / manifests
# ------------------------------------------------------------
class Port(WireModel):
    name: Optional[str] = None
    host_port: Optional[int] = None
    container_port: int
    protocol: Optional[str] = None


class EnvVar(WireModel):
    name: str
    value: Optional[str] = None


class Container(WireModel):
    name: str
    image: str
    command: Optional[list[str]] = None
    working_dir: Optional[str] = None
    ports: Optional[list[Port]] = None
    env: Optional[list[EnvVar]] = None
    image_pull_policy: Optional[str] = None


class ContainerManifest(WireObject):
    version: str
    id: Optional[str] = None
    uuid: Optional[str] = None
    containers: list[Container] = Field(default_factory=list)
    restart_policy: Optional[Dict[str, Dict[str, Any]]] = None
    dns_policy: Optional[str] = None


class ContainerManifestList(JSONBase):
    items: list[ContainerManifest] = Field(default_factory=list)


# ------------------------------------------------------------
# Pods
# ------------------------------------------------------------
class PodState(WireModel):
    manifest: Optional[ContainerManifest] = None
    status: Optional[str] = None
    message: Optional[str] = None
    host: Optional[str] = None
    host_ip: Optional[str] = None
    pod_ip: Optional[str] = None


class Pod(JSONBase):
    labels: Optional[Dict[str, str]] = None
    desired_state: Optional[PodState] = None
    current_state: Optional[PodState] = None
    node_selector: Optional[Dict[str, str]] = None


class PodStatusResult(JSONBase):
    state: Optional[PodState] = None


class PodList(JSONBase):
    items: list[Pod] = Field(default_factory=list)


class PodSpec(WireModel):
    containers: list[Container] = Field(default_factory=list)
    restart_policy: Optional[Dict[str, Dict[str, Any]]] = None
    dns_policy: Optional[str] = None
    node_selector: Optional[Dict[str, str]] = None
    host: Optional[str] = None


class BoundPod(JSONBase):
    spec: Optional[PodSpec] = None


class BoundPods(JSONBase):
    host: Optional[str] = None
    items: list[BoundPod] = Field(default_factory=list)


# ------------------------------------------------------------
# Replication controllers
# ------------------------------------------------------------
class PodTemplate(WireModel):
    desired_state: Optional[PodState] = None
    labels: Optional[Dict[str, str]] = None


class ReplicationControllerState(WireModel):
    replicas: int = 0
    replica_selector: Optional[Dict[str, str]] = None
    pod_template: Optional[PodTemplate] = None


class ReplicationController(JSONBase):
    desired_state: Optional[ReplicationControllerState] = None
    current_state: Optional[ReplicationControllerState] = None
    labels: Optional[Dict[str, str]] = None


class ReplicationControllerList(JSONBase):
    items: list[ReplicationController] = Field(default_factory=list)


# ------------------------------------------------------------
# Services / endpoints
# ------------------------------------------------------------
class Service(JSONBase):
    port: int
    protocol: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    selector: Optional[Dict[str, str]] = None
    container_port: Optional[Union[int, str]] = None
    portal_ip: Optional[str] = None
    create_external_load_balancer: Optional[bool] = None
    session_affinity: Optional[str] = None


class ServiceList(JSONBase):
    items: list[Service] = Field(default_factory=list)


class Endpoints(JSONBase):
    endpoints: list[str] = Field(default_factory=list)


class EndpointsList(JSONBase):
    items: list[Endpoints] = Field(default_factory=list)


# ------------------------------------------------------------
# Minions (renamed to Node in later versions)
# ------------------------------------------------------------
class NodeResources(WireModel):
    capacity: Optional[Dict[str, Union[int, str]]] = None


class Minion(JSONBase):
    host_ip: Optional[str] = None
    resources: Optional[NodeResources] = None
    labels: Optional[Dict[str, str]] = None
    unschedulable: Optional[bool] = None


class MinionList(JSONBase):
    items: list[Minion] = Field(default_factory=list)


class Binding(JSONBase):
    pod_id: str
    host: str


# ------------------------------------------------------------
# Status / operations / events
# ------------------------------------------------------------
class StatusCause(WireModel):
    reason: Optional[str] = None
    message: Optional[str] = None
    field: Optional[str] = None


class StatusDetails(WireModel):
    id: Optional[str] = None
    kind: Optional[str] = None
    causes: Optional[list[StatusCause]] = None
    retry_after_seconds: Optional[int] = None


class Status(JSONBase):
    status: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    details: Optional[StatusDetails] = None
    code: Optional[int] = None


class ServerOp(JSONBase):
    pass


class ServerOpList(JSONBase):
    items: list[ServerOp] = Field(default_factory=list)


class Event(JSONBase):
    involved_object: Optional[ObjectReference] = None
    status: Optional[str] = None
    reason: Optional[str] = None
    message: Optional[str] = None
    source: Optional[str] = None
    timestamp: Optional[datetime] = None


class EventList(JSONBase):
    items: list[Event] = Field(default_factory=list)


class List(JSONBase):
    """Heterogeneous list; items stay as raw encoded objects."""

    items: list[Dict[str, Any]] = Field(default_factory=list)


# ------------------------------------------------------------
# Limits / quotas
# ------------------------------------------------------------
class LimitRangeItem(WireModel):
    type: Optional[str] = None
    max: Optional[Dict[str, Union[int, str]]] = None
    min: Optional[Dict[str, Union[int, str]]] = None


class LimitRangeSpec(WireModel):
    limits: list[LimitRangeItem] = Field(default_factory=list)


class LimitRange(JSONBase):
    spec: Optional[LimitRangeSpec] = None


class LimitRangeList(JSONBase):
    items: list[LimitRange] = Field(default_factory=list)


class ResourceQuotaSpec(WireModel):
    hard: Optional[Dict[str, Union[int, str]]] = None


class ResourceQuotaStatus(WireModel):
    hard: Optional[Dict[str, Union[int, str]]] = None
    used: Optional[Dict[str, Union[int, str]]] = None


class ResourceQuota(JSONBase):
    spec: Optional[ResourceQuotaSpec] = None
    status: Optional[ResourceQuotaStatus] = None


class ResourceQuotaList(JSONBase):
    items: list[ResourceQuota] = Field(default_factory=list)


class ResourceQuotaUsage(JSONBase):
    status: Optional[ResourceQuotaStatus] = None
