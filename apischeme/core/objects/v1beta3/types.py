from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Dict, Optional, Union

from pydantic import Field

from apischeme.core.objects.base import WireModel, WireObject


class ObjectMeta(WireModel):
    name: Optional[str] = None
    generate_name: Optional[str] = None
    namespace: Optional[str] = None
    self_link: Optional[str] = None
    uid: Optional[str] = None
    resource_version: Optional[str] = None
    creation_timestamp: Optional[datetime] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None


class ListMeta(WireModel):
    self_link: Optional[str] = None
    resource_version: Optional[str] = None


class ObjectReference(WireModel):
    kind: Optional[str] = None
    namespace: Optional[str] = None
    name: Optional[str] = None
    uid: Optional[str] = None
    api_version: Optional[str] = None
    resource_version: Optional[str] = None
    field_path: Optional[str] = None


# ------------------------------------------------------------
# Pods
# ------------------------------------------------------------
class ContainerPort(WireModel):
    name: Optional[str] = None
    container_port: int
    protocol: Optional[str] = None


class Container(WireModel):
    name: str
    image: str
    command: Optional[list[str]] = None
    ports: Optional[list[ContainerPort]] = None


class PodSpec(WireModel):
    containers: list[Container] = Field(default_factory=list)
    restart_policy: Optional[str] = None
    node_selector: Optional[Dict[str, str]] = None
    host: Optional[str] = None


class PodStatus(WireModel):
    phase: Optional[str] = None
    host: Optional[str] = None
    host_ip: Optional[str] = None
    pod_ip: Optional[str] = None


class Pod(WireObject):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: Optional[PodSpec] = None
    status: Optional[PodStatus] = None


class PodList(WireObject):
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[Pod] = Field(default_factory=list)


# ------------------------------------------------------------
# Nodes (formerly Minions)
# ------------------------------------------------------------
class NodeSpec(WireModel):
    pod_cidr: Optional[str] = None
    external_id: Optional[str] = None
    unschedulable: Optional[bool] = None


class NodeStatus(WireModel):
    phase: Optional[str] = None
    host_ip: Optional[str] = None
    capacity: Optional[Dict[str, Union[int, str]]] = None


class Node(WireObject):
    KIND: ClassVar[str] = "Node"

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: Optional[NodeSpec] = None
    status: Optional[NodeStatus] = None


class NodeList(WireObject):
    KIND: ClassVar[str] = "NodeList"

    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[Node] = Field(default_factory=list)


# ------------------------------------------------------------
# Services
# ------------------------------------------------------------
class ServiceSpec(WireModel):
    port: int
    protocol: Optional[str] = None
    selector: Optional[Dict[str, str]] = None
    portal_ip: Optional[str] = None
    container_port: Optional[Union[int, str]] = None
    session_affinity: Optional[str] = None


class Service(WireObject):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: ServiceSpec


class ServiceList(WireObject):
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[Service] = Field(default_factory=list)


# ------------------------------------------------------------
# Events / status
# ------------------------------------------------------------
class EventSource(WireModel):
    component: Optional[str] = None
    host: Optional[str] = None


class Event(WireObject):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    involved_object: Optional[ObjectReference] = None
    reason: Optional[str] = None
    message: Optional[str] = None
    source: Optional[EventSource] = None
    first_timestamp: Optional[datetime] = None
    last_timestamp: Optional[datetime] = None
    count: Optional[int] = None


class EventList(WireObject):
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[Event] = Field(default_factory=list)


class Status(WireObject):
    metadata: ListMeta = Field(default_factory=ListMeta)
    status: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    code: Optional[int] = None
