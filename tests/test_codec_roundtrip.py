import json
from datetime import datetime, timezone

import pytest

from apischeme.core.objects.v1beta1 import types as v1
from apischeme.core.objects.v1beta3 import types as v3
from apischeme.core.runtime.codec import codec_for, data_version_and_kind


def _pod():
    return v1.Pod(
        id="web-1",
        namespace="default",
        creation_timestamp=datetime(2014, 10, 1, 12, 0, tzinfo=timezone.utc),
        resource_version=7,
        labels={"app": "web"},
        desired_state=v1.PodState(
            manifest=v1.ContainerManifest(
                version="v1beta1",
                id="web-1",
                containers=[
                    v1.Container(
                        name="nginx",
                        image="nginx:1.7",
                        ports=[v1.Port(container_port=80, protocol="TCP")],
                    )
                ],
            )
        ),
    )


V1_SAMPLES = [
    _pod(),
    v1.PodList(items=[_pod(), v1.Pod(id="web-2")]),
    v1.Service(id="frontend", port=80, selector={"app": "web"}, container_port="http"),
    v1.Minion(id="node-1", host_ip="10.0.0.1", resources=v1.NodeResources(capacity={"cpu": 4, "memory": "8Gi"})),
    v1.Binding(pod_id="web-1", host="node-1"),
    v1.Status(status="Failure", code=404, reason="NotFound", details=v1.StatusDetails(id="web-1", kind="pods")),
    v1.Event(involved_object=v1.ObjectReference(kind="Pod", id="web-1", api_version="v1beta1"), reason="scheduled"),
    v1.List(items=[{"kind": "Pod", "apiVersion": "v1beta1", "id": "x"}]),
    v1.ResourceQuota(id="quota", spec=v1.ResourceQuotaSpec(hard={"pods": 10, "memory": "1Gi"})),
    v1.LimitRange(spec=v1.LimitRangeSpec(limits=[v1.LimitRangeItem(type="Container", max={"cpu": "2"})])),
    v1.ServerOp(id="op-1"),
]


@pytest.mark.parametrize("obj", V1_SAMPLES, ids=lambda o: type(o).__name__)
def test_v1beta1_roundtrip(scheme, obj):
    codec = codec_for(scheme, "v1beta1")
    assert codec.decode(codec.encode(obj)) == obj


def test_v1beta3_roundtrip(scheme):
    codec = codec_for(scheme, "v1beta3")
    node = v3.Node(
        metadata=v3.ObjectMeta(name="node-1", labels={"zone": "a"}),
        status=v3.NodeStatus(phase="Running", capacity={"cpu": 4}),
    )
    svc = v3.Service(metadata=v3.ObjectMeta(name="frontend"), spec=v3.ServiceSpec(port=80))
    for obj in (node, v3.NodeList(items=[node]), svc):
        assert codec.decode(codec.encode(obj)) == obj


def test_encoded_payload_carries_metadata(scheme):
    codec = codec_for(scheme, "v1beta1")
    data = codec.encode(_pod())

    assert data_version_and_kind(data) == ("v1beta1", "Pod")

    body = json.loads(data)
    assert body["apiVersion"] == "v1beta1"
    assert body["kind"] == "Pod"
    assert body["desiredState"]["manifest"]["containers"][0]["image"] == "nginx:1.7"
    assert body["creationTimestamp"].startswith("2014-10-01T12:00:00")
    # None fields are omitted
    assert "uid" not in body


def test_encoding_is_stable(scheme):
    codec = codec_for(scheme, "v1beta1")
    assert codec.encode(_pod()) == codec.encode(_pod())


def test_decode_ignores_unknown_fields(scheme):
    codec = codec_for(scheme, "v1beta1")
    obj = codec.decode(b'{"apiVersion":"v1beta1","kind":"Binding","podID":"x","podId":"p","host":"h"}')
    assert obj == v1.Binding(pod_id="p", host="h")


def test_decode_from_dict_matches_decode(scheme):
    codec = codec_for(scheme, "v1beta1")
    d = codec.encode_to_dict(v1.Endpoints(id="svc", endpoints=["10.0.0.1:80"]))
    assert codec.decode_from_dict(d) == codec.decode(json.dumps(d))
