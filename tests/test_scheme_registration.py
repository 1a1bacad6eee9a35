from typing import ClassVar, Optional

import pytest
from pydantic import BaseModel

from apischeme.core.objects.base import WireObject
from apischeme.core.runtime.errors import (
    ConflictingKindError,
    NotAnAPIObjectError,
    RegistrationError,
    SchemeFrozenError,
)
from apischeme.core.runtime.object import APIObject, kind_name_of


class Pod(WireObject):
    name: Optional[str] = None


class Minion(WireObject):
    host_ip: Optional[str] = None


class OtherPod(WireObject):
    KIND: ClassVar[str] = "Pod"


class Renamed(WireObject):
    KIND: ClassVar[str] = "Widget"


class RenamedChild(Renamed):
    pass


class Helper(BaseModel):
    value: int = 0


def test_kind_derived_from_class_name():
    assert kind_name_of(Pod) == "Pod"


def test_kind_declared_explicitly_and_not_inherited():
    assert kind_name_of(Renamed) == "Widget"
    assert kind_name_of(RenamedChild) == "RenamedChild"


def test_add_known_types_registers_canonical(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod, Minion)
    assert empty_scheme.kind_for("v1beta1", Pod) == "Pod"
    assert empty_scheme.type_for("v1beta1", "Minion") is Minion


def test_kind_for_is_stable(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod)
    first = empty_scheme.kind_for("v1beta1", Pod)
    assert all(empty_scheme.kind_for("v1beta1", Pod) == first for _ in range(50))


def test_duplicate_identical_registration_is_noop(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod)
    empty_scheme.add_known_types("v1beta1", Pod)
    empty_scheme.add_known_type_with_name("v1beta1", "Pod", Pod)
    assert empty_scheme.known_types("v1beta1") == {"Pod": Pod}


def test_two_types_same_derived_kind_conflict(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod)
    with pytest.raises(ConflictingKindError) as ei:
        empty_scheme.add_known_types("v1beta1", OtherPod)

    assert ei.value.kind == "Pod"
    assert ei.value.existing is Pod
    assert ei.value.incoming is OtherPod
    # first registration is kept
    assert empty_scheme.type_for("v1beta1", "Pod") is Pod


def test_same_kind_in_different_versions_is_not_a_conflict(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod)
    empty_scheme.add_known_types("v1beta3", OtherPod)
    assert empty_scheme.type_for("v1beta1", "Pod") is Pod
    assert empty_scheme.type_for("v1beta3", "Pod") is OtherPod


def test_alias_conflicting_with_existing_kind(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod, Minion)
    with pytest.raises(ConflictingKindError):
        empty_scheme.add_known_type_with_name("v1beta1", "Pod", Minion)


def test_types_without_marker_rejected(empty_scheme):
    with pytest.raises(NotAnAPIObjectError):
        empty_scheme.add_known_types("v1beta1", Helper)
    with pytest.raises(NotAnAPIObjectError):
        empty_scheme.add_known_type_with_name("v1beta1", "Helper", Helper)
    with pytest.raises(NotAnAPIObjectError):
        empty_scheme.add_known_types("v1beta1", Pod())
    assert empty_scheme.versions() == []


def test_marker_subclass_without_field_schema_rejected(empty_scheme):
    class Plain(APIObject):
        pass

    with pytest.raises(NotAnAPIObjectError) as ei:
        empty_scheme.add_known_types("v1beta1", Plain)
    assert "schema" in ei.value.reason
    with pytest.raises(NotAnAPIObjectError):
        empty_scheme.add_known_type_with_name("v1beta1", "Plain", Plain)
    assert empty_scheme.versions() == []


def test_marker_error_is_a_type_error(empty_scheme):
    with pytest.raises(TypeError):
        empty_scheme.add_known_types("v1beta1", dict)


def test_empty_alias_name_rejected(empty_scheme):
    with pytest.raises(ValueError):
        empty_scheme.add_known_type_with_name("v1beta1", "", Pod)


def test_alias_does_not_change_canonical(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Minion)
    empty_scheme.add_known_type_with_name("v1beta1", "Node", Minion)

    assert empty_scheme.type_for("v1beta1", "Node") is Minion
    assert empty_scheme.kind_for("v1beta1", Minion) == "Minion"
    assert empty_scheme.aliases_for("v1beta1", Minion) == ["Node"]


def test_first_named_registration_is_canonical_until_primary(empty_scheme):
    empty_scheme.add_known_type_with_name("v1beta1", "Node", Minion)
    assert empty_scheme.kind_for("v1beta1", Minion) == "Node"

    empty_scheme.add_known_types("v1beta1", Minion)
    assert empty_scheme.kind_for("v1beta1", Minion) == "Minion"
    assert empty_scheme.type_for("v1beta1", "Node") is Minion


def test_frozen_scheme_rejects_mutation(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod)
    empty_scheme.freeze()

    assert empty_scheme.frozen
    with pytest.raises(SchemeFrozenError):
        empty_scheme.add_known_types("v1beta1", Minion)
    with pytest.raises(SchemeFrozenError):
        empty_scheme.add_known_type_with_name("v1beta1", "Node", Pod)
    assert not empty_scheme.recognizes("v1beta1", "Minion")


def test_registration_errors_share_base(empty_scheme):
    empty_scheme.add_known_types("v1beta1", Pod)
    with pytest.raises(RegistrationError):
        empty_scheme.add_known_types("v1beta1", OtherPod)
