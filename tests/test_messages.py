import dataclasses

import pytest

from simworld.messages import (
    Header,
    Object,
    Origin,
    Point,
    Pose,
    PoseStamped,
    Quaternion,
    RegisterResult,
    ServiceCallError,
)


def test_point_defaults_to_origin():
    assert Point() == Point(0.0, 0.0, 0.0)


def test_quaternion_defaults_to_identity():
    q = Quaternion()
    assert (q.x, q.y, q.z, q.w) == (0.0, 0.0, 0.0, 1.0)


def test_pose_is_immutable():
    pose = Pose()
    with pytest.raises(dataclasses.FrozenInstanceError):
        pose.position = Point(1.0, 2.0, 3.0)


def test_replace_round_trip_on_header():
    header = Header(frame_id="world", stamp=1.5)
    changed = dataclasses.replace(header, stamp=2.5)
    assert changed.frame_id == "world"
    assert changed.stamp == 2.5
    assert dataclasses.replace(changed, stamp=1.5) == header


def test_pose_stamped_equality_depends_on_contents():
    a = PoseStamped(Header("world"), Pose(Point(1.0, 0.0, 0.0)))
    b = PoseStamped(Header("world"), Pose(Point(1.0, 0.0, 0.0)))
    c = PoseStamped(Header("base"), Pose(Point(1.0, 0.0, 0.0)))
    assert a == b
    assert not a == c


def test_object_defaults_have_undefined_origins():
    obj = Object(name="cube")
    assert obj.primitive_origin == Origin.UNDEFINED
    assert obj.mesh_origin == Origin.UNDEFINED
    assert obj.primitive_poses == ()
    assert obj.mesh_poses == ()


@pytest.mark.parametrize("mode", list(Origin))
def test_origin_modes_round_trip_and_are_not_part_indices(mode):
    restored = Origin(int(mode))
    assert restored is mode
    assert int(restored) <= 0


@pytest.mark.parametrize("mode", list(Origin))
def test_object_keeps_given_origin_mode(mode):
    obj = Object(name="cube", primitive_origin=mode, mesh_origin=mode)
    assert obj.primitive_origin is mode
    assert obj.mesh_origin is mode


def test_register_results_are_distinct_and_round_trip():
    values = [r.value for r in RegisterResult]
    assert len(set(values)) == 3
    assert [RegisterResult(v) for v in values] == list(RegisterResult)
    assert RegisterResult["EXISTS"] is RegisterResult.EXISTS


def test_service_call_error_carries_message():
    err = ServiceCallError("service unavailable")
    assert str(err) == "service unavailable"
    assert err.args == ("service unavailable",)
    with pytest.raises(ServiceCallError, match="unavailable"):
        raise err