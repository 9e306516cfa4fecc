import pytest

from run_profile.core.config import EncoderSettings
from run_profile.encoder.access import Access
from run_profile.encoder.flags import EdgeFlags
from run_profile.encoder.models import (
    PriorityCode,
    RouteNetwork,
    WayTags,
    FERRY_SPEED,
    MEAN_SPEED,
    SLOW_SPEED,
)
from run_profile.encoder.run import RunFlagEncoder

from conftest import make_edge


def test_version_and_name(encoder):
    assert encoder.get_version() == 5
    assert str(encoder) == "run"


@pytest.mark.parametrize("feature", ["fastest", "shortest", "short_fastest", "priority"])
def test_supports_priority_weighting(encoder, feature):
    assert encoder.supports(feature)


def test_does_not_support_unknown_weighting(encoder):
    assert not encoder.supports("curvature")


def test_from_properties():
    encoder = RunFlagEncoder.from_properties(
        {"speed_bits": "5", "speed_factor": "0.5", "block_fords": "false"}
    )
    assert encoder.avg_speed_enc.bits == 5
    assert encoder.avg_speed_enc.factor == 0.5
    assert encoder.settings.block_fords is False


def test_handle_way_tags_writes_access_speed_and_priority(encoder):
    flags = encoder.handle_way_tags(WayTags(highway="residential"), EdgeFlags())

    assert encoder.is_forward(flags)
    assert encoder.is_backward(flags)
    assert encoder.get_speed(flags) == MEAN_SPEED
    assert encoder.get_priority(flags) is PriorityCode.PREFER


def test_handle_way_tags_uses_route_network(encoder):
    flags = encoder.handle_way_tags(
        WayTags(highway="primary"), EdgeFlags(), RouteNetwork.REGIONAL
    )
    assert encoder.get_priority(flags) is PriorityCode.VERY_NICE


def test_inaccessible_way_leaves_flags_empty(encoder):
    flags = encoder.handle_way_tags(WayTags(highway="motorway"), EdgeFlags())
    assert flags == EdgeFlags()


@pytest.mark.parametrize("tags,expected", [
    ({"highway": "path"}, Access.WAY),
    ({"highway": "motorway"}, Access.CAN_SKIP),
    ({"highway": "motorway", "foot": "yes"}, Access.WAY),
    ({"highway": "path", "access": "private"}, Access.CAN_SKIP),
    ({"highway": "path", "foot": "no"}, Access.CAN_SKIP),
    ({"highway": "primary", "motorroad": "yes"}, Access.CAN_SKIP),
    ({"highway": "motorway", "sidewalk": "right"}, Access.WAY),
    ({"highway": "track", "ford": "yes"}, Access.CAN_SKIP),
    ({"highway": "path", "sac_scale": "mountain_hiking"}, Access.WAY),
    ({"highway": "path", "sac_scale": "difficult_alpine_hiking"}, Access.CAN_SKIP),
    ({"route": "ferry"}, Access.FERRY),
    ({"route": "ferry", "foot": "no"}, Access.CAN_SKIP),
    ({"railway": "platform"}, Access.WAY),
    ({"man_made": "pier", "access": "private"}, Access.CAN_SKIP),
    ({"building": "yes"}, Access.CAN_SKIP),
])
def test_access(encoder, tags, expected):
    assert encoder.get_access(WayTags(tags)) is expected


def test_fords_allowed_when_not_blocked():
    encoder = RunFlagEncoder(EncoderSettings(block_fords=False))
    assert encoder.get_access(WayTags(highway="track", ford="yes")) is Access.WAY


@pytest.mark.parametrize("tags,expected", [
    ({"route": "ferry"}, FERRY_SPEED),
    ({"highway": "path", "sac_scale": "hiking"}, MEAN_SPEED),
    ({"highway": "path", "sac_scale": "alpine_hiking"}, SLOW_SPEED),
    ({"highway": "footway"}, MEAN_SPEED),
])
def test_base_speed(encoder, tags, expected):
    flags = encoder.handle_way_tags(WayTags(tags), EdgeFlags())
    assert encoder.get_speed(flags) == expected


def test_encode_edge_runs_tags_then_slope(encoder):
    edge = make_edge(100.0, 101.0, distance=100.0)

    encoder.encode_edge(WayTags(highway="path", bicycle="designated"), edge)

    assert encoder.is_forward(edge.flags)
    assert encoder.get_speed(edge.flags) == 5.0
    assert encoder.get_priority(edge.flags) is PriorityCode.AVOID_IF_POSSIBLE


def test_speed_and_priority_are_independent(encoder):
    way = WayTags(highway="primary", sidewalk="no")
    flat = encoder.encode_edge(way, make_edge(10.0, 10.0))
    steep = encoder.encode_edge(way, make_edge(10.0, 40.0))

    assert encoder.get_priority(flat.flags) is encoder.get_priority(steep.flags)
    assert encoder.get_speed(flat.flags) != encoder.get_speed(steep.flags)
