import pytest

from run_profile.core.config import EncoderSettings
from run_profile.encoder.models import PriorityCode, RouteNetwork, WayTags
from run_profile.encoder.priority import classify, collect, handle_priority


def test_untagged_way_gets_default_priority(settings):
    assert classify(WayTags(), settings=settings) is PriorityCode.UNCHANGED


def test_default_priority_is_configurable():
    settings = EncoderSettings(default_priority="prefer")
    assert classify(WayTags(), settings=settings) is PriorityCode.PREFER


@pytest.mark.parametrize("network,expected", [
    (RouteNetwork.INTERNATIONAL, PriorityCode.BEST),
    (RouteNetwork.NATIONAL, PriorityCode.BEST),
    (RouteNetwork.REGIONAL, PriorityCode.VERY_NICE),
    (RouteNetwork.LOCAL, PriorityCode.VERY_NICE),
    (RouteNetwork.OTHER, PriorityCode.PREFER),
])
def test_route_network_vote(settings, network, expected):
    way = WayTags(highway="track")
    assert handle_priority(way, network, settings) is expected


def test_route_network_outranks_busy_road(settings):
    way = WayTags(highway="primary", sidewalk="no")
    assert handle_priority(way, RouteNetwork.INTERNATIONAL, settings) is PriorityCode.BEST


def test_route_network_read_from_tag_when_not_given():
    assert classify(WayTags(route_network="nwn")) is PriorityCode.BEST
    assert classify(WayTags(route_network="national")) is PriorityCode.BEST


@pytest.mark.parametrize("tags", [
    {"foot": "designated"},
    {"foot": "designated", "highway": "primary", "sidewalk": "no"},
    {"foot": "designated", "highway": "residential", "bicycle": "designated"},
    {"foot": "designated", "maxspeed": "100"},
])
def test_foot_designated_wins_over_tag_heuristics(tags):
    assert classify(WayTags(tags)) is PriorityCode.PREFER


@pytest.mark.parametrize("tags,expected", [
    ({"highway": "residential"}, PriorityCode.PREFER),
    ({"highway": "track"}, PriorityCode.PREFER),
    ({"highway": "unclassified", "maxspeed": "20"}, PriorityCode.PREFER),
    ({"highway": "unclassified", "maxspeed": "30"}, PriorityCode.UNCHANGED),
    ({"highway": "unclassified", "maxspeed": "70"}, PriorityCode.REACH_DEST),
    ({"highway": "primary"}, PriorityCode.REACH_DEST),
    ({"highway": "primary", "sidewalk": "no"}, PriorityCode.WORST),
    ({"highway": "trunk", "sidewalk": "none"}, PriorityCode.WORST),
    ({"highway": "secondary", "sidewalk": "both"}, PriorityCode.REACH_DEST),
])
def test_highway_and_maxspeed_votes(tags, expected):
    assert classify(WayTags(tags)) is expected


def test_safe_highway_is_not_rechecked_as_busy():
    way = WayTags(highway="residential", maxspeed="60", sidewalk="no")
    assert classify(way) is PriorityCode.PREFER


def test_tunnel_without_sidewalk_downgrades_safe_vote():
    way = WayTags(highway="footway", tunnel="yes", sidewalk="none")
    assert classify(way) is PriorityCode.REACH_DEST


def test_tunnel_with_sidewalk_is_unchanged():
    way = WayTags(highway="footway", tunnel="yes")
    assert classify(way) is PriorityCode.UNCHANGED


def test_tunnel_refines_the_safe_vote_in_place(settings):
    votes = {}
    collect(WayTags(highway="path", tunnel="yes", sidewalk="no"), votes, settings)
    assert votes == {40.0: PriorityCode.REACH_DEST}


def test_cycleway_vote_coexists_with_highway_vote(settings):
    votes = {}
    collect(WayTags(highway="path", bicycle="designated"), votes, settings)
    assert votes == {40.0: PriorityCode.PREFER, 44.0: PriorityCode.AVOID_IF_POSSIBLE}


@pytest.mark.parametrize("tags,expected", [
    ({"highway": "path", "bicycle": "designated"}, PriorityCode.AVOID_IF_POSSIBLE),
    ({"highway": "cycleway", "bicycle": "official"}, PriorityCode.AVOID_IF_POSSIBLE),
    ({"highway": "primary", "bicycle": "official"}, PriorityCode.REACH_DEST),
    ({"highway": "path", "bicycle": "yes"}, PriorityCode.PREFER),
])
def test_cycleway_resolution(tags, expected):
    assert classify(WayTags(tags)) is expected


def test_custom_highway_sets():
    settings = EncoderSettings(safe_highways=["primary"], avoid_highways=["path"])
    assert classify(WayTags(highway="primary"), settings=settings) is PriorityCode.PREFER
    assert classify(WayTags(highway="path"), settings=settings) is PriorityCode.REACH_DEST


def test_smaller_directional_limit_avoids_busy_road_vote():
    way = WayTags({"highway": "unclassified", "maxspeed:forward": "30", "maxspeed:backward": "70"})
    assert classify(way) is PriorityCode.UNCHANGED
