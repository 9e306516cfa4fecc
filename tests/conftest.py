import pytest

from run_profile.core.config import EncoderSettings
from run_profile.encoder.geometry import Edge, PointList
from run_profile.encoder.run import RunFlagEncoder


@pytest.fixture
def settings():
    return EncoderSettings()


@pytest.fixture
def encoder(settings):
    return RunFlagEncoder(settings)


def make_edge(start_ele, end_ele, distance=100.0, mid_ele=None):
    """Edge with three samples and an explicit planar distance."""
    if mid_ele is None and start_ele is not None and end_ele is not None:
        mid_ele = (start_ele + end_ele) / 2
    points = [
        (46.0, 7.0, start_ele),
        (46.0005, 7.0, mid_ele),
        (46.001, 7.0, end_ele),
    ]
    points = [p if p[2] is not None else p[:2] for p in points]
    return Edge(PointList(points), distance)
