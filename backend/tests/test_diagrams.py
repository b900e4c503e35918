import pytest

from cranebeam import (
    DEFAULT_SINGLE_GIRDER,
    BeamInputs,
    calculate_beam_properties,
    generate_diagram_data,
)


@pytest.fixture
def girder():
    return DEFAULT_SINGLE_GIRDER, calculate_beam_properties(DEFAULT_SINGLE_GIRDER)


def test_stations_cover_the_span(girder):
    inputs, results = girder
    points = generate_diagram_data(inputs, results)
    assert len(points) == 101
    assert points[0].x == 0.0
    assert points[-1].x == pytest.approx(inputs.L)


def test_support_conditions(girder):
    inputs, results = girder
    points = generate_diagram_data(inputs, results)
    R = results.P / 2 + results.q * inputs.L / 2
    assert points[0].shear == pytest.approx(R)
    assert points[0].moment == 0.0
    assert points[-1].moment == pytest.approx(0.0, abs=1e-6)
    assert points[-1].shear == pytest.approx(-R)


def test_midspan_moment_equals_design_moment(girder):
    inputs, results = girder
    points = generate_diagram_data(inputs, results)
    assert points[50].x == pytest.approx(inputs.L / 2)
    assert points[50].moment == pytest.approx(results.M_x)
    assert max(p.moment for p in points) == pytest.approx(results.M_x)


def test_shear_jumps_by_point_load_at_midspan(girder):
    inputs, results = girder
    points = generate_diagram_data(inputs, results, num_points=11)
    dx = inputs.L / 10
    before = points[4].shear - results.q * dx
    assert before - points[5].shear == pytest.approx(results.P)


def test_unloaded_beam_is_flat():
    results = calculate_beam_properties(BeamInputs(L=500))
    points = generate_diagram_data(BeamInputs(L=500), results, num_points=5)
    assert all(p.shear == 0 and p.moment == 0 for p in points)
