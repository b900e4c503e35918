import pytest

from cranebeam import DEFAULT_SINGLE_GIRDER, DEFAULT_V_BEAM, BeamInputs, CheckStatus, assess_geometric_balance
from cranebeam.balance import assess


def _by_key(items):
    return {item.key: item for item in items}


def test_default_girder_is_too_deep_and_too_wide():
    items = _by_key(assess_geometric_balance(DEFAULT_SINGLE_GIRDER, "single-girder"))
    # No end carriage entered: no A check
    assert list(items) == ["H", "b"]

    H = items["H"]
    assert H.actual == pytest.approx(90.0)
    assert H.minimum == pytest.approx(50.0)
    assert H.maximum == pytest.approx(800 / 12)
    assert H.status is CheckStatus.FAIL
    assert H.adjustment_pct == pytest.approx(-(90 - 800 / 12) / 90 * 100)

    b = items["b"]
    assert b.status is CheckStatus.FAIL
    assert b.adjustment_pct == pytest.approx(-25.0)


def test_well_proportioned_beam_passes():
    beam = BeamInputs(b=250, h=600, L=800, A=120)
    items = assess_geometric_balance(beam, "single-girder")
    assert [i.key for i in items] == ["H", "b", "A"]
    assert all(i.status is CheckStatus.PASS for i in items)
    assert all(i.adjustment_pct == 0.0 for i in items)


def test_shallow_beam_asks_for_increase():
    beam = BeamInputs(b=200, h=400, L=800)
    H = _by_key(assess_geometric_balance(beam, "i-beam"))["H"]
    assert H.status is CheckStatus.FAIL
    assert H.adjustment_pct == pytest.approx((50 - 40) / 40 * 100)


def test_zero_dimension_fails_with_full_adjustment():
    item = assess("H", 0.0, 800, 1 / 16, 1 / 12)
    assert item.status is CheckStatus.FAIL
    assert item.adjustment_pct == 100.0


def test_total_height_override():
    items = _by_key(assess_geometric_balance(DEFAULT_SINGLE_GIRDER, "single-girder", total_height_mm=600))
    assert items["H"].status is CheckStatus.PASS


def test_v_beam_checks_its_own_plates():
    items = _by_key(assess_geometric_balance(DEFAULT_V_BEAM, "v-beam"))
    assert list(items) == ["H", "b1", "h1", "h3", "A"]
    # A given in mm: 15 cm against 150–200 cm
    A = items["A"]
    assert A.actual == pytest.approx(15.0)
    assert A.status is CheckStatus.FAIL
    assert A.adjustment_pct == pytest.approx((150 - 15) / 15 * 100)
