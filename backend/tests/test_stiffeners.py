import pytest

from cranebeam.checks import epsilon
from cranebeam.stiffeners import size_stiffeners


def test_stocky_web_needs_no_stiffeners():
    # 840 / 15 = 56 < 72·ε/1.2 ≈ 59.3
    rec, warnings = size_stiffeners(840, 15, 2450, P=20000, q=5, span_cm=800)
    assert not rec.required
    assert rec.count == 0
    assert rec.positions == ()
    assert rec.slenderness_ratio == pytest.approx(56.0)
    assert rec.slenderness_limit == pytest.approx(72 * epsilon(2450) / 1.2)
    assert warnings == []


def test_web_exactly_at_limit_needs_no_stiffeners():
    limit = 72 * epsilon(2450) / 1.2
    rec, _ = size_stiffeners(limit, 1, 2450, P=20000, q=5, span_cm=800)
    assert rec.slenderness_ratio == rec.slenderness_limit
    assert rec.required is False
    assert rec.positions == ()


def test_slender_web_gets_clamped_spacing_and_layout():
    rec, _ = size_stiffeners(840, 6, 2450, P=20000, q=5, span_cm=800)
    # Capacity/demand ≈ 5.4 → spacing clamped to 3·h_w
    assert rec.required
    assert rec.spacing == pytest.approx(2520)
    assert rec.positions == (252.0, 504.0, 756.0)
    assert rec.count == 3
    assert rec.width == pytest.approx(80)
    assert rec.thickness == pytest.approx(8)
    assert rec.total_weight == pytest.approx(3 * 840 * 80 * 8 * 7850 / 1e9)


def test_heavy_load_clamps_spacing_to_half_web_height():
    rec, _ = size_stiffeners(840, 6, 2450, P=1e7, q=5, span_cm=800)
    assert rec.spacing == pytest.approx(420)
    # 42 cm pitch strictly inside an 800 cm span
    assert rec.count == 19
    assert rec.count == len(rec.positions)
    assert rec.positions[0] == pytest.approx(42.0)
    assert rec.positions[-1] == pytest.approx(798.0)
    assert all(p < 800 for p in rec.positions)


def test_spacing_beyond_span_is_not_required():
    rec, _ = size_stiffeners(840, 6, 2450, P=20000, q=5, span_cm=200)
    assert not rec.required
    assert rec.spacing == pytest.approx(2000)
    assert rec.count == 0


def test_inertia_shortfall_warns_but_keeps_plate():
    rec, warnings = size_stiffeners(840, 6, 2450, P=20000, q=5, span_cm=800)
    assert rec.provided_inertia == pytest.approx(80 * 8**3 / 12)
    assert rec.required_inertia == pytest.approx(840**3 * 6 / (10.5 * 2520))
    assert not rec.inertia_ok
    assert rec.required
    assert len(warnings) == 1
    assert "inertia" in warnings[0]


def test_stiffener_warning_is_logged(caplog):
    with caplog.at_level("WARNING", logger="cranebeam.stiffeners"):
        size_stiffeners(840, 6, 2450, P=20000, q=5, span_cm=800)
    assert any("inertia" in rec.message for rec in caplog.records)


def test_plate_grows_with_web():
    rec, _ = size_stiffeners(2000, 12, 2450, P=50000, q=10, span_cm=3000)
    assert rec.width == pytest.approx(200)
    # 0.6·√(fy/235)·12 ≈ 7.3 mm, raised to the 8 mm minimum
    assert rec.thickness == pytest.approx(8)


def test_degenerate_web_is_skipped_with_warning():
    rec, warnings = size_stiffeners(0, 0, 2450, P=20000, q=5, span_cm=800)
    assert not rec.required
    assert warnings


def test_zero_yield_falls_back_to_web_height_spacing():
    rec, _ = size_stiffeners(840, 6, 0, P=20000, q=5, span_cm=800)
    assert rec.epsilon == 0.0
    assert rec.spacing == pytest.approx(840)
