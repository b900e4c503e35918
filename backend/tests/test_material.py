import pytest

from cranebeam import DEFAULT_SINGLE_GIRDER, MaterialType, get_material, list_materials


@pytest.mark.parametrize(
    "name, sigma_yield, sigma_allow",
    [("SS400", 2450, 1400), ("CT3", 2350, 1400), ("A36", 2500, 1500)],
)
def test_library_values(name, sigma_yield, sigma_allow):
    m = get_material(name)
    assert m.sigma_yield == sigma_yield
    assert m.sigma_allow == sigma_allow
    assert m.E == 2.1e6
    assert m.nu == 0.3


def test_lookup_is_case_insensitive():
    assert get_material("ss400") == get_material(MaterialType.SS400)


def test_unknown_and_custom_raise():
    with pytest.raises(ValueError, match="Unknown material"):
        get_material("S355")
    with pytest.raises(ValueError):
        get_material("CUSTOM")


def test_list_materials():
    assert [m.name for m in list_materials()] == ["SS400", "CT3", "A36"]


def test_with_material_overrides_entered_values():
    beam = DEFAULT_SINGLE_GIRDER.with_material("A36")
    assert beam.material is MaterialType.A36
    assert beam.sigma_yield == 2500
    assert beam.sigma_allow == 1500
    assert beam.h == DEFAULT_SINGLE_GIRDER.h


def test_custom_keeps_entered_values():
    beam = DEFAULT_SINGLE_GIRDER.with_material(MaterialType.CUSTOM)
    assert beam.sigma_allow == 1650
    assert beam.sigma_yield == 2450


def test_with_material_accepts_lowercase_names():
    beam = DEFAULT_SINGLE_GIRDER.with_material("ss400")
    assert beam.material is MaterialType.SS400
    assert beam.sigma_allow == 1400
