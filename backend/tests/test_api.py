import pytest
from fastapi.testclient import TestClient

from api.main import app


DEFAULT_INPUTS = {
    "b": 600, "h": 900, "t1": 30, "t2": 30, "t3": 15, "b1": 400, "b3": 600,
    "L": 800, "P_hoist": 15000, "P_trolley": 5000,
    "sigma_allow": 1650, "sigma_yield": 2450, "E": 2.1e6, "nu": 0.3,
}

V_BEAM = {
    "inputs": {
        "L": 1200, "P_hoist": 40000, "P_trolley": 12000, "material": "SS400",
    },
    "v_beam": {
        "b1": 170, "t1": 16, "t2": 12, "h1": 235,
        "t3": 6, "h3": 1000, "t4": 10, "A": 150,
    },
}


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_materials(client):
    res = client.get("/api/materials")
    assert res.status_code == 200
    names = [m["name"] for m in res.json()]
    assert names == ["SS400", "CT3", "A36"]


def test_calculate_single_girder(client):
    res = client.post("/api/calculate", json={"beam_type": "single-girder", "inputs": DEFAULT_INPUTS})
    assert res.status_code == 200
    body = res.json()
    assert body["beam_type"] == "single-girder"
    assert body["F"] == pytest.approx(612.0)
    assert body["Yc"] == pytest.approx(45.0)
    assert body["stress_check"] == "pass"
    assert body["all_pass"] is True
    assert body["stiffener"]["required"] is False
    assert body["torsion"]["torque_kgcm"] == 0.0


def test_named_material_replaces_entered_values(client):
    custom = client.post("/api/calculate", json={"inputs": DEFAULT_INPUTS}).json()
    a36 = client.post("/api/calculate", json={"inputs": {**DEFAULT_INPUTS, "material": "A36"}}).json()
    # σ_allow 1650 entered, 1500 from the library
    assert a36["K_sigma"] == pytest.approx(custom["K_sigma"] * 1500 / 1650)


def test_zero_inputs_serialise_infinite_factors_as_null(client):
    res = client.post("/api/calculate", json={"inputs": {}})
    assert res.status_code == 200
    body = res.json()
    assert body["K_sigma"] is None
    assert body["n_f"] is None
    assert body["K_buckling"] is None
    assert body["all_pass"] is True


def test_double_girder_endpoint_forces_type(client):
    res = client.post("/api/calculate/double-girder", json={
        "inputs": DEFAULT_INPUTS,
        "girder_spacing": 2000,
        "rail_eccentricity": 20,
    })
    assert res.status_code == 200
    body = res.json()
    assert body["beam_type"] == "double-girder"
    assert body["F"] == pytest.approx(2 * 612.0)
    assert body["P"] == pytest.approx(20000)
    assert body["torsion"]["torque_kgcm"] == pytest.approx(20000)


def test_v_beam_endpoint(client):
    res = client.post("/api/calculate/v-beam", json=V_BEAM)
    assert res.status_code == 200
    body = res.json()
    assert body["beam_type"] == "v-beam"
    assert body["buckling"]["element"] == "outstand"
    assert body["stiffener"]["count"] == len(body["stiffener"]["positions_cm"])


def test_v_beam_without_parameters_is_rejected(client):
    res = client.post("/api/calculate", json={"beam_type": "v-beam", "inputs": DEFAULT_INPUTS})
    assert res.status_code == 422
    assert "v_beam" in res.json()["detail"]


def test_unknown_beam_type_is_rejected(client):
    res = client.post("/api/calculate", json={"beam_type": "box", "inputs": DEFAULT_INPUTS})
    assert res.status_code == 422


def test_diagrams(client):
    res = client.post("/api/diagrams", json={"inputs": DEFAULT_INPUTS, "num_points": 21})
    assert res.status_code == 200
    body = res.json()
    assert len(body["x"]) == len(body["shear"]) == len(body["moment"]) == 21
    assert body["moment"][0] == 0.0
    assert body["moment"][-1] == pytest.approx(0.0, abs=1e-6)


def test_geometry(client):
    res = client.post("/api/geometry", json={"beam_type": "single-girder", "inputs": DEFAULT_INPUTS})
    assert res.status_code == 200
    body = res.json()
    assert [p["id"] for p in body["polygons"]] == ["bottom-flange", "top-flange", "left-web", "right-web"]
    assert body["bounds"] == {"min_x": -300, "max_x": 300, "min_y": 0, "max_y": 900}


def test_section_properties_matches_closed_form(client):
    res = client.post("/api/section-properties", json={"inputs": DEFAULT_INPUTS})
    assert res.status_code == 200
    body = res.json()
    assert body["closed_form_area_mm2"] == pytest.approx(61200)
    assert body["area_mm2"] == pytest.approx(body["closed_form_area_mm2"], rel=1e-3)
    assert body["ixx_mm4"] == pytest.approx(body["closed_form_ixx_mm4"], rel=1e-3)


def test_section_properties_of_empty_section(client):
    res = client.post("/api/section-properties", json={"inputs": {}})
    assert res.status_code == 422


def test_geometric_balance(client):
    res = client.post("/api/geometric-balance", json={"inputs": DEFAULT_INPUTS})
    assert res.status_code == 200
    items = {i["key"]: i for i in res.json()}
    assert set(items) == {"H", "b"}
    assert items["H"]["status"] == "fail"
    assert items["H"]["adjustment_pct"] < 0


def test_double_girder_torsion_fields_keep_their_units(client):
    body = client.post("/api/calculate/double-girder", json={
        "inputs": DEFAULT_INPUTS,
        "girder_spacing": 2000,
        "rail_eccentricity": 20,
    }).json()
    A_m = (40.0 + 1.5) * (90.0 - 3.0)
    t = body["torsion"]
    assert t["eccentricity_cm"] == pytest.approx(2.0)
    assert t["torque_kgcm"] == pytest.approx(20000)
    assert t["enclosed_area_cm2"] == pytest.approx(A_m)
    assert t["shear_stress_kgcm2"] == pytest.approx(20000 / (2 * A_m * 1.5))
    assert t["torsion_constant_cm4"] > t["enclosed_area_cm2"]


def test_run_serves_app_with_env_settings(monkeypatch):
    import api.main as main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    main.run()

    assert calls == [("api.main:app", {"host": "0.0.0.0", "port": 9001, "log_level": "info"})]
