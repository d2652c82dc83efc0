"""
API-level tests for the cleanroom HVAC endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from cleanroom.main import app

client = TestClient(app)

ROOMS = [
    {"roomName": "Corridor", "length": 20, "width": 2, "staticPressure": 2},
    {"roomName": "Filling", "length": 8, "width": 6, "occupancy": 3, "equipmentLoadKW": 4},
]


class TestHealth:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "service": "cleanroom-hvac"}


class TestCalculateEndpoint:
    def setup_method(self):
        self.resp = client.post("/api/v1/hvac/calculate", json={"rooms": ROOMS})
        self.data = self.resp.json()

    def test_success(self):
        assert self.resp.status_code == 200

    def test_totals_use_camel_case(self):
        for key in (
            "totalArea",
            "totalVolume",
            "totalCFM",
            "totalACLoad",
            "totalChilledWater",
            "totalPowerConsumption",
            "roomBreakdown",
        ):
            assert key in self.data

    def test_total_area(self):
        assert self.data["totalArea"] == pytest.approx(88.0)

    def test_breakdown(self):
        breakdown = self.data["roomBreakdown"]
        assert len(breakdown) == 2
        assert breakdown[0]["roomName"] == "Corridor"
        assert breakdown[0]["ahuNo"] == "ACAHU-001"
        assert breakdown[1]["area"] == pytest.approx(48.0)
        assert breakdown[0]["powerConsumptionKWHr"] > 0

    def test_snake_case_input_accepted(self):
        resp = client.post(
            "/api/v1/hvac/calculate",
            json={"rooms": [{"room_name": "Lab", "length": 4, "width": 4}]},
        )
        assert resp.status_code == 200
        assert resp.json()["roomBreakdown"][0]["roomName"] == "Lab"

    def test_empty_rooms_rejected(self):
        resp = client.post("/api/v1/hvac/calculate", json={"rooms": []})
        assert resp.status_code == 422
        assert "at least one room" in resp.json()["detail"]

    def test_invalid_field_type_rejected(self):
        resp = client.post(
            "/api/v1/hvac/calculate", json={"rooms": [{"length": "wide"}]}
        )
        assert resp.status_code == 422


class TestSingleRoomEndpoint:
    def test_single_room(self):
        resp = client.post("/api/v1/hvac/room", json={"area": 20, "roomCFM": 1000})
        assert resp.status_code == 200
        data = resp.json()
        assert data["area"] == 20
        assert data["freshAirCFM"] == pytest.approx(100.0)
        assert data["ahuNo"] == "ACAHU-001"


class TestExportEndpoint:
    def setup_method(self):
        self.resp = client.post("/api/v1/hvac/export-csv", json={"rooms": ROOMS})

    def test_success(self):
        assert self.resp.status_code == 200
        assert self.resp.headers["content-type"].startswith("text/csv")

    def test_attachment_filename(self):
        assert "hvac-calculations.csv" in self.resp.headers["content-disposition"]

    def test_rows(self):
        lines = self.resp.text.split("\n")
        assert len(lines) == len(ROOMS) + 1
        assert lines[0].startswith("S. No.,AHU No,Room Name")
        assert all(len(line.split(",")) == 48 for line in lines)

    def test_empty_rooms_rejected(self):
        resp = client.post("/api/v1/hvac/export-csv", json={"rooms": []})
        assert resp.status_code == 422


class TestAirChangesEndpoint:
    def test_lookup(self):
        resp = client.get(
            "/api/v1/air-changes",
            params={"classification": "Grade C (ISO 7 at Rest & ISO 7 in Oper.)", "standard": "WHO"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["air_changes"] == "40"
        assert data["value"] == 40.0

    def test_default_standard_is_tga(self):
        resp = client.get("/api/v1/air-changes", params={"classification": "3500 K"})
        assert resp.json()["air_changes"] == "20"

    def test_missing_classification(self):
        resp = client.get("/api/v1/air-changes")
        assert resp.status_code == 422


class TestDesignConditionsEndpoint:
    def test_defaults(self):
        resp = client.post("/api/v1/design-conditions", json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["delta_temp_f"] == pytest.approx(46.8)
        assert data["grains_before_coil"] == pytest.approx(502.5, rel=0.01)

    def test_out_of_range_temperature(self):
        resp = client.post("/api/v1/design-conditions", json={"outside_temp_c": 300})
        assert resp.status_code == 422

    def test_invalid_rh(self):
        resp = client.post("/api/v1/design-conditions", json={"inside_rh": 0})
        assert resp.status_code == 422
