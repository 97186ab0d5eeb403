"""
API tests for aggregation endpoints.

Tests cover:
- Comparing two regions
- Top performers with metric and limit validation
- Regional summary, including an unknown parent
"""

from fastapi.testclient import TestClient


class TestCompareAPI:
    """Tests for /compare."""

    def test_compare_two_regions(self, client: TestClient):
        response = client.get(
            "/compare",
            params={"region_a": "UP_MEERUT", "region_b": "UP_AGRA", "month": "2024-03"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["month"] == "2024-03-01"
        assert data["region_a"]["region_key"] == "UP_MEERUT"
        assert data["region_b"]["region_key"] == "UP_AGRA"
        assert data["workers_diff"] == (
            data["region_a"]["total_workers"] - data["region_b"]["total_workers"]
        )

    def test_compare_rejects_month_without_year(self, client: TestClient):
        """
        GIVEN a month string with no year or month in it
        WHEN I compare two regions
        THEN the request is rejected and nothing is resolved or stored
        """
        for month in ("10:30", "13", "March"):
            response = client.get(
                "/compare",
                params={"region_a": "UP_MEERUT", "region_b": "UP_AGRA", "month": month},
            )

            assert response.status_code == 400
            assert response.json()["error"] == "VALIDATION_ERROR"

        assert client.get("/health").json()["database"]["performance_records"] == 0

    def test_compare_requires_both_regions(self, client: TestClient):
        response = client.get("/compare", params={"region_a": "UP_AGRA"})

        assert response.status_code == 422


class TestTopPerformersAPI:
    """Tests for /top-performers."""

    def test_top_performers_ranked(self, client: TestClient):
        response = client.get(
            "/top-performers",
            params={"metric": "totalExpenditure", "limit": 5, "month": "2024-03"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["metric"] == "totalExpenditure"
        assert data["month"] == "2024-03-01"
        assert [r["rank"] for r in data["regions"]] == [1, 2, 3, 4, 5]
        values = [r["value"] for r in data["regions"]]
        assert values == sorted(values, reverse=True)

    def test_default_metric_and_limit(self, client: TestClient):
        data = client.get("/top-performers", params={"month": "2024-03"}).json()

        assert data["metric"] == "activeWorkers"
        assert len(data["regions"]) == 10

    def test_invalid_metric_is_400(self, client: TestClient):
        response = client.get("/top-performers", params={"metric": "happiness"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid metric. Valid metrics are:")

    def test_invalid_limit_is_400(self, client: TestClient):
        response = client.get("/top-performers", params={"limit": 0})

        assert response.status_code == 400
        assert response.json()["message"] == "Limit must be between 1 and 50"


class TestSummaryAPI:
    """Tests for /summary/{parent}."""

    def test_summary_for_state(self, client: TestClient):
        response = client.get("/summary/UP", params={"month": "2024-03"})

        assert response.status_code == 200
        data = response.json()
        assert data["region_count"] == 20
        assert data["total_workers"] > 0
        assert data["average_wage"] > 0

    def test_summary_for_unknown_parent_is_zero(self, client: TestClient):
        response = client.get("/summary/XX", params={"month": "2024-03"})

        assert response.status_code == 200
        data = response.json()
        assert data["region_count"] == 0
        assert data["total_expenditure"] == 0.0
        assert data["average_wage"] == 0.0

    def test_summary_defaults_to_configured_parent(self, client: TestClient):
        response = client.get("/summary", params={"month": "2024-03"})

        assert response.status_code == 200
        data = response.json()
        assert data["parent_region_key"] == "UP"
        assert data["region_count"] == 20
