"""Tests for leaderboard API endpoints.

GET /customers
GET /leaderboard?country=...
"""


def setup_test_data(seed) -> None:
    seed.customer("ee-1", country="Estonia", first_name="Mari", last_name="Tamm")
    seed.bet("ee-1", stake=10, odds=3, status="WON")
    seed.bet("ee-1", stake=5, odds=2, status="LOST")
    seed.profitable("fi-1", 40, country="Finland")
    seed.profitable("no-1", 25, country="Norway")
    seed.customer("cl-1", country="Chile")
    seed.commit()


class TestCustomersEndpoint:
    """Test GET /customers."""

    def test_returns_200(self, client, seed):
        setup_test_data(seed)
        response = client.get("/customers")
        assert response.status_code == 200

    def test_returns_camel_case_shape(self, client, seed):
        setup_test_data(seed)
        data = client.get("/customers").json()

        entry = next(e for e in data if e["id"] == "ee-1")
        assert entry == {
            "id": "ee-1",
            "name": "Mari Tamm",
            "country": "Estonia",
            "totalBets": 2,
            "winPercentage": 50,
            "profit": 15.0,
        }

    def test_sorted_by_profit(self, client, seed):
        setup_test_data(seed)
        data = client.get("/customers").json()
        assert [e["id"] for e in data] == ["fi-1", "no-1", "ee-1"]

    def test_empty_database_returns_empty_list(self, client):
        response = client.get("/customers")
        assert response.status_code == 200
        assert response.json() == []

    def test_database_failure_returns_500(self, broken_client):
        response = broken_client.get("/customers")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch customers"}


class TestLeaderboardEndpoint:
    """Test GET /leaderboard."""

    def test_without_country_matches_customers(self, client, seed):
        setup_test_data(seed)
        assert client.get("/leaderboard").json() == client.get("/customers").json()

    def test_empty_country_param_is_unfiltered(self, client, seed):
        setup_test_data(seed)
        assert client.get("/leaderboard?country=").json() == client.get("/customers").json()

    def test_all_sentinel_is_unfiltered(self, client, seed):
        setup_test_data(seed)
        response = client.get("/leaderboard", params={"country": "ALL"})
        assert response.json() == client.get("/customers").json()

    def test_single_country(self, client, seed):
        setup_test_data(seed)
        data = client.get("/leaderboard", params={"country": "Norway"}).json()
        assert [e["id"] for e in data] == ["no-1"]

    def test_repeated_country_params(self, client, seed):
        setup_test_data(seed)
        data = client.get("/leaderboard?country=Estonia&country=Norway").json()
        assert [e["id"] for e in data] == ["no-1", "ee-1"]

    def test_unknown_country_returns_empty_list(self, client, seed):
        setup_test_data(seed)
        response = client.get("/leaderboard", params={"country": "Atlantis"})
        assert response.status_code == 200
        assert response.json() == []

    def test_database_failure_returns_500(self, broken_client):
        response = broken_client.get("/leaderboard", params={"country": "Estonia"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch leaderboard data"}


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
