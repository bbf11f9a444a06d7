"""Route tests against a fake FIO upstream."""

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from pruntools.config import Settings
from pruntools.web.app import USER_COOKIE, create_app


@pytest.fixture
def client(settings: Settings, fio_transport: httpx.MockTransport) -> Iterator[TestClient]:
    app = create_app(settings, transport=fio_transport)
    with TestClient(app) as test_client:
        yield test_client


class TestHome:
    def test_lists_tools(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert 'href="/shipping"' in response.text
        assert 'href="/stocks"' in response.text


class TestMaterials:
    def test_all_materials(self, client: TestClient) -> None:
        response = client.get("/materials")
        assert response.status_code == 200
        assert "Drinking Water" in response.text
        assert "Hold shift to sort multiple at once." in response.text

    def test_category_filter(self, client: TestClient, requests_seen: list) -> None:
        response = client.get("/materials", params={"category": "metals"})
        assert response.status_code == 200
        assert "Iron" in response.text
        assert "Drinking Water" not in response.text
        assert requests_seen[-1].url.path == "/material/category/metals"

    def test_unknown_category_is_404_without_upstream_call(
        self, client: TestClient, requests_seen: list,
    ) -> None:
        response = client.get("/materials", params={"category": "spaceships"})
        assert response.status_code == 404
        assert requests_seen == []

    def test_htmx_request_returns_table_only(self, client: TestClient) -> None:
        response = client.get(
            "/materials", params={"q": "water"}, headers={"HX-Request": "true"},
        )
        assert response.status_code == 200
        assert 'id="data-table"' in response.text
        assert "<nav" not in response.text
        assert "Drinking Water" in response.text
        assert "Basic Rations" not in response.text

    def test_no_results_row(self, client: TestClient) -> None:
        response = client.get(
            "/materials", params={"q": "zzz"}, headers={"HX-Request": "true"},
        )
        assert "No results." in response.text

    def test_header_click_sorts(self, client: TestClient) -> None:
        response = client.get(
            "/materials",
            params={"sort": "ticker", "sort_by": "ticker", "multi": "false"},
            headers={"HX-Request": "true"},
        )
        text = response.text
        assert 'name="sort" value="-ticker"' in text
        assert text.index("RAT") < text.index("FE") < text.index("DW")


class TestStocksAndExchange:
    def test_stocks_show_quotes(self, client: TestClient) -> None:
        response = client.get("/stocks")
        assert response.status_code == 200
        assert "EX: NC1" in response.text
        assert "Market Maker Buy: 80" in response.text

    def test_exchange_redirects_to_all(self, client: TestClient) -> None:
        response = client.get("/exchange", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/exchange/all"

    def test_exchange_category_slug(self, client: TestClient, requests_seen: list) -> None:
        response = client.get("/exchange/Metals")
        assert response.status_code == 200
        assert [r.url.path for r in requests_seen] == [
            "/material/category/metals", "/exchange/all",
        ]

    def test_upstream_status_propagated(
        self, client: TestClient, fio_routes: dict,
    ) -> None:
        fio_routes["/exchange/all"] = 503
        response = client.get("/exchange/all")
        assert response.status_code == 503
        assert "Something went wrong: 503" in response.text


class TestShipping:
    def test_form_without_username(self, client: TestClient, requests_seen: list) -> None:
        response = client.get("/shipping")
        assert response.status_code == 200
        assert "No flight data." in response.text
        assert "No ship data." in response.text
        assert requests_seen == []

    def test_flights_and_ships(self, client: TestClient, requests_seen: list) -> None:
        response = client.get("/shipping", params={"username": "coolfeather"})
        assert response.status_code == 200
        assert "AVI-05XYZ" in response.text
        assert "Status: In Flight" in response.text
        assert "Montem" in response.text
        assert "<progress" in response.text
        assert [r.url.path for r in requests_seen] == [
            "/ship/ships/coolfeather", "/ship/flights/coolfeather",
        ]

    def test_401_shows_access_denied(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/ship/ships/coolfeather"] = 401
        response = client.get("/shipping", params={"username": "coolfeather"})
        assert response.status_code == 401
        assert "You don't have access to view this users shipping data." in response.text
        assert "Contact coolfeather to provide you access" in response.text
        assert 'href="/shipping"' in response.text

    def test_401_on_flights_also_denied(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/ship/flights/coolfeather"] = 401
        response = client.get("/shipping", params={"username": "coolfeather"})
        assert response.status_code == 401

    def test_other_errors_propagate_status(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/ship/ships/coolfeather"] = 500
        response = client.get("/shipping", params={"username": "coolfeather"})
        assert response.status_code == 500
        assert "Something went wrong: 500" in response.text

    def test_saved_key_is_used(self, client: TestClient, requests_seen: list) -> None:
        saved = client.post(
            "/account", data={"username": "coolfeather", "api_key": "my-key"},
            follow_redirects=False,
        )
        assert saved.status_code == 303
        assert USER_COOKIE in saved.cookies

        client.get("/shipping", params={"username": "coolfeather"})
        assert requests_seen[0].headers["Authorization"] == "my-key"

    def test_server_key_fallback(
        self, settings: Settings, fio_transport: httpx.MockTransport, requests_seen: list,
    ) -> None:
        settings.fio_api_key = "server-key"
        with TestClient(create_app(settings, transport=fio_transport)) as test_client:
            test_client.get("/shipping", params={"username": "coolfeather"})
        assert requests_seen[0].headers["Authorization"] == "server-key"

    def test_username_cannot_leave_ship_endpoints(
        self, client: TestClient, requests_seen: list,
    ) -> None:
        response = client.get(
            "/shipping", params={"username": "coolfeather/../../../exchange/all"},
        )
        assert response.status_code == 404
        assert "Something went wrong: 404" in response.text
        assert requests_seen
        for request in requests_seen:
            assert request.url.raw_path.startswith(b"/ship/ships/coolfeather%2F")


class TestAccount:
    def test_save_update_and_forget(self, client: TestClient) -> None:
        client.post("/account", data={"username": "coolfeather", "api_key": "key-one-1234"})
        first_id = client.cookies[USER_COOKIE]
        page = client.get("/account")
        assert "key-" in page.text and "1234" in page.text
        assert "key-one-1234" not in page.text

        client.post("/account", data={"username": "coolfeather", "api_key": "key-two-5678"})
        assert client.cookies[USER_COOKIE] == first_id

        client.post("/account/forget")
        assert "Forget my key" not in client.get("/account").text


class TestKawa:
    def test_prices_for_planet(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/records"] = {
            "page": 1, "totalPages": 1,
            "items": [
                {"ticker": "RAT", "price": 120.0, "planet": "Proxion"},
                {"ticker": "DW", "price": 80.0, "planet": "Montem"},
            ],
        }
        response = client.get("/kawa")
        assert response.status_code == 200
        assert "RAT" in response.text
        assert "Montem" not in response.text

    def test_upstream_failure(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/records"] = 502
        response = client.get("/kawa")
        assert response.status_code == 502

    def test_rejected_record_shows_error_page(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/records"] = {
            "page": 1, "totalPages": 1,
            "items": [{"ticker": "RAT", "price": None, "planet": "Proxion"}],
        }
        response = client.get("/kawa")
        assert response.status_code == 502
        assert "Something went wrong: 502" in response.text

    def test_non_json_body_shows_error_page(self, client: TestClient, fio_routes: dict) -> None:
        fio_routes["/records"] = lambda request: httpx.Response(200, text="<html>maintenance</html>")
        response = client.get("/kawa")
        assert response.status_code == 502
