import pytest
import requests

from caniuse_lookup.src.config.config_loader import AppConfig
from caniuse_lookup.src.models.errors import EmptyResultError, NetworkError, ParseError
from caniuse_lookup.src.services.caniuse_client import CaniuseClient


def test_search_sends_term_and_returns_ids(stub_get, fake_response) -> None:
    stub = stub_get({"/process/query.php": fake_response({"featureIds": ["websockets", "mdn-api_websocketstream"]})})

    ids = CaniuseClient().search("websocket")

    assert ids == ["websockets", "mdn-api_websocketstream"]
    assert stub.calls[0]["url"] == "https://caniuse.com/process/query.php"
    assert stub.calls[0]["params"] == {"search": "websocket"}
    assert stub.calls[0]["timeout"] == 10.0
    assert stub.calls[0]["headers"]["Accept"] == "application/json"


def test_search_drops_duplicate_ids(stub_get, fake_response) -> None:
    stub_get({"/process/query.php": fake_response({"featureIds": ["a", "b", "a", "c", "b"]})})

    assert CaniuseClient().search("x") == ["a", "b", "c"]


def test_search_with_no_matches_raises_empty_result(stub_get, fake_response) -> None:
    stub_get({"/process/query.php": fake_response({"featureIds": []})})

    with pytest.raises(EmptyResultError) as exc_info:
        CaniuseClient().search("nothing-matches")
    assert exc_info.value.search_term == "nothing-matches"


def test_search_rejects_blank_term(stub_get) -> None:
    stub = stub_get({})

    with pytest.raises(ValueError):
        CaniuseClient().search("   ")
    assert stub.calls == []


def test_search_uses_configured_base_url_and_timeout(stub_get, fake_response) -> None:
    stub = stub_get({"/process/query.php": fake_response({"featureIds": ["x"]})})
    config = AppConfig(base_url="https://mirror.example", timeout=3.5, user_agent="tests/1.0")

    CaniuseClient(config).search("x")

    assert stub.calls[0]["url"] == "https://mirror.example/process/query.php"
    assert stub.calls[0]["timeout"] == 3.5
    assert stub.calls[0]["headers"]["User-Agent"] == "tests/1.0"


@pytest.mark.parametrize(
    "error",
    [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("read timed out"),
    ],
)
def test_transport_failures_raise_network_error(stub_get, error) -> None:
    stub_get({"/process/query.php": error})

    with pytest.raises(NetworkError):
        CaniuseClient().search("websocket")


def test_http_error_status_raises_network_error(stub_get, fake_response) -> None:
    stub_get({"/process/query.php": fake_response({"error": "down"}, status_code=503)})

    with pytest.raises(NetworkError, match="503"):
        CaniuseClient().search("websocket")


def test_invalid_json_raises_parse_error(stub_get, fake_response) -> None:
    stub_get({"/process/query.php": fake_response(ValueError("Expecting value"), text="<html>")})

    with pytest.raises(ParseError):
        CaniuseClient().search("websocket")


def test_missing_feature_ids_member_raises_parse_error(stub_get, fake_response) -> None:
    stub_get({"/process/query.php": fake_response({"results": []})})

    with pytest.raises(ParseError):
        CaniuseClient().search("websocket")


def test_get_features_requests_exact_id_set(stub_get, fake_response) -> None:
    stub = stub_get({
        "/process/get_feat_data.php": fake_response([
            {"id": "websockets", "title": "Web Sockets"},
            {"id": "mdn-api_websocketstream", "title": "WebSocketStream API"},
        ])
    })

    features = CaniuseClient().get_features(["websockets", "mdn-api_websocketstream"])

    assert len(stub.calls) == 1
    assert stub.calls[0]["params"] == {"type": "support-data", "feat": "websockets,mdn-api_websocketstream"}
    assert list(features) == ["websockets", "mdn-api_websocketstream"]
    assert features["mdn-api_websocketstream"].title == "WebSocketStream API"


def test_get_features_matches_records_without_id_by_position(stub_get, fake_response, websocket_record) -> None:
    stub_get({"/process/get_feat_data.php": fake_response([websocket_record])})

    features = CaniuseClient().get_features(["mdn-api_websocketstream"])

    record = features["mdn-api_websocketstream"]
    assert record.title == "WebSocketStream API"
    assert record.support["firefox"] is False


def test_get_features_skips_ids_without_records(stub_get, fake_response) -> None:
    stub_get({"/process/get_feat_data.php": fake_response([{"id": "a", "title": "A"}])})

    features = CaniuseClient().get_features(["a", "b"])

    assert list(features) == ["a"]


def test_get_features_with_empty_response_raises_empty_result(stub_get, fake_response) -> None:
    stub_get({"/process/get_feat_data.php": fake_response([])})

    with pytest.raises(EmptyResultError):
        CaniuseClient().get_features(["a"])


def test_get_features_with_object_response_raises_parse_error(stub_get, fake_response) -> None:
    stub_get({"/process/get_feat_data.php": fake_response({"title": "not an array"})})

    with pytest.raises(ParseError):
        CaniuseClient().get_features(["a"])


def test_get_features_requires_ids(stub_get) -> None:
    stub = stub_get({})

    with pytest.raises(ValueError):
        CaniuseClient().get_features([])
    assert stub.calls == []
