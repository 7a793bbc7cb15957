from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from patreon_api.client import PatreonClient
from patreon_api.config import BASE_URL
from patreon_api.errors import APIError, DecodeError, TransportError
from patreon_api.options import RequestOptions

from conftest import make_response, ref, resource


@pytest.fixture
def client(mock_session):
    return PatreonClient(session=mock_session)


def requested_url(mock_session):
    return mock_session.get.call_args.args[0]


def test_build_url_without_options(client):
    assert client.build_url("/api/oauth2/v2/identity") == f"{BASE_URL}/api/oauth2/v2/identity"


def test_build_url_encodes_options(client):
    options = RequestOptions(
        include=["creator", "tiers"],
        fields={"campaign": "summary,url"},
        page_size=20,
        page_cursor="abc",
    )

    url = client.build_url("/api/oauth2/v2/campaigns", options)
    parts = urlsplit(url)
    query = parse_qs(parts.query)

    assert parts.path == "/api/oauth2/v2/campaigns"
    assert query == {
        "include": ["creator,tiers"],
        "fields[campaign]": ["summary,url"],
        "page[count]": ["20"],
        "page[cursor]": ["abc"],
    }


def test_fetch_campaign_by_id(client, mock_session, campaign_document):
    mock_session.get.return_value = make_response(200, campaign_document)

    campaign = client.fetch_campaign_by_id("1", RequestOptions(include="creator,tiers"))

    assert urlsplit(requested_url(mock_session)).path == "/api/oauth2/v2/campaigns/1"
    assert mock_session.get.call_args.kwargs["timeout"] == client.timeout
    assert campaign.id == "1"
    assert campaign.creator.full_name == "Alice"


def test_fetch_campaign_by_id_escapes_id(client, mock_session, campaign_document):
    mock_session.get.return_value = make_response(200, campaign_document)

    client.fetch_campaign_by_id("1/members")

    assert urlsplit(requested_url(mock_session)).path == "/api/oauth2/v2/campaigns/1%2Fmembers"


def test_fetch_campaigns(client, mock_session):
    mock_session.get.return_value = make_response(200, {
        "data": [resource("campaign", "1"), resource("campaign", "2")],
    })

    campaigns = client.fetch_campaigns()

    assert requested_url(mock_session) == f"{BASE_URL}/api/oauth2/v2/campaigns"
    assert [campaign.id for campaign in campaigns] == ["1", "2"]


def test_fetch_identity(client, mock_session):
    mock_session.get.return_value = make_response(200, {
        "data": resource("user", "9", {"full_name": "Alice"}, campaign=ref("campaign", "1")),
        "included": [resource("campaign", "1")],
    })

    user = client.fetch_identity()

    assert urlsplit(requested_url(mock_session)).path == "/api/oauth2/v2/identity"
    assert user.full_name == "Alice"
    assert user.campaign.id == "1"


def test_fetch_member_by_id(client, mock_session, member_document):
    mock_session.get.return_value = make_response(200, member_document)

    member = client.fetch_member_by_id("m1")

    assert urlsplit(requested_url(mock_session)).path == "/api/oauth2/v2/members/m1"
    assert member.address.country == "FR"


def test_fetch_members_by_campaign_id(client, mock_session):
    mock_session.get.return_value = make_response(200, {
        "data": [resource("member", "m1"), resource("member", "m2")],
    })

    members = client.fetch_members_by_campaign_id("1", RequestOptions(page_size=2))

    assert urlsplit(requested_url(mock_session)).path == "/api/oauth2/v2/campaigns/1/members"
    assert [member.id for member in members] == ["m1", "m2"]


def test_api_error_is_raised_with_structured_items(client, mock_session):
    mock_session.get.return_value = make_response(401, {
        "errors": [{"code": 1, "title": "invalid_token"}],
    })

    with pytest.raises(APIError) as exc_info:
        client.fetch_campaign_by_id("1")

    error = exc_info.value
    assert error.status_code == 401
    assert len(error.errors) == 1
    assert error.errors[0].code == 1
    assert error.errors[0].title == "invalid_token"
    assert "invalid_token" in str(error)


def test_api_error_with_undecodable_body(client, mock_session):
    mock_session.get.return_value = make_response(502, b"<html>Bad gateway</html>")

    with pytest.raises(APIError) as exc_info:
        client.fetch_identity()

    assert exc_info.value.status_code == 502
    assert exc_info.value.errors == []


def test_transport_error_wraps_request_exception(client, mock_session):
    cause = requests.ConnectionError("connection refused")
    mock_session.get.side_effect = cause

    with pytest.raises(TransportError) as exc_info:
        client.fetch_identity()

    assert exc_info.value.__cause__ is cause


def test_decode_error_on_invalid_success_body(client, mock_session):
    mock_session.get.return_value = make_response(200, b"not json")

    with pytest.raises(DecodeError):
        client.fetch_campaigns()


def test_fetch_campaigns_by_ids_keeps_order(client):
    responses = {
        f"{BASE_URL}/api/oauth2/v2/campaigns/{campaign_id}": make_response(
            200, {"data": resource("campaign", campaign_id)}
        )
        for campaign_id in ("1", "2", "3")
    }
    client.session.get.side_effect = lambda url, timeout: responses[url]

    campaigns = client.fetch_campaigns_by_ids(["3", "1", "2"], max_workers=3)

    assert [campaign.id for campaign in campaigns] == ["3", "1", "2"]


def test_context_manager_closes_session(mock_session):
    with PatreonClient(session=mock_session):
        pass

    mock_session.close.assert_called_once()


def test_from_env_uses_oauth_session():
    session = MagicMock(spec=requests.Session)
    with patch("patreon_api.auth.get_oauth_session", return_value=session) as get_session:
        client = PatreonClient.from_env(timeout=5)

    get_session.assert_called_once_with(None)
    assert client.session is session
    assert client.timeout == 5
