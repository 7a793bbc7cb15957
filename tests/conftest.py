import json
from unittest.mock import MagicMock

import pytest
import requests


def resource(type_, id_, attributes=None, **relationships):
    """Build a raw JSON:API resource. Relationship values are used as ``data``."""
    raw = {"type": type_, "id": id_}
    if attributes is not None:
        raw["attributes"] = attributes
    if relationships:
        raw["relationships"] = {name: {"data": data} for name, data in relationships.items()}
    return raw


def ref(type_, id_):
    return {"type": type_, "id": id_}


@pytest.fixture
def campaign_document():
    """Campaign with creator, two tiers pointing back at it, a benefit and a goal."""
    return {
        "data": resource(
            "campaign", "1",
            {"creation_name": "comics", "patron_count": 12},
            creator=ref("user", "9"),
            tiers=[ref("tier", "t1"), ref("tier", "t2")],
            benefits=[ref("benefit", "b1")],
            goals=[ref("goal", "g1")],
        ),
        "included": [
            resource("user", "9", {"full_name": "Alice"}),
            resource("tier", "t1", {"title": "Bronze", "amount_cents": 100},
                     campaign=ref("campaign", "1"), benefits=[ref("benefit", "b1")]),
            resource("tier", "t2", {"title": "Silver", "amount_cents": 500},
                     campaign=ref("campaign", "1")),
            resource("benefit", "b1", {"title": "Early access"},
                     campaign=ref("campaign", "1"), tiers=[ref("tier", "t1")]),
            resource("goal", "g1", {"title": "Weekly comic", "amount_cents": 100000,
                                    "completed_percentage": 40}),
        ],
    }


@pytest.fixture
def member_document():
    return {
        "data": resource(
            "member", "m1",
            {"full_name": "Bob", "patron_status": "active_patron", "will_pay_amount_cents": 500},
            address=ref("address", "a1"),
            campaign=ref("campaign", "1"),
            user=ref("user", "42"),
        ),
        "included": [
            resource("address", "a1", {"city": "Lyon", "country": "FR"}),
            resource("campaign", "1", {"creation_name": "comics"}),
            resource("user", "42", {"full_name": "Bob B."}),
            resource("tier", "t1", {"title": "Bronze"}),
            resource("tier", "t2", {"title": "Silver"}),
        ],
    }


def make_response(status_code=200, body=None):
    """Build a mock requests.Response carrying a JSON body."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if isinstance(body, (bytes, str)):
        response.content = body if isinstance(body, bytes) else body.encode()
    else:
        response.content = json.dumps(body).encode()
    return response


@pytest.fixture
def mock_session():
    return MagicMock(spec=requests.Session)
