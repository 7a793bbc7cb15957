import pytest

from patreon_api.entities import Tier, User
from patreon_api.errors import DecodeError
from patreon_api.schemas.document import RawResource, ResourceIdentifier
from patreon_api.utils.included import build_index

from conftest import ref, resource


def raw_list(*items):
    return [RawResource.model_validate(item) for item in items]


def test_build_index_decodes_by_type_tag():
    index = build_index(raw_list(
        resource("user", "9", {"full_name": "Alice"}),
        resource("tier", "t1", {"title": "Bronze", "amount_cents": 100}),
    ))

    user = index.get(ResourceIdentifier(type="user", id="9"))
    tier = index.get(ResourceIdentifier(type="tier", id="t1"))

    assert isinstance(user, User)
    assert user.full_name == "Alice"
    assert isinstance(tier, Tier)
    assert tier.amount_cents == 100
    assert len(index) == 2


def test_unknown_types_are_skipped():
    index = build_index(raw_list(
        resource("pledge-event", "p1", {"amount_cents": 1}),
        resource("user", "9"),
    ))

    assert len(index) == 1
    assert index.get(ResourceIdentifier(type="pledge-event", id="p1")) is None


def test_relationships_are_not_resolved_while_indexing():
    index = build_index(raw_list(
        resource("tier", "t1", campaign=ref("campaign", "1")),
        resource("campaign", "1"),
    ))

    assert index.get(ResourceIdentifier(type="tier", id="t1")).campaign is None


def test_duplicate_resources_keep_the_later_one():
    index = build_index(raw_list(
        resource("user", "9", {"full_name": "Alice"}),
        resource("user", "9", {"full_name": "Alicia"}),
    ))

    assert len(index) == 1
    assert index.get(ResourceIdentifier(type="user", id="9")).full_name == "Alicia"


def test_index_build_is_idempotent():
    included = raw_list(
        resource("user", "9", {"full_name": "Alice"}),
        resource("tier", "t1", {"title": "Bronze"}),
        resource("tier", "t2", {"title": "Silver"}),
    )

    first = build_index(included)
    second = build_index(included)

    for identifier in (r.identifier for r in included):
        assert first.get(identifier).attributes == second.get(identifier).attributes
    assert [t.id for t in first.of_type("tier")] == [t.id for t in second.of_type("tier")]


def test_of_type_preserves_document_order():
    index = build_index(raw_list(
        resource("tier", "t2"),
        resource("user", "9"),
        resource("tier", "t1"),
    ))

    assert [tier.id for tier in index.of_type("tier")] == ["t2", "t1"]
    assert index.of_type("goal") == []


def test_invalid_attributes_raise_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        build_index(raw_list(resource("tier", "t1", {"amount_cents": "a lot"})))

    assert exc_info.value.resource_type == "tier"
    assert exc_info.value.resource_id == "t1"


def test_unknown_attributes_are_kept():
    index = build_index(raw_list(resource("user", "9", {"pronouns": "they/them"})))

    assert index.get(ResourceIdentifier(type="user", id="9")).pronouns == "they/them"


def test_contains_uses_type_and_id():
    index = build_index(raw_list(resource("user", "9")))

    assert ResourceIdentifier(type="user", id="9") in index
    assert ResourceIdentifier(type="campaign", id="9") not in index
