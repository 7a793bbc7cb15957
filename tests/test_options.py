import pytest
from pydantic import ValidationError

from patreon_api.options import RequestOptions


def test_empty_options_produce_no_params():
    assert RequestOptions().to_params() == {}


def test_include_accepts_list_or_comma_joined_string():
    assert RequestOptions(include=["creator", "tiers"]).include == ["creator", "tiers"]
    assert RequestOptions(include="creator, tiers,").include == ["creator", "tiers"]


def test_fields_are_normalized_and_joined():
    options = RequestOptions(fields={"campaign": ["summary", "url"], "tier": "title, amount_cents"})

    assert options.to_params() == {
        "fields[campaign]": "summary,url",
        "fields[tier]": "title,amount_cents",
    }


def test_pagination_params():
    params = RequestOptions(page_size=50, page_cursor="cursor-1").to_params()

    assert params == {"page[count]": "50", "page[cursor]": "cursor-1"}


def test_page_size_must_be_positive():
    with pytest.raises(ValidationError):
        RequestOptions(page_size=0)
