# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from urllib.parse import parse_qs, urlencode

import pytest
from werkzeug.datastructures import MultiDict

from estate_portal.domain.enums import PropertyStatus, SortOrder
from estate_portal.infrastructure.api import decode_list_query, encode_list_query
from estate_portal.infrastructure.api.schemas import JobFilter, ListOptions, PropertyFilter
from estate_portal.interfaces.http.query import parse_filter, parse_options
from estate_portal.shared.errors import ValidationError


def test_round_trip_through_query_string() -> None:
    filter_ = {"status": "off plan", "minPrice": 100}
    options = {"page": 2, "limit": 10, "sortBy": "createdAt", "order": "desc"}

    query = urlencode(encode_list_query(filter_, options))
    parsed = {key: values[0] for key, values in parse_qs(query).items()}

    assert decode_list_query(parsed) == (filter_, options)


def test_models_encode_to_camel_case_without_nulls() -> None:
    params = encode_list_query(
        PropertyFilter(status=PropertyStatus.OFF_PLAN, min_price=100),
        ListOptions(page=2, limit=10, sort_by="createdAt", order=SortOrder.DESC),
    )

    assert params["filter"] == '{"status":"off plan","minPrice":100}'
    assert params["options"] == '{"page":2,"limit":10,"sortBy":"createdAt","order":"desc"}'


def test_non_ascii_is_kept() -> None:
    params = encode_list_query({"name": "Résidence"})
    assert decode_list_query(params)[0] == {"name": "Résidence"}


def test_parse_options_merges_sources() -> None:
    args = MultiDict({"page": "3", "options": '{"order": "asc"}'})

    options = parse_options(args, {"limit": 9, "sortBy": "creationDate", "order": "desc"})

    assert options.page == 3
    assert options.limit == 9
    assert options.sort_by == "creationDate"
    assert options.order is SortOrder.ASC


def test_parse_options_rejects_bad_json() -> None:
    with pytest.raises(ValidationError) as err:
        parse_options(MultiDict({"options": "{page"}))
    assert err.value.code == "invalid_query"


def test_parse_options_rejects_bad_page() -> None:
    with pytest.raises(ValidationError):
        parse_options(MultiDict({"page": "0"}))


def test_parse_filter() -> None:
    filter_ = parse_filter(MultiDict({"filter": '{"name": "Sales", "type": "part time"}'}), JobFilter)

    assert filter_.name == "Sales"
    assert filter_.type == "part time"
