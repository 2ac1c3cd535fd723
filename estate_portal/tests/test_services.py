# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import re
from pathlib import Path

import httpx
import pytest

from estate_portal.application.session_store import SessionStore
from estate_portal.domain.enums import PropertyStatus, SortOrder
from estate_portal.domain.fields import Known, Malformed, text_or_default
from estate_portal.domain.uploads import UploadedFile
from estate_portal.infrastructure.api import AuthenticatedClient, decode_list_query
from estate_portal.infrastructure.api.schemas import (
    ApplicationCreate,
    ContactMessage,
    JobFilter,
    ListOptions,
    PropertyFilter,
    PropertyWrite,
)
from estate_portal.services import (
    ApplicationService,
    CategoryService,
    ContactService,
    JobService,
    PropertyService,
)
from estate_portal.shared.errors import (
    AuthenticationRequiredError,
    NotFoundError,
    ServerError,
    ValidationError,
)

from .support import ApiRecorder, make_session

JPEG = UploadedFile(filename="front.jpg", content_type="image/jpeg", content=b"\xff\xd8jpeg")
PDF = UploadedFile(filename="cv.pdf", content_type="application/pdf", content=b"%PDF-1.4")

PROPERTY = {
    "id": "p1",
    "name": "Marina Villa",
    "status": "off plan",
    "priceFrom": 1200000,
    "sizeArea": "1,200 sqft",
    "images": ["a.jpg"],
    "propertyTypes": ["t1", {"id": "t2", "name": "Villa"}],
}

JOB = {"id": "j1", "name": "Sales Agent", "type": "full time", "location": "Dubai"}


def page_body(results: list[dict], **extra: int) -> dict:
    body = {"results": results, "page": 1, "limit": 10, "totalPages": 1, "totalResults": len(results)}
    body.update(extra)
    return body


@pytest.fixture()
def signed_in(store: SessionStore) -> SessionStore:
    store.set_session(make_session())
    return store


def part_names(request: httpx.Request) -> list[str]:
    return re.findall(r'form-data; name="([^"]*)"', request.content.decode("latin-1"))


@pytest.mark.asyncio
async def test_list_sends_filter_and_options(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json=page_body([JOB]))
    service = JobService(api_client)

    page = await service.list(
        JobFilter(name="Sales"),
        ListOptions(page=2, limit=9, sort_by="creationDate", order=SortOrder.DESC),
    )

    params = dict(recorder.requests[0].url.params)
    filter_, options = decode_list_query(params)
    assert filter_ == {"name": "Sales"}
    assert options == {"page": 2, "limit": 9, "sortBy": "creationDate", "order": "desc"}
    assert page.results[0].name == "Sales Agent"
    assert page.total_results == 1


@pytest.mark.asyncio
async def test_list_without_filter_sends_empty_objects(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json=page_body([]))

    await JobService(api_client).list()

    params = recorder.requests[0].url.params
    assert params["filter"] == "{}"
    assert params["options"] == "{}"


@pytest.mark.asyncio
async def test_list_accepts_bare_array(api_client: AuthenticatedClient, recorder: ApiRecorder) -> None:
    recorder.handler = lambda request: httpx.Response(
        200, json=[{"id": "c1", "name": "Residential"}, {"id": "c2", "name": "Commercial"}]
    )

    page = await CategoryService(api_client).list()

    assert [item.name for item in page.results] == ["Residential", "Commercial"]
    assert page.page == 1
    assert page.total_pages == 1
    assert page.total_results == 2


@pytest.mark.asyncio
async def test_list_accepts_results_without_paging(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json={"results": [JOB]})

    page = await JobService(api_client).list()

    assert page.total_results == 1
    assert page.limit == 1


@pytest.mark.asyncio
async def test_list_rejects_unexpected_shape(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json=page_body([{"id": "j1"}]))

    with pytest.raises(ServerError) as err:
        await JobService(api_client).list()

    assert err.value.code == "invalid_response"


@pytest.mark.asyncio
async def test_get_unwraps_property_envelope(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json={"property": PROPERTY})

    item = await PropertyService(api_client).get("p1")

    assert item.id == "p1"
    assert item.status is PropertyStatus.OFF_PLAN
    assert item.size_area == Known("1,200 sqft")
    assert recorder.paths() == [("GET", "/properties/p1")]


@pytest.mark.asyncio
async def test_property_object_fields_are_malformed_not_errors(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    body = dict(PROPERTY, locationIframe={"src": "https://maps"}, handoverBy=None)
    recorder.handler = lambda request: httpx.Response(200, json=body)

    item = await PropertyService(api_client).get("p1")

    assert isinstance(item.location_iframe, Malformed)
    assert text_or_default(item.location_iframe, "N/A") == "N/A"
    assert item.handover_by is None
    assert item.to_wire()["locationIframe"] == {"src": "https://maps"}


@pytest.mark.asyncio
async def test_get_missing_item(api_client: AuthenticatedClient, recorder: ApiRecorder) -> None:
    recorder.handler = lambda request: httpx.Response(404, json={"message": "Property not found"})

    with pytest.raises(NotFoundError) as err:
        await PropertyService(api_client).get("missing")

    assert err.value.message == "Resource not found."


@pytest.mark.asyncio
async def test_create_property_with_images_is_multipart(
    api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(201, json={"property": PROPERTY})
    payload = PropertyWrite(
        name="Marina Villa",
        status=PropertyStatus.OFF_PLAN,
        price_from=1200000,
        property_types=["t1", "t2"],
    )

    created = await PropertyService(api_client).create(payload, images=[JPEG, JPEG])

    request = recorder.requests[0]
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    names = part_names(request)
    assert names.count("images") == 2
    assert names.count("propertyTypes[]") == 2
    assert "replaceImages" not in names
    assert request.headers["Authorization"] == "Bearer access-0"
    assert created.name == "Marina Villa"


@pytest.mark.asyncio
async def test_update_property_with_images_sends_replace_flag(
    api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json={"property": PROPERTY})

    await PropertyService(api_client).update(
        "p1", PropertyWrite(name="Marina Villa"), images=[JPEG], replace_images=False
    )

    request = recorder.requests[0]
    assert request.method == "PATCH"
    assert "replaceImages" in part_names(request)
    assert b"false" in request.content


@pytest.mark.asyncio
async def test_update_property_without_images_is_json(
    api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json={"property": PROPERTY})

    await PropertyService(api_client).update("p1", PropertyWrite(beds=3, property_types=["t1"]))

    request = recorder.requests[0]
    assert json.loads(request.content) == {"beds": 3, "propertyTypes": ["t1"]}


@pytest.mark.asyncio
async def test_property_write_requires_session(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    with pytest.raises(AuthenticationRequiredError):
        await PropertyService(api_client).create(PropertyWrite(name="x"), images=[JPEG])

    assert recorder.requests == []


@pytest.mark.asyncio
async def test_remote_conflict_becomes_validation_error(
    api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(409, json={"message": "Name already exists"})

    with pytest.raises(ValidationError) as err:
        await JobService(api_client).create({"name": "Sales Agent", "type": "full time"})

    assert err.value.message == "Name already exists"
    assert err.value.context == {"upstream_status": 409}


@pytest.mark.asyncio
async def test_delete(api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder) -> None:
    recorder.handler = lambda request: httpx.Response(204)

    await JobService(api_client).delete("j1")

    assert recorder.paths() == [("DELETE", "/jobs/j1")]


@pytest.mark.asyncio
async def test_application_is_public_multipart_with_cv(
    api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(
        201,
        json={
            "id": "a1",
            "fullName": "Jane Doe",
            "emailAddress": "jane@example.com",
            "jobId": {"id": "j1", "name": "Sales Agent"},
        },
    )
    application = ApplicationCreate(
        full_name="Jane Doe",
        email_address="jane@example.com",
        job_id="j1",
        years_of_experience=4,
    )

    created = await ApplicationService(api_client).create(application, cv=PDF)

    request = recorder.requests[0]
    assert "Authorization" not in request.headers
    names = part_names(request)
    assert names.count("cv") == 1
    assert {"fullName", "emailAddress", "jobId", "yearsOfExperience"} <= set(names)
    assert created.job_name == "Sales Agent"


@pytest.mark.asyncio
async def test_application_create_without_session_is_allowed(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(
        201, json={"id": "a1", "fullName": "Jane Doe", "emailAddress": "jane@example.com"}
    )
    application = ApplicationCreate(
        full_name="Jane Doe", email_address="jane@example.com", job_id="j1", years_of_experience=0
    )

    await ApplicationService(api_client).create(application, cv=PDF)

    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_download_cv(
    api_client: AuthenticatedClient, signed_in: SessionStore, recorder: ApiRecorder, tmp_path: Path
) -> None:
    recorder.handler = lambda request: httpx.Response(200, content=b"%PDF-1.7 content")
    service = ApplicationService(api_client)

    target = await service.download_cv("cvs/jane.pdf", tmp_path / "out" / "jane.pdf")

    assert target.read_bytes() == b"%PDF-1.7 content"
    assert recorder.paths() == [("GET", "/file/download/cvs/jane.pdf")]


def test_file_urls(api_client: AuthenticatedClient) -> None:
    assert (
        PropertyService(api_client).image_url("abc.jpg")
        == "http://api.test/file/preview/property/abc.jpg"
    )
    assert (
        ApplicationService(api_client).cv_download_url("cvs/x.pdf")
        == "http://api.test/file/download/cvs/x.pdf"
    )


@pytest.mark.asyncio
async def test_contact_accepts_empty_body(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200)

    result = await ContactService(api_client).send(
        ContactMessage(name="Sam", email="sam@example.com", message="Hello")
    )

    assert result.message is None
    assert json.loads(recorder.requests[0].content) == {
        "name": "Sam",
        "email": "sam@example.com",
        "message": "Hello",
    }


@pytest.mark.asyncio
async def test_property_filter_wire_names(
    api_client: AuthenticatedClient, recorder: ApiRecorder
) -> None:
    recorder.handler = lambda request: httpx.Response(200, json=page_body([]))

    await PropertyService(api_client).list(
        PropertyFilter(status=PropertyStatus.FOR_RENT, beds_gt=4, min_price=1000, property_types=["t1"])
    )

    filter_, _ = decode_list_query(dict(recorder.requests[0].url.params))
    assert filter_ == {"status": "for rent", "bedsGt": 4, "minPrice": 1000, "propertyTypes": ["t1"]}
