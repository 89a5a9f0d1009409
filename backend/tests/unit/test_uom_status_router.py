"""HTTP tests for the status endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

BASE = "/api/v1/uom-status"


@pytest.mark.asyncio
async def test_create_returns_201_with_body(client: AsyncClient) -> None:
    resp = await client.post(BASE, json={"name": "Active", "description": "In use", "isUsable": True})

    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "name": "Active", "description": "In use", "isUsable": True}


@pytest.mark.asyncio
async def test_create_duplicate_returns_409(client: AsyncClient) -> None:
    await client.post(BASE, json={"name": "Active"})

    resp = await client.post(BASE, json={"name": "Active"})

    assert resp.status_code == 409
    body = resp.json()
    assert body["code"] == 1003
    assert body["value"] == "RESOURCE_CONFLICT"
    assert body["message"] == "UomStatus already exists with name: Active"
    assert body["path"] == BASE
    assert body["timestamp"]


@pytest.mark.asyncio
async def test_create_blank_name_returns_400(client: AsyncClient) -> None:
    resp = await client.post(BASE, json={"name": "   "})

    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == 1002
    assert body["message"].startswith("name: ")


@pytest.mark.asyncio
async def test_get_missing_returns_404(client: AsyncClient) -> None:
    resp = await client.get(f"{BASE}/999")

    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == 1004
    assert body["value"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "UomStatus not found with id: 999"


@pytest.mark.asyncio
async def test_non_positive_id_returns_400(client: AsyncClient) -> None:
    resp = await client.get(f"{BASE}/0")

    assert resp.status_code == 400
    assert resp.json()["code"] == 1002


@pytest.mark.asyncio
async def test_list_returns_page(client: AsyncClient, add_status) -> None:
    for name in ("Retired", "Active", "Draft"):
        add_status(name)

    resp = await client.get(BASE, params={"size": 2})

    assert resp.status_code == 200
    body = resp.json()
    assert [item["name"] for item in body["content"]] == ["Active", "Draft"]
    assert body["page"] == 0
    assert body["size"] == 2
    assert body["totalElements"] == 3
    assert body["totalPages"] == 2
    assert body["numberOfElements"] == 2
    assert body["first"] is True
    assert body["last"] is False
    assert body["empty"] is False


@pytest.mark.asyncio
async def test_list_with_repeated_sort(client: AsyncClient, add_status) -> None:
    add_status("B", is_usable=False)
    add_status("A", is_usable=True)
    add_status("C", is_usable=True)

    resp = await client.get(BASE, params=[("sort", "isUsable,desc"), ("sort", "name,desc")])

    assert [item["name"] for item in resp.json()["content"]] == ["C", "A", "B"]


@pytest.mark.asyncio
async def test_list_with_unknown_sort_returns_400(client: AsyncClient) -> None:
    resp = await client.get(BASE, params={"sort": "colour"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Provided data is invalid: Unknown sort property 'colour'"


@pytest.mark.asyncio
async def test_search(client: AsyncClient, add_status) -> None:
    add_status("Active")
    add_status("Inactive")
    add_status("Draft")

    resp = await client.get(f"{BASE}/search", params={"name": "act"})

    assert resp.status_code == 200
    assert [item["name"] for item in resp.json()["content"]] == ["Active", "Inactive"]


@pytest.mark.asyncio
async def test_search_without_name_reports_missing_parameter(client: AsyncClient) -> None:
    resp = await client.get(f"{BASE}/search")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing parameter: name"


@pytest.mark.asyncio
async def test_filter_by_usability(client: AsyncClient, add_status) -> None:
    add_status("Active")
    add_status("Retired", is_usable=False)

    resp = await client.get(f"{BASE}/filter", params={"isUsable": "false"})

    assert [item["name"] for item in resp.json()["content"]] == ["Retired"]


@pytest.mark.asyncio
async def test_check_name(client: AsyncClient, add_status) -> None:
    add_status("Active")

    taken = await client.get(f"{BASE}/check-name", params={"name": "Active"})
    free = await client.get(f"{BASE}/check-name", params={"name": "Archived"})

    assert taken.json() is True
    assert free.json() is False


@pytest.mark.asyncio
async def test_update(client: AsyncClient, add_status) -> None:
    row = add_status("Active", is_usable=False)

    resp = await client.put(f"{BASE}/{row.id}", json={"name": "Enabled", "isUsable": True})

    assert resp.status_code == 200
    assert resp.json() == {"id": row.id, "name": "Enabled", "description": None, "isUsable": False}


@pytest.mark.asyncio
async def test_update_conflict(client: AsyncClient, add_status) -> None:
    add_status("Active")
    row = add_status("Draft")

    resp = await client.put(f"{BASE}/{row.id}", json={"name": "Active"})

    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_change_usability_then_get(client: AsyncClient, add_status) -> None:
    row = add_status("Active")

    patch = await client.patch(f"{BASE}/{row.id}/status", params={"isUsable": "false"})
    resp = await client.get(f"{BASE}/{row.id}")

    assert patch.status_code == 204
    assert patch.content == b""
    assert resp.json()["isUsable"] is False


@pytest.mark.asyncio
async def test_change_usability_without_flag(client: AsyncClient, add_status) -> None:
    row = add_status("Active")

    resp = await client.patch(f"{BASE}/{row.id}/status")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing parameter: isUsable"


@pytest.mark.asyncio
async def test_delete(client: AsyncClient, add_status) -> None:
    row = add_status("Active")

    resp = await client.delete(f"{BASE}/{row.id}")
    missing = await client.get(f"{BASE}/{row.id}")

    assert resp.status_code == 204
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_referenced_status_returns_500(
    client: AsyncClient, add_status, add_uom
) -> None:
    status = add_status("Active")
    add_uom("Kilogram", status)

    resp = await client.delete(f"{BASE}/{status.id}")

    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == 1006
    assert body["message"].startswith("An unexpected error occurred: ")


@pytest.mark.asyncio
async def test_unsupported_method_returns_405(client: AsyncClient) -> None:
    resp = await client.delete(BASE)

    assert resp.status_code == 405
    body = resp.json()
    assert body["code"] == 1002
    assert body["message"] == "HTTP method not supported: DELETE"
