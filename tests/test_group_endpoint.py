"""HTTP tests for the /api/groups and /api/health routes."""


async def test_list_groups(client):
    response = await client.get("/api/groups")

    assert response.status_code == 200
    groups = response.json()
    assert [group["name"] for group in groups] == ["Admin", "Level 1", "Level 2", "Manager"]
    assert [p["name"] for p in groups[1]["permissions"]] == ["Read"]
    assert "createdDate" in groups[0]


async def test_get_group(client):
    response = await client.get("/api/groups/3")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Level 2"
    assert [p["id"] for p in body["permissions"]] == [1, 2, 3]


async def test_get_missing_group_returns_404(client):
    response = await client.get("/api/groups/50")

    assert response.status_code == 404
    assert response.json()["detail"] == "Group with ID 50 not found"


async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_openapi_has_no_422_responses(client):
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    for path in response.json()["paths"].values():
        for operation in path.values():
            assert "422" not in operation.get("responses", {})


async def test_out_of_range_group_id_is_a_validation_error(client):
    response = await client.get("/api/groups/99999999999999999999")

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["errors"][0]["field"] == "group_id"


async def test_group_dates_are_returned_in_utc(client):
    groups = (await client.get("/api/groups")).json()

    assert groups[0]["createdDate"].endswith(("Z", "+00:00"))
    assert groups[0]["permissions"][0]["createdDate"].endswith(("Z", "+00:00"))
