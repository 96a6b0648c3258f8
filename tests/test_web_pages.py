"""Tests for the server-rendered pages."""
import re



async def test_root_redirects_to_users_page(client):
    response = await client.get("/")

    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/web/users"


async def test_users_page_lists_users_and_counts(client, user_payload):
    await client.post("/api/users", json=user_payload)

    response = await client.get("/web/users")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "john@example.com" in response.text
    assert '<strong id="total-users">1</strong>' in response.text
    assert "Manager" in response.text


async def test_users_page_without_users(client):
    response = await client.get("/web/users")

    assert response.status_code == 200
    assert "No users yet" in response.text


async def test_new_user_form_shows_group_checkboxes(client):
    response = await client.get("/web/users/new")

    assert response.status_code == 200
    for group_id in (1, 2, 3, 4):
        assert f'name="group_ids" value="{group_id}"' in response.text


async def test_create_user_from_form_redirects(client):
    response = await client.post("/web/users/new", data={
        "first_name": "Jane",
        "last_name": "Roe",
        "email": "jane@example.com",
        "phone_number": "",
        "group_ids": ["2", "3"],
    })

    assert response.status_code == 303
    assert response.headers["location"] == "/web/users"

    users = (await client.get("/api/users")).json()
    assert [group["id"] for group in users[0]["groups"]] == [2, 3]
    assert users[0]["phoneNumber"] is None


async def test_create_user_from_form_with_taken_email_rerenders_form(client, user_payload):
    await client.post("/api/users", json=user_payload)

    response = await client.post("/web/users/new", data={
        "first_name": "Other",
        "last_name": "Person",
        "email": "john@example.com",
    })

    assert response.status_code == 400
    assert "already exists" in response.text
    assert 'value="Other"' in response.text
    assert (await client.get("/api/users/count")).json() == 1


async def test_create_user_from_form_with_invalid_email_rerenders_form(client):
    response = await client.post("/web/users/new", data={
        "first_name": "Jane",
        "last_name": "Roe",
        "email": "nope",
    })

    assert response.status_code == 400
    assert "not a valid email address" in response.text
    assert (await client.get("/api/users/count")).json() == 0


async def test_delete_user_from_page(client, user_payload):
    created = (await client.post("/api/users", json=user_payload)).json()

    response = await client.post(f"/web/users/{created['id']}/delete")

    assert response.status_code == 303
    assert response.headers["location"] == "/web/users"
    assert (await client.get("/api/users/count")).json() == 0


async def test_groups_page_lists_permissions(client):
    response = await client.get("/web/groups")

    assert response.status_code == 200
    assert "Level 2" in response.text
    assert "ManageSystem" in response.text


async def test_users_page_links_to_edit_form(client, user_payload):
    created = (await client.post("/api/users", json=user_payload)).json()

    response = await client.get("/web/users")

    assert f'href="/web/users/{created["id"]}/edit"' in response.text


async def test_edit_form_is_prefilled(client, user_payload):
    user_payload["groupIds"] = [2, 4]
    created = (await client.post("/api/users", json=user_payload)).json()

    response = await client.get(f"/web/users/{created['id']}/edit")

    assert response.status_code == 200
    assert f'action="/web/users/{created["id"]}/edit"' in response.text
    assert 'value="John"' in response.text
    assert 'value="john@example.com"' in response.text
    assert 'value="+1 555 0100"' in response.text
    assert re.search(r'name="is_active" value="true"\s+checked', response.text)
    assert re.search(r'name="group_ids" value="2"\s+checked', response.text)
    assert re.search(r'name="group_ids" value="4"\s+checked', response.text)
    assert not re.search(r'name="group_ids" value="1"\s+checked', response.text)


async def test_edit_form_for_missing_user_returns_404(client):
    response = await client.get("/web/users/4242/edit")

    assert response.status_code == 404


async def test_update_user_from_form_redirects(client, user_payload):
    created = (await client.post("/api/users", json=user_payload)).json()

    # Omitting is_active is how an unchecked box is submitted
    response = await client.post(f"/web/users/{created['id']}/edit", data={
        "first_name": "Johnny",
        "last_name": "Doe",
        "email": "john@example.com",
        "phone_number": "",
        "group_ids": ["3", "4"],
    })

    assert response.status_code == 303
    assert response.headers["location"] == "/web/users"

    user = (await client.get(f"/api/users/{created['id']}")).json()
    assert user["firstName"] == "Johnny"
    assert user["isActive"] is False
    assert user["phoneNumber"] is None
    assert [group["id"] for group in user["groups"]] == [3, 4]


async def test_update_user_from_form_keeps_user_active_when_checked(client, user_payload):
    created = (await client.post("/api/users", json=user_payload)).json()

    response = await client.post(f"/web/users/{created['id']}/edit", data={
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "is_active": "true",
    })

    assert response.status_code == 303
    user = (await client.get(f"/api/users/{created['id']}")).json()
    assert user["isActive"] is True
    assert user["groups"] == []


async def test_update_user_from_form_with_taken_email_rerenders_form(client, user_payload):
    john = (await client.post("/api/users", json=user_payload)).json()
    user_payload["email"] = "jane@example.com"
    await client.post("/api/users", json=user_payload)

    response = await client.post(f"/web/users/{john['id']}/edit", data={
        "first_name": "John",
        "last_name": "Doe",
        "email": "jane@example.com",
        "is_active": "true",
    })

    assert response.status_code == 400
    assert "already exists" in response.text
    assert f'action="/web/users/{john["id"]}/edit"' in response.text
    assert (await client.get(f"/api/users/{john['id']}")).json()["email"] == "john@example.com"


async def test_update_user_from_form_with_unknown_group_rerenders_form(client, user_payload):
    created = (await client.post("/api/users", json=user_payload)).json()

    response = await client.post(f"/web/users/{created['id']}/edit", data={
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "is_active": "true",
        "group_ids": ["99"],
    })

    assert response.status_code == 400
    assert "99" in response.text
    user = (await client.get(f"/api/users/{created['id']}")).json()
    assert [group["id"] for group in user["groups"]] == [1]
