"""User Routes - HTTP contract for /api/users.

Invariants:
    - POST /api/users logs in unless action == "signup"
    - signup -> 201, duplicate -> 409; login -> 200, mismatch -> 401; bad body -> 400
"""

import asyncio


async def test_signup_via_action_returns_201(client):
    res = await client.post(
        "/api/users", json={"username": "a", "password": "p1", "action": "signup"},
    )
    assert res.status_code == 201


async def test_default_action_is_login(client):
    await client.post("/api/users/signup", json={"username": "a", "password": "p1"})
    res = await client.post("/api/users", json={"username": "a", "password": "p1"})
    assert res.status_code == 200


async def test_login_with_wrong_password_returns_401(client):
    await client.post("/api/users/signup", json={"username": "a", "password": "p1"})
    res = await client.post("/api/users", json={"username": "a", "password": "wrong"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_duplicate_signup_returns_409(client):
    body = {"username": "a", "password": "p1", "action": "signup"}
    assert (await client.post("/api/users", json=body)).status_code == 201
    res = await client.post("/api/users", json=body)
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "USERNAME_TAKEN"


async def test_concurrent_signups_one_wins(client):
    responses = await asyncio.gather(*(
        client.post("/api/users/signup", json={"username": "a", "password": f"p{i}"})
        for i in range(8)
    ))
    codes = sorted(r.status_code for r in responses)
    assert codes == [201] + [409] * 7


async def test_login_alias(client):
    await client.post("/api/users/signup", json={"username": "a", "password": "p1"})
    assert (await client.post(
        "/api/users/login", json={"username": "a", "password": "p1"},
    )).status_code == 200
    assert (await client.post(
        "/api/users/login", json={"username": "b", "password": "p1"},
    )).status_code == 401


async def test_missing_password_returns_400(client):
    res = await client.post("/api/users", json={"username": "a"})
    assert res.status_code == 400


async def test_unknown_action_returns_400(client):
    res = await client.post(
        "/api/users", json={"username": "a", "password": "p", "action": "drop"},
    )
    assert res.status_code == 400
