"""Commodity Routes — authenticated, uniqueness-checked create and list."""

from types import SimpleNamespace

from freight.core.tokens import TokenIssuer

URL = "/api/commodity"


async def test_requires_bearer_token(client):
    res = await client.post(URL, json={"name": "Steel", "code": "STL"})
    assert res.status_code == 401


async def test_rejects_token_signed_elsewhere(client):
    forged = TokenIssuer("someone-elses-secret").issue(
        SimpleNamespace(id=1, email="x@y.com", full_name="X"),
    ).token
    res = await client.get(URL, headers={"Authorization": f"Bearer {forged}"})
    assert res.status_code == 401


async def test_create_and_list(client, auth_headers):
    res = await client.post(URL, json={"name": "Steel", "code": "STL"}, headers=auth_headers)
    assert res.status_code == 200
    created = res.json()["data"]
    assert created["name"] == "Steel" and created["code"] == "STL"

    listed = (await client.get(URL, headers=auth_headers)).json()["data"]
    assert [c["code"] for c in listed] == ["STL"]


async def test_or_semantics_over_http(client, auth_headers):
    await client.post(URL, json={"name": "Steel", "code": "STL"}, headers=auth_headers)

    same_code = await client.post(URL, json={"name": "Iron", "code": "STL"}, headers=auth_headers)
    same_name = await client.post(URL, json={"name": "Steel", "code": "IRN"}, headers=auth_headers)
    novel = await client.post(URL, json={"name": "Copper", "code": "CPR"}, headers=auth_headers)

    assert same_code.status_code == 409
    assert same_name.status_code == 409
    assert novel.status_code == 200


async def test_blank_code_is_400(client, auth_headers):
    res = await client.post(URL, json={"name": "Steel", "code": ""}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid commodity data."
