"""Memory Backend Routes: the API behaves the same with STORAGE_BACKEND=memory.

Tests cover:
    - get_employee_repository yields the process-wide memory store
    - ids never reused after delete
    - case-insensitive conflicts
    - out-of-range ids and non-ASCII emails behave as on the SQL backend
"""

from tests.factories import make_payload

URL = "/api/employees"


async def test_create_list_delete_cycle(memory_client):
    res = await memory_client.post(URL, json=make_payload())
    assert res.status_code == 201
    assert res.json()["id"] == 1

    assert (await memory_client.delete(f"{URL}/1")).status_code == 200
    res = await memory_client.post(URL, json=make_payload())
    assert res.json()["id"] == 2
    assert [e["id"] for e in (await memory_client.get(URL)).json()] == [2]


async def test_conflict_is_case_insensitive(memory_client):
    await memory_client.post(URL, json=make_payload())
    res = await memory_client.post(URL, json=make_payload(email="Alice@CO.com"))
    assert res.status_code == 409


async def test_ids_beyond_64_bits_are_not_found(memory_client):
    res = await memory_client.get(f"{URL}/99999999999999999999")
    assert res.status_code == 404


async def test_non_ascii_email_rejected_like_sql_backend(memory_client):
    res = await memory_client.post(URL, json=make_payload(email="éva@co.com"))
    assert res.status_code == 400
