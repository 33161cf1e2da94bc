"""Request Logger — logs the call and never changes the response."""

import logging


async def test_logged_route_records_method_and_path(client, caplog):
    caplog.set_level(logging.INFO, logger="car_doctor.api.dependencies")

    res = await client.get("/services")

    assert res.status_code == 200
    [record] = [
        r for r in caplog.records if r.name == "car_doctor.api.dependencies"
    ]
    assert record.method == "GET"
    assert record.path == "/services"
    assert record.host == "test"


async def test_unlogged_route_records_nothing(client, caplog):
    caplog.set_level(logging.INFO, logger="car_doctor.api.dependencies")

    await client.post("/checkout", json={"email": "a@x.com"})

    assert not [
        r for r in caplog.records if r.name == "car_doctor.api.dependencies"
    ]
