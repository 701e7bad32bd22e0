import logging

import pytest

SF = (37.7749, -122.4194)


def search(client, lat=SF[0], lng=SF[1], user_id=None, prefix=""):
    params = {"lat": lat, "lng": lng}
    if user_id is not None:
        params["userId"] = user_id
    return client.get(f"{prefix}/rides/search", query_string=params)


def test_publish_ride(publish):
    res = publish(transportMode="DRIVER", passengers=3, destination="Market St")
    assert res.status_code == 201
    assert res.get_json()["rideId"]


@pytest.mark.parametrize("missing", ["token", "lat", "lng"])
def test_publish_requires_token_and_location(client, missing):
    payload = {"token": "u1", "lat": 1.0, "lng": 2.0}
    payload.pop(missing)
    assert client.post("/rides", json=payload).status_code == 400


@pytest.mark.parametrize("lat, lng", [("abc", 1), (91, 0), (0, 181)])
def test_publish_rejects_invalid_coordinates(publish, lat, lng):
    assert publish(lat=lat, lng=lng).status_code == 400


def test_publish_accepts_zero_coordinates(publish):
    assert publish(lat=0, lng=0).status_code == 201


def test_publish_accepts_string_coordinates(publish):
    assert publish(lat="37.7749", lng="-122.4194", passengers="2").status_code == 201


def test_publish_rejects_unknown_transport_mode(publish):
    assert publish(transportMode="PILOT").status_code == 400


@pytest.mark.parametrize("passengers", [0, -2, "many", 1.5, 101, 10**20, 1e300])
def test_publish_rejects_bad_passenger_count(publish, passengers):
    assert publish(passengers=passengers).status_code == 400


def test_publish_does_not_validate_token_against_users(publish):
    assert publish(token="nobody-signed-up").status_code == 201


def test_search_requires_location(client):
    assert client.get("/rides/search").status_code == 400
    assert client.get("/rides/search", query_string={"lat": 1}).status_code == 400
    assert client.get("/rides/search", query_string={"lat": "x", "lng": 1}).status_code == 400


def test_search_empty(client):
    res = search(client)
    assert res.status_code == 200
    assert res.get_json() == {"matches": []}


def test_search_returns_nearby_ride_with_distance(client, publish):
    publish(token="driver-1", lat=SF[0], lng=SF[1], transportMode="driver", passengers=3, destination="Airport")
    res = search(client, user_id="rider-1")
    assert res.get_json()["matches"] == [
        {"transportMode": "DRIVER", "destination": "Airport", "passengers": 3, "distanceKm": 0.0}
    ]


def test_search_excludes_own_rides(client, publish):
    publish(token="me")
    publish(token="other")
    matches = search(client, user_id="me").get_json()["matches"]
    assert len(matches) == 1


def test_search_excludes_rides_beyond_radius(client, publish):
    publish(token="near", lat=37.80, lng=-122.42)
    publish(token="far", lat=37.3382, lng=-121.8863)  # San Jose
    matches = search(client).get_json()["matches"]
    assert len(matches) == 1
    assert matches[0]["distanceKm"] == pytest.approx(2.79, abs=0.01)


def test_search_keeps_publication_order(client, publish):
    publish(token="a", destination="first", lat=37.79, lng=-122.41)
    publish(token="b", destination="second", lat=SF[0], lng=SF[1])
    matches = search(client).get_json()["matches"]
    assert [m["destination"] for m in matches] == ["first", "second"]


def test_published_defaults(client, publish):
    publish()
    match = search(client).get_json()["matches"][0]
    assert match["passengers"] == 1
    assert match["transportMode"] is None
    assert match["destination"] is None


def test_login_token_publishes_and_filters(client, register, publish):
    register()
    token = client.post("/login", json={"email": "ada@example.com", "password": "s3cret"}).get_json()["token"]
    publish(token=token)
    assert search(client, user_id=token).get_json()["matches"] == []
    assert len(search(client, user_id="someone-else").get_json()["matches"]) == 1


def test_api_prefix_search(client, publish):
    publish(token="a")
    res = search(client, prefix="/api")
    assert res.status_code == 200
    assert len(res.get_json()["matches"]) == 1


def test_unknown_route_is_json(client):
    res = client.get("/nope")
    assert res.status_code == 404
    assert "error" in res.get_json()


def test_publish_accepts_largest_passenger_count(publish):
    assert publish(passengers=100).status_code == 201


def test_search_is_logged_at_info(app, client, publish, caplog):
    publish(token="a")
    with caplog.at_level(logging.INFO, logger=app.logger.name):
        search(client)
    records = [r for r in caplog.records if "returned 1 matches" in r.getMessage()]
    assert records and records[0].levelno == logging.INFO
