def test_get_settings_creates_defaults(client):
    resp = client.get("/api/settings")
    assert resp.status_code == 200
    data = resp.json()
    assert data["siteName"] == "BNRHomes"
    assert data["siteDescription"] == "Your trusted real estate partner"
    assert data["id"] == data["_id"]
    # second read returns the same row
    assert client.get("/api/settings").json()["id"] == data["id"]


def test_update_settings(client, admin_headers):
    assert client.put("/api/settings", json={"siteName": "x"}).status_code == 401
    resp = client.put(
        "/api/settings",
        json={
            "siteName": "BNR Homes",
            "contactPhone": "+91 90000 12345",
            "socialMedia": {"instagram": "https://instagram.com/bnrhomes"},
            "aboutUsPage": {"pageTitle": "About", "statistics": {"happyClients": "500+"}},
        },
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Site settings updated successfully"

    data = client.get("/api/settings").json()
    assert data["siteName"] == "BNR Homes"
    assert data["socialMedia"]["instagram"] == "https://instagram.com/bnrhomes"
    assert data["aboutUsPage"]["statistics"]["happyClients"] == "500+"


def test_create_settings_only_once(client, admin_headers):
    resp = client.post("/api/settings", json={"heroTitle": "Find your home"}, headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["heroTitle"] == "Find your home"
    assert data["siteName"] == "BNRHomes"
    assert data["testimonialsPage"]["testimonials"][0]["name"] == ""
    assert client.post("/api/settings", json={}, headers=admin_headers).status_code == 400


def test_amenity_crud(client, admin_headers):
    resp = client.post("/api/amenities", json={"title": "Gym", "category": "indoor"}, headers=admin_headers)
    assert resp.status_code == 201
    gym = resp.json()["data"]
    assert gym["isActive"] is True
    client.post("/api/amenities", json={"title": "CCTV", "category": "safety"}, headers=admin_headers)
    client.post("/api/amenities", json={"title": "Clubhouse", "category": "building"}, headers=admin_headers)

    listed = client.get("/api/amenities").json()
    assert listed["success"] is True
    assert [a["category"] for a in listed["data"]] == ["building", "indoor", "safety"]

    resp = client.put(f"/api/amenities/{gym['id']}", json={"isActive": False}, headers=admin_headers)
    assert resp.json()["data"]["isActive"] is False
    assert resp.json()["data"]["title"] == "Gym"

    resp = client.delete(f"/api/amenities/{gym['id']}", headers=admin_headers)
    assert resp.json()["success"] is True
    assert client.delete(f"/api/amenities/{gym['id']}", headers=admin_headers).status_code == 404


def test_amenity_validation(client, admin_headers, agent_headers):
    payload = {"title": "Helipad", "category": "aerial"}
    assert client.post("/api/amenities", json=payload, headers=admin_headers).status_code == 422
    payload["category"] = "others"
    assert client.post("/api/amenities", json=payload, headers=agent_headers).status_code == 403


def test_press_release_crud(client, admin_headers):
    first = client.post(
        "/api/press-releases",
        json={"title": "Launch", "image": "/launch.jpg", "gallery": ["/g1.jpg"]},
        headers=admin_headers,
    )
    assert first.status_code == 201
    first_id = first.json()["data"]["id"]
    client.post("/api/press-releases", json={"title": "Award", "image": "/award.jpg"}, headers=admin_headers)

    listed = client.get("/api/press-releases").json()["data"]
    assert [p["title"] for p in listed] == ["Award", "Launch"]
    assert listed[0]["gallery"] == []
    assert listed[1]["published"] is True

    resp = client.put(f"/api/press-releases/{first_id}", json={"title": "Grand Launch"}, headers=admin_headers)
    assert resp.json()["data"]["title"] == "Grand Launch"
    assert resp.json()["data"]["gallery"] == ["/g1.jpg"]

    assert client.get(f"/api/press-releases/{first_id}").json()["data"]["title"] == "Grand Launch"
    assert client.delete(f"/api/press-releases/{first_id}", headers=admin_headers).json()["success"] is True
    assert client.get(f"/api/press-releases/{first_id}").status_code == 404


def test_press_release_requires_admin_and_fields(client, admin_headers):
    assert client.post("/api/press-releases", json={"title": "x", "image": "y"}).status_code == 401
    assert client.post("/api/press-releases", json={"title": "x"}, headers=admin_headers).status_code == 422
