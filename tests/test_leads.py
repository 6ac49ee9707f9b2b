from app.models import Lead


def _lead_payload(property_id, **overrides):
    payload = {
        "name": "Ravi Kumar",
        "email": "ravi@example.com",
        "phone": "+91 98888 11111",
        "message": "Is the villa still available?",
        "propertyId": property_id,
        "source": "website",
    }
    payload.update(overrides)
    return payload


def test_public_lead_inherits_property_agents(client, sample_property, agent):
    resp = client.post("/api/leads", json=_lead_payload(sample_property.id))
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["status"] == "new"
    assert data["priority"] == "low"
    assert data["notes"] == []
    assert data["propertyId"] == {
        "id": sample_property.id,
        "_id": sample_property.id,
        "title": "Garden Villa",
        "type": "villa",
    }
    assert data["assignedAgents"] == [
        {"id": agent.id, "_id": agent.id, "name": agent.name, "email": agent.email}
    ]


def test_create_lead_validation(client, sample_property):
    resp = client.post("/api/leads", json=_lead_payload(sample_property.id, source=None))
    assert resp.status_code == 400
    assert client.post("/api/leads", json=_lead_payload(9999)).status_code == 404
    resp = client.post("/api/leads", json=_lead_payload(sample_property.id, priority="urgent"))
    assert resp.status_code == 400


def test_list_leads_is_admin_only_and_filters_status(client, db, admin_headers, agent_headers, sample_property):
    db.add_all([
        Lead(name="A", email="a@x.com", source="website", status="new"),
        Lead(name="B", email="b@x.com", source="website", status="closed"),
    ])
    db.commit()

    assert client.get("/api/leads").status_code == 401
    assert client.get("/api/leads", headers=agent_headers).status_code == 403

    all_leads = client.get("/api/leads", headers=admin_headers).json()["data"]
    assert [L["name"] for L in all_leads] == ["B", "A"]
    closed = client.get("/api/leads", params={"status": "closed"}, headers=admin_headers).json()["data"]
    assert [L["name"] for L in closed] == ["B"]
    # unknown status is ignored
    assert len(client.get("/api/leads", params={"status": "lost"}, headers=admin_headers).json()["data"]) == 2


def test_update_lead(client, admin_headers, sample_property, agent):
    lead_id = client.post("/api/leads", json=_lead_payload(sample_property.id)).json()["data"]["id"]
    resp = client.put(
        f"/api/leads/{lead_id}",
        json={
            "status": "contacted",
            "priority": "high",
            "notes": ["Called on Monday"],
            "followUpDate": "2026-11-01T10:00:00Z",
            "assignedAgents": [],
        },
        headers=admin_headers,
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["status"] == "contacted"
    assert data["priority"] == "high"
    assert data["notes"] == ["Called on Monday"]
    assert data["followUpDate"].startswith("2026-11-01T10:00:00")
    assert data["assignedAgents"] == []

    resp = client.put(f"/api/leads/{lead_id}", json={"assignedAgents": [agent.id]}, headers=admin_headers)
    assert [a["id"] for a in resp.json()["data"]["assignedAgents"]] == [agent.id]


def test_update_lead_rejects_bad_values(client, admin_headers, sample_property):
    lead_id = client.post("/api/leads", json=_lead_payload(sample_property.id)).json()["data"]["id"]
    url = f"/api/leads/{lead_id}"
    assert client.put(url, json={"status": "won"}, headers=admin_headers).status_code == 400
    assert client.put(url, json={"assignedAgents": [9999]}, headers=admin_headers).status_code == 404
    assert client.put("/api/leads/9999", json={"status": "new"}, headers=admin_headers).status_code == 404


def test_delete_lead(client, admin_headers, sample_property):
    lead_id = client.post("/api/leads", json=_lead_payload(sample_property.id)).json()["data"]["id"]
    assert client.delete(f"/api/leads/{lead_id}", headers=admin_headers).json() == {"success": True}
    assert client.delete(f"/api/leads/{lead_id}", headers=admin_headers).status_code == 404
