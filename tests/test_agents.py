def _new_agent(**overrides):
    payload = {
        "name": "Michael Chen",
        "email": "michael@bnrhomes.com",
        "password": "secret-pass",
        "phone": "+91 90000 98765",
        "agentInfo": {"specialties": ["Residential"], "languages": ["English", "Telugu"], "experience": "3 years"},
    }
    payload.update(overrides)
    return payload


def test_agents_are_admin_only(client, agent_headers):
    assert client.get("/api/agents").status_code == 401
    assert client.get("/api/agents", headers=agent_headers).status_code == 403


def test_create_and_list_agents(client, admin_headers, agent):
    resp = client.post("/api/agents", json=_new_agent(), headers=admin_headers)
    assert resp.status_code == 201
    created = resp.json()
    assert created["role"] == "agent"
    assert created["status"] == "active"
    assert created["agentInfo"]["languages"] == ["English", "Telugu"]
    assert "passwordHash" not in created

    listed = client.get("/api/agents", headers=admin_headers).json()
    assert [a["email"] for a in listed] == ["michael@bnrhomes.com", agent.email]

    found = client.get("/api/agents", params={"search": "sarah"}, headers=admin_headers).json()
    assert [a["id"] for a in found] == [agent.id]


def test_create_agent_conflicts_and_bad_status(client, admin_headers, agent):
    resp = client.post("/api/agents", json=_new_agent(email=agent.email), headers=admin_headers)
    assert resp.status_code == 409
    resp = client.post("/api/agents", json=_new_agent(status="retired"), headers=admin_headers)
    assert resp.status_code == 400


def test_new_agent_can_log_in(client, admin_headers):
    client.post("/api/agents", json=_new_agent(), headers=admin_headers)
    resp = client.post("/api/auth/login", json={"email": "michael@bnrhomes.com", "password": "secret-pass"})
    assert resp.status_code == 200
    assert resp.json()["user"]["role"] == "agent"


def test_update_agent_keeps_password_when_blank(client, admin_headers, agent):
    resp = client.put(
        f"/api/agents/{agent.id}",
        json={"name": "Sarah J.", "password": "", "agentInfo": {"bio": "Luxury homes"}},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Sarah J."
    assert body["agentInfo"]["bio"] == "Luxury homes"
    assert body["agentInfo"]["experience"] == "5 years"
    resp = client.post("/api/auth/login", json={"email": agent.email, "password": "agentpass123"})
    assert resp.status_code == 200


def test_update_agent_email_conflict(client, admin_headers, admin, agent):
    resp = client.put(f"/api/agents/{agent.id}", json={"email": admin.email}, headers=admin_headers)
    assert resp.status_code == 409


def test_change_agent_status(client, admin_headers, agent):
    url = f"/api/agents/{agent.id}/status"
    assert client.patch(url, json={"status": "bogus"}, headers=admin_headers).status_code == 400
    resp = client.patch(url, json={"status": "inactive"}, headers=admin_headers)
    assert resp.json()["status"] == "inactive"
    assert client.get("/api/agents", params={"status": "active"}, headers=admin_headers).json() == []


def test_admin_is_not_an_agent(client, admin_headers, admin):
    assert client.get(f"/api/agents/{admin.id}", headers=admin_headers).status_code == 404


def test_delete_agent_unassigns_properties(client, admin_headers, agent, sample_property):
    resp = client.delete(f"/api/agents/{agent.id}", headers=admin_headers)
    assert resp.json() == {"message": "Agent deleted successfully"}
    data = client.get(f"/api/properties/{sample_property.id}").json()["data"]
    assert data["assignedAgents"] == []
    assert client.delete(f"/api/agents/{agent.id}", headers=admin_headers).status_code == 404


def test_assign_properties_from_agent_side(client, admin_headers, agent, sample_property):
    url = f"/api/agents/{agent.id}/assign-properties"
    assert client.put(url, json={"propertyIds": 5}, headers=admin_headers).status_code == 400
    assert client.put(url, json={"propertyIds": [404]}, headers=admin_headers).status_code == 404

    resp = client.put(url, json={"propertyIds": []}, headers=admin_headers)
    assert resp.status_code == 200
    data = client.get(f"/api/properties/{sample_property.id}").json()["data"]
    assert data["assignedAgents"] == []

    client.put(url, json={"propertyIds": [sample_property.id]}, headers=admin_headers)
    agent_view = client.get(f"/api/agents/{agent.id}", headers=admin_headers).json()
    assert [p["id"] for p in agent_view["assignedProperties"]] == [sample_property.id]
