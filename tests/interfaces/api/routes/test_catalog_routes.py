"""Campaigns, social networks, dashboard and service endpoints."""

from __future__ import annotations


def _network_id(client, headers, name="Facebook"):
    networks = client.get("/social-networks", headers=headers).json()["data"]
    return next(network["id"] for network in networks if network["name"] == name)


def test_social_networks_are_seeded(client, agent, auth_headers):
    response = client.get("/social-networks", headers=auth_headers(agent))

    names = {network["name"] for network in response.json()["data"]}
    assert {"Facebook", "Instagram", "LinkedIn", "WhatsApp", "Sitio Web"} <= names
    assert len(names) == 10


def test_admin_manages_social_networks(client, admin, agent, auth_headers):
    headers = auth_headers(admin)

    created = client.post(
        "/social-networks", json={"name": "Threads", "color": "#000000"}, headers=headers
    )
    network_id = created.json()["data"]["id"]
    duplicate = client.post("/social-networks", json={"name": "Threads"}, headers=headers)
    disabled = client.patch(
        f"/social-networks/{network_id}", json={"is_active": False}, headers=headers
    )
    active = client.get("/social-networks", headers=headers).json()["data"]
    everything = client.get(
        "/social-networks", params={"active_only": "false"}, headers=headers
    ).json()["data"]
    forbidden = client.post("/social-networks", json={"name": "Otra"}, headers=auth_headers(agent))

    assert created.status_code == 201
    assert duplicate.status_code == 400
    assert disabled.json()["data"]["is_active"] is False
    assert "Threads" not in {n["name"] for n in active}
    assert "Threads" in {n["name"] for n in everything}
    assert forbidden.status_code == 403


def test_update_unknown_social_network(client, admin, auth_headers):
    response = client.patch(
        "/social-networks/9999", json={"name": "Nada"}, headers=auth_headers(admin)
    )

    assert response.status_code == 404


def test_campaign_lifecycle(client, admin, agent, auth_headers):
    headers = auth_headers(admin)
    network_id = _network_id(client, headers)

    created = client.post(
        "/campaigns",
        json={
            "name": "Lanzamiento",
            "social_network_id": network_id,
            "budget": 2500.5,
            "start_date": "2024-01-01",
            "end_date": "2024-02-01",
        },
        headers=headers,
    )
    campaign = created.json()["data"]
    detail = client.get(f"/campaigns/{campaign['id']}", headers=auth_headers(agent))
    listing = client.get("/campaigns", params={"active": "true"}, headers=auth_headers(agent))

    assert created.status_code == 201
    assert campaign["social_network_name"] == "Facebook"
    assert campaign["budget"] == 2500.5
    assert campaign["created_by"] == admin.id
    assert detail.json()["data"]["name"] == "Lanzamiento"
    assert [c["id"] for c in listing.json()["data"]] == [campaign["id"]]


def test_campaign_validation(client, admin, agent, auth_headers):
    headers = auth_headers(admin)

    unknown_network = client.post(
        "/campaigns", json={"name": "X", "social_network_id": 9999}, headers=headers
    )
    inverted_dates = client.post(
        "/campaigns",
        json={"name": "X", "start_date": "2024-02-01", "end_date": "2024-01-01"},
        headers=headers,
    )
    by_agent = client.post("/campaigns", json={"name": "X"}, headers=auth_headers(agent))
    missing = client.get("/campaigns/9999", headers=headers)

    assert unknown_network.status_code == 400
    assert inverted_dates.status_code == 400
    assert by_agent.status_code == 403
    assert missing.status_code == 404


def test_lead_can_reference_a_campaign(client, admin, auth_headers):
    headers = auth_headers(admin)
    campaign_id = client.post("/campaigns", json={"name": "Verano"}, headers=headers).json()[
        "data"
    ]["id"]

    lead = client.post(
        "/leads", json={"full_name": "Ana", "campaign_id": campaign_id}, headers=headers
    ).json()["data"]

    assert lead["campaign_name"] == "Verano"


def test_dashboard_stats_for_the_caller(client, db_session, agent, admin, auth_headers):
    headers = auth_headers(agent)
    statuses = client.get("/leads/statuses", headers=headers).json()["data"]
    won = next(s["id"] for s in statuses if s["is_won"])
    client.post("/leads", json={"full_name": "Ana", "estimated_value": 1000}, headers=headers)
    closed = client.post(
        "/leads", json={"full_name": "Bruno", "estimated_value": 400}, headers=headers
    ).json()["data"]
    client.patch(f"/leads/{closed['id']}/status", json={"status_id": won}, headers=headers)
    client.post("/leads", json={"full_name": "Carla", "estimated_value": 999}, headers=auth_headers(admin))

    response = client.get("/dashboard/stats", headers=headers)

    assert response.json()["data"] == {
        "total_leads": 1,
        "converted_leads": 1,
        "unread_notifications": 1,
        "pipeline_value": 1000.0,
        "won_value": 400.0,
    }


def test_health_and_index(client):
    health = client.get("/health")
    index = client.get("/")

    assert health.json()["success"] is True
    assert "timestamp" in health.json()
    assert index.json()["endpoints"]["notifications_ws"] == "/notifications/ws"


def test_unknown_endpoint_uses_the_error_envelope(client):
    response = client.get("/no-such-endpoint")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Endpoint no encontrado"}
