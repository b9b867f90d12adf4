"""
GraphQL reads behind the operator session.
"""

from conftest import seed


def run_query(client, query):
    response = client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    return response.json()


def test_requires_session(client):
    body = run_query(client, "{ dashboardCounts { users videos } }")
    assert body["data"] is None
    assert body["errors"][0]["message"] == "Not authenticated"


def test_dashboard_counts(operator, mock_db):
    seed(mock_db, "users", {"_id": "u1"})
    body = run_query(operator, "{ dashboardCounts { users videos } }")
    assert body["data"]["dashboardCounts"] == {"users": 1, "videos": 0}


def test_channels_search(operator, mock_db):
    seed(
        mock_db, "channels",
        {"_id": "c1", "handle": "ravi", "fullName": "Ravi Kumar", "isBanned": True},
        {"_id": "c2", "handle": "meera", "fullName": "Meera Shah"},
    )
    body = run_query(operator, '{ channels(search: "rav") { id fullName status initials } }')
    assert body["data"]["channels"] == [
        {"id": "c1", "fullName": "Ravi Kumar", "status": "Banned", "initials": "RK"}
    ]


def test_pending_campaigns(operator, mock_db):
    seed(
        mock_db, "ad_campaigns",
        {"_id": "a1", "title": "Diwali Sale", "status": "Pending"},
        {"_id": "a2", "title": "Live", "status": "Active"},
    )
    body = run_query(operator, "{ pendingCampaigns { id title } }")
    assert body["data"]["pendingCampaigns"] == [{"id": "a1", "title": "Diwali Sale"}]
