"""
Video moderation, ad request review and dashboard totals.
"""

from conftest import fetch, seed


class TestContent:

    def test_list_videos(self, operator, mock_db):
        seed(
            mock_db, "videos",
            {"_id": "v1", "title": "Sunset", "uploaderHandle": "ravi", "viewCount": 1200},
            {"_id": "v2", "title": "Dance", "isFeatured": True, "public_id": "cld/abc"},
        )
        response = operator.get("/api/v1/content/")
        assert response.status_code == 200
        videos = {v["_id"]: v for v in response.json()}
        assert videos["v1"]["uploaderHandle"] == "ravi"
        assert videos["v1"]["viewCount"] == 1200
        assert videos["v2"]["isFeatured"] is True
        assert videos["v2"]["public_id"] == "cld/abc"

    def test_fractional_and_malformed_documents(self, operator, mock_db):
        seed(
            mock_db, "videos",
            {"_id": "v1", "title": "Sunset", "viewCount": 10},
            {"_id": "v2", "title": "Dance", "viewCount": 12.5},
            {"_id": "v3", "title": "Broken", "viewCount": "lots"},
        )
        response = operator.get("/api/v1/content/")
        assert response.status_code == 200
        views = {v["_id"]: v["viewCount"] for v in response.json()}
        assert views == {"v1": 10, "v2": 12.5}

    def test_toggle_featured(self, operator, mock_db):
        seed(mock_db, "videos", {"_id": "v1", "title": "Sunset"})

        response = operator.post("/api/v1/content/v1/feature")
        assert response.json()["message"] == '"Sunset" has been featured.'
        assert fetch(mock_db, "videos", "v1")["isFeatured"] is True

        response = operator.post("/api/v1/content/v1/feature")
        assert response.json()["message"] == '"Sunset" has been unfeatured.'

    def test_delete_video(self, operator, mock_db):
        seed(mock_db, "videos", {"_id": "v1", "title": "Sunset"})

        response = operator.delete("/api/v1/content/v1")
        assert response.status_code == 200
        assert response.json()["message"] == "Content Removed from GloVerse"
        assert fetch(mock_db, "videos", "v1") is None

        assert operator.delete("/api/v1/content/v1").status_code == 404


class TestAdsManager:

    def test_only_pending_campaigns_listed(self, operator, mock_db):
        seed(
            mock_db, "ad_campaigns",
            {"_id": "a1", "title": "Diwali Sale", "status": "Pending", "placement": "Header Banner"},
            {"_id": "a2", "title": "Old", "status": "Active"},
            {"_id": "a3", "title": "Nope", "status": "Rejected"},
        )
        response = operator.get("/api/v1/ads/pending")
        assert [c["_id"] for c in response.json()] == ["a1"]
        assert response.json()[0]["placement"] == "Header Banner"

    def test_malformed_campaign_is_skipped(self, operator, mock_db):
        seed(
            mock_db, "ad_campaigns",
            {"_id": "a1", "status": "Pending", "viewCount": 3.5},
            {"_id": "a2", "status": "Pending", "createdAt": "last tuesday"},
        )
        response = operator.get("/api/v1/ads/pending")
        assert response.status_code == 200
        assert [c["_id"] for c in response.json()] == ["a1"]

    def test_approve_and_reject(self, operator, mock_db):
        seed(
            mock_db, "ad_campaigns",
            {"_id": "a1", "status": "Pending"},
            {"_id": "a2", "status": "Pending"},
        )

        response = operator.post("/api/v1/ads/a1/approve")
        assert response.json()["message"] == "Campaign has been approved."
        assert fetch(mock_db, "ad_campaigns", "a1")["status"] == "Active"

        response = operator.post("/api/v1/ads/a2/reject")
        assert response.json()["message"] == "Campaign has been rejected."
        assert fetch(mock_db, "ad_campaigns", "a2")["status"] == "Rejected"

        assert operator.get("/api/v1/ads/pending").json() == []

    def test_unknown_campaign(self, operator, mock_db):
        assert operator.post("/api/v1/ads/missing/approve").status_code == 404


class TestDashboard:

    def test_stats(self, operator, mock_db):
        seed(mock_db, "users", {"_id": "u1"}, {"_id": "u2"})
        seed(mock_db, "videos", {"_id": "v1"})
        assert operator.get("/api/v1/dashboard/stats").json() == {"users": 2, "videos": 1}

    def test_connection(self, operator, mock_db):
        body = operator.get("/api/v1/dashboard/connection").json()
        assert body["connected"] is True
        assert body["message"] == "Successfully connected to the 'gloverse-d94dc' database."
