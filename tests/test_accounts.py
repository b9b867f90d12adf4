"""
Channel and GloStar moderation endpoints.
"""

from bson import ObjectId
from passlib.context import CryptContext

from conftest import fetch, seed


def make_account(doc_id, handle, full_name, **extra):
    doc = {"_id": doc_id, "handle": handle, "fullName": full_name}
    doc.update(extra)
    return doc


# ===========================================================================
# Channels (the Users page)
# ===========================================================================

class TestChannels:

    def test_list_and_search(self, operator, mock_db):
        seed(
            mock_db, "channels",
            make_account("c1", "ravi_creates", "Ravi Kumar", isBanned=True),
            make_account("c2", "meera.dance", "Meera Shah"),
            {"_id": "c3", "fullName": "No Handle"},
        )

        response = operator.get("/api/v1/channels/")
        assert response.status_code == 200
        channels = {c["_id"]: c for c in response.json()}
        assert set(channels) == {"c1", "c2", "c3"}
        assert channels["c1"]["status"] == "Banned"
        assert channels["c2"]["status"] == "Active"
        assert channels["c1"]["initials"] == "RK"
        assert channels["c1"]["fullName"] == "Ravi Kumar"

        response = operator.get("/api/v1/channels/", params={"search": "@RAVI"})
        assert [c["_id"] for c in response.json()] == ["c1"]

    def test_toggle_verification(self, operator, mock_db):
        seed(mock_db, "channels", make_account("c1", "ravi", "Ravi Kumar"))

        response = operator.post("/api/v1/channels/c1/verify")
        assert response.status_code == 200
        assert response.json()["message"] == "Ravi Kumar has been verified."
        assert fetch(mock_db, "channels", "c1")["isVerified"] is True

        response = operator.post("/api/v1/channels/c1/verify")
        assert response.json()["message"] == "Ravi Kumar has been unverified."
        assert fetch(mock_db, "channels", "c1")["isVerified"] is False

    def test_toggle_ban(self, operator, mock_db):
        seed(mock_db, "channels", make_account("c1", "ravi", "Ravi Kumar", isBanned=True))

        response = operator.post("/api/v1/channels/c1/ban")
        assert response.json()["message"] == "Ravi Kumar has been unbanned."
        assert fetch(mock_db, "channels", "c1")["isBanned"] is False

    def test_object_id_documents(self, operator, mock_db):
        oid = ObjectId()
        seed(mock_db, "channels", make_account(oid, "ravi", "Ravi Kumar"))

        response = operator.post(f"/api/v1/channels/{oid}/ban")
        assert response.status_code == 200
        assert fetch(mock_db, "channels", oid)["isBanned"] is True

    def test_unknown_channel(self, operator, mock_db):
        response = operator.post("/api/v1/channels/missing/verify")
        assert response.status_code == 404

    def test_password_reset(self, operator, mock_db):
        seed(mock_db, "channels", make_account("c1", "ravi", "Ravi Kumar"))

        response = operator.post("/api/v1/channels/c1/password", json={"password": ""})
        assert response.status_code == 400
        assert response.json()["detail"] == "Password cannot be empty."

        response = operator.post("/api/v1/channels/c1/password", json={"password": "n3w-pass"})
        assert response.status_code == 200
        assert response.json()["message"] == "Password for @ravi has been manually updated."

        stored = fetch(mock_db, "channels", "c1")["password"]
        assert stored != "n3w-pass"
        assert CryptContext(schemes=["bcrypt"]).verify("n3w-pass", stored)

    def test_watch_hours_validation(self, operator, mock_db):
        seed(mock_db, "channels", make_account("c1", "ravi", "Ravi Kumar"))

        for body in ({}, {"hours": ""}, {"hours": "  "}):
            response = operator.post("/api/v1/channels/c1/watch-hours", json=body)
            assert response.status_code == 400
            assert response.json()["detail"] == "Please enter a value for watch hours."

        for hours in ("-1", "ten", -5):
            response = operator.post("/api/v1/channels/c1/watch-hours", json={"hours": hours})
            assert response.status_code == 400
            assert "non-negative" in response.json()["detail"]

        assert "watchHours" not in fetch(mock_db, "channels", "c1")

    def test_set_watch_hours(self, operator, mock_db):
        seed(mock_db, "channels", make_account("c1", "ravi", "Ravi Kumar"))

        response = operator.post("/api/v1/channels/c1/watch-hours", json={"hours": "4000"})
        assert response.status_code == 200
        assert response.json()["message"] == "Watch hours for @ravi have been updated to 4000."
        assert fetch(mock_db, "channels", "c1")["watchHours"] == 4000

        operator.post("/api/v1/channels/c1/watch-hours", json={"hours": 12.5})
        assert fetch(mock_db, "channels", "c1")["watchHours"] == 12.5


# ===========================================================================
# GloStars (users collection)
# ===========================================================================

class TestGloStars:

    def test_list_uses_users_collection(self, operator, mock_db):
        seed(mock_db, "users", make_account("u1", "glo_star", "Asha Rao", followers=1200))
        seed(mock_db, "channels", make_account("c1", "other", "Other Person"))

        response = operator.get("/api/v1/glostars/")
        assert [u["_id"] for u in response.json()] == ["u1"]
        assert response.json()[0]["followers"] == 1200

    def test_fractional_and_malformed_documents(self, operator, mock_db):
        seed(
            mock_db, "users",
            make_account("u1", "asha", "Asha Rao", followers=3.5),
            make_account("u2", "ravi", "Ravi Kumar", isBanned={"reason": "spam"}),
        )
        response = operator.get("/api/v1/glostars/")
        assert response.status_code == 200
        assert [(u["_id"], u["followers"]) for u in response.json()] == [("u1", 3.5)]

    def test_verify_ban_and_reset(self, operator, mock_db):
        seed(mock_db, "users", make_account("u1", "glo_star", "Asha Rao"))

        assert operator.post("/api/v1/glostars/u1/verify").status_code == 200
        assert operator.post("/api/v1/glostars/u1/ban").status_code == 200
        assert operator.post("/api/v1/glostars/u1/password", json={"password": "x"}).status_code == 200

        doc = fetch(mock_db, "users", "u1")
        assert doc["isVerified"] is True
        assert doc["isBanned"] is True
        assert "password" in doc
