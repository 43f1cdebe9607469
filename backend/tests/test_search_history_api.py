"""API tests for GET /search-history."""


class TestSearchHistory:
    def test_lists_searches_in_insertion_order(self, test_client, make_photo, user):
        make_photo(tags=["sky", "sea"])
        for tag in ("sky", "sea", "sky"):
            resp = test_client.get("/photos/tag/search", params={"tag": tag, "userId": str(user["id"])})
            assert resp.status_code == 200

        resp = test_client.get("/search-history", params={"userId": str(user["id"])})

        assert resp.status_code == 200
        rows = resp.json()["searchHistoies"]
        assert [r["query"] for r in rows] == ["sky", "sea", "sky"]
        assert all(r["userId"] == user["id"] for r in rows)
        assert set(rows[0]) == {"id", "userId", "query", "createdAt"}

    def test_other_users_history_is_not_returned(self, test_client, make_photo):
        make_photo(tags=["sky"])
        test_client.get("/photos/tag/search", params={"tag": "sky", "userId": "2"})

        resp = test_client.get("/search-history", params={"userId": "3"})

        assert resp.status_code == 400

    def test_empty_history_returns_400(self, test_client):
        resp = test_client.get("/search-history", params={"userId": "1"})

        assert resp.status_code == 400
        assert resp.json() == {"message": "no search history found"}

    def test_invalid_user_id_returns_400(self, test_client):
        resp = test_client.get("/search-history", params={"userId": "abc"})

        assert resp.status_code == 400
        assert resp.json() == {"errors": ["userId is required and should be a number."]}

    def test_missing_user_id_returns_400(self, test_client):
        resp = test_client.get("/search-history")

        assert resp.status_code == 400
        assert resp.json() == {"errors": ["userId is required and should be a number."]}

    def test_user_id_beyond_integer_column_returns_400(self, test_client):
        resp = test_client.get("/search-history", params={"userId": "99999999999999999999"})

        assert resp.status_code == 400
        assert resp.json() == {"errors": ["userId is required and should be a number."]}
