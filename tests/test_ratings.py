"""API tests for rating submission, updates and listings."""

import unittest

from api_support import API, ApiTestCase


class RatingsTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner_id = self.make_user("owner@example.com", role="store_owner")
        self.user_id = self.make_user("user@example.com")
        self.store_id = self.make_store(self.owner_id)
        self.headers = self.headers_for(self.user_id)


class TestSubmitRating(RatingsTestCase):
    def test_submit(self) -> None:
        resp = self.client.post(
            f"{API}/ratings",
            json={"store_id": self.store_id, "rating": 4, "comment": "Nice"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 201)
        rating = resp.json()["rating"]
        self.assertEqual(rating["rating"], 4)
        self.assertEqual(rating["user_id"], self.user_id)
        self.assertEqual(rating["store_id"], self.store_id)

    def test_comment_optional(self) -> None:
        resp = self.client.post(
            f"{API}/ratings", json={"store_id": self.store_id, "rating": 1}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 201)
        self.assertIsNone(resp.json()["rating"]["comment"])

    def test_out_of_range(self) -> None:
        for score in (0, 6, -1):
            resp = self.client.post(
                f"{API}/ratings",
                json={"store_id": self.store_id, "rating": score},
                headers=self.headers,
            )
            self.assertEqual(resp.status_code, 400, score)
            self.assertEqual(resp.json()["detail"], "Rating must be 1-5")

    def test_missing_score(self) -> None:
        resp = self.client.post(
            f"{API}/ratings", json={"store_id": self.store_id}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)

    def test_unknown_store(self) -> None:
        resp = self.client.post(
            f"{API}/ratings", json={"store_id": 9999, "rating": 3}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 404)

    def test_second_rating_rejected(self) -> None:
        self.make_rating(self.user_id, self.store_id, 3)
        resp = self.client.post(
            f"{API}/ratings", json={"store_id": self.store_id, "rating": 5}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "You already rated this store")

    def test_store_owner_cannot_rate(self) -> None:
        resp = self.client.post(
            f"{API}/ratings",
            json={"store_id": self.store_id, "rating": 5},
            headers=self.headers_for(self.owner_id, "store_owner"),
        )
        self.assertEqual(resp.status_code, 403)

    def test_admin_can_rate(self) -> None:
        resp = self.client.post(
            f"{API}/ratings",
            json={"store_id": self.store_id, "rating": 2},
            headers=self.admin_headers(),
        )
        self.assertEqual(resp.status_code, 201)


class TestUpdateRating(RatingsTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.rating_id = self.make_rating(self.user_id, self.store_id, 2, "Meh")

    def test_author_updates(self) -> None:
        resp = self.client.put(
            f"{API}/ratings/{self.rating_id}",
            json={"rating": 5, "comment": "Better now"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["rating"]["rating"], 5)
        self.assertEqual(resp.json()["rating"]["comment"], "Better now")

    def test_other_user_forbidden(self) -> None:
        other = self.make_user("other@example.com")
        resp = self.client.put(
            f"{API}/ratings/{self.rating_id}",
            json={"rating": 1},
            headers=self.headers_for(other),
        )
        self.assertEqual(resp.status_code, 403)

    def test_admin_may_update_any(self) -> None:
        resp = self.client.put(
            f"{API}/ratings/{self.rating_id}", json={"rating": 3}, headers=self.admin_headers()
        )
        self.assertEqual(resp.status_code, 200)

    def test_unknown_rating(self) -> None:
        resp = self.client.put(f"{API}/ratings/9999", json={"rating": 3}, headers=self.headers)
        self.assertEqual(resp.status_code, 404)

    def test_invalid_score(self) -> None:
        resp = self.client.put(
            f"{API}/ratings/{self.rating_id}", json={"rating": 7}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)


class TestRatingListings(RatingsTestCase):
    def test_my_ratings_include_store(self) -> None:
        self.make_rating(self.user_id, self.store_id, 4)
        resp = self.client.get(f"{API}/ratings/user", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        (item,) = resp.json()
        self.assertEqual(item["store_name"], "Corner Shop")
        self.assertEqual(item["store_address"], "1 Market Road, Springfield")

    def test_owner_sees_store_ratings(self) -> None:
        self.make_rating(self.user_id, self.store_id, 4, "Good")
        resp = self.client.get(
            f"{API}/ratings/store/{self.store_id}",
            headers=self.headers_for(self.owner_id, "store_owner"),
        )
        self.assertEqual(resp.status_code, 200)
        (item,) = resp.json()
        self.assertEqual(item["user_email"], "user@example.com")
        self.assertEqual(item["rating"], 4)

    def test_other_owner_forbidden(self) -> None:
        other_owner = self.make_user("owner2@example.com", role="store_owner")
        resp = self.client.get(
            f"{API}/ratings/store/{self.store_id}",
            headers=self.headers_for(other_owner, "store_owner"),
        )
        self.assertEqual(resp.status_code, 403)

    def test_admin_sees_store_ratings(self) -> None:
        resp = self.client.get(
            f"{API}/ratings/store/{self.store_id}", headers=self.admin_headers()
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_unknown_store(self) -> None:
        resp = self.client.get(f"{API}/ratings/store/9999", headers=self.headers)
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
