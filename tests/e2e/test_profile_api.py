"""End-to-end tests for profile and account routes."""

from uuid import uuid4

from fritter.domain.value import UserId


class TestProfileRoutes:
    """Profiles and following over HTTP."""

    def test_create_and_duplicate(self, client, auth_cookie):
        """A name can be used once per user."""
        client.cookies = auth_cookie(UserId(uuid4()))

        created = client.post("/profiles", json={"name": "Work"})
        duplicate = client.post("/profiles", json={"name": "work"})

        assert created.status_code == 201
        assert created.json()["message"] == "Your profile was created successfully."
        assert duplicate.status_code == 400

    def test_follow_and_unfollow(self, client, auth_cookie):
        """Following shows up on both profiles and can be undone."""
        # Arrange
        alice, bob = UserId(uuid4()), UserId(uuid4())
        client.cookies = auth_cookie(bob)
        client.post("/profiles", json={"name": "art"})
        client.cookies = auth_cookie(alice)
        client.post("/profiles", json={"name": "main"})
        body = {"name": "main", "other_user_id": str(bob), "other_name": "art"}

        # Act
        followed = client.put("/profiles/follow", json=body)

        # Assert
        assert followed.status_code == 200
        assert followed.json()["profile"]["following"] == [
            {"user_id": str(bob), "name": "art"}
        ]
        bob_profiles = client.get("/profiles", params={"user_id": str(bob)}).json()
        assert bob_profiles["profiles"][0]["followers"] == [
            {"user_id": str(alice), "name": "main"}
        ]

        assert client.put("/profiles/follow", json=body).status_code == 400
        unfollowed = client.put("/profiles/unfollow", json=body)
        assert unfollowed.json()["profile"]["following"] == []

    def test_delete_profile_takes_freets(self, client, auth_cookie):
        """Deleting a profile deletes what was posted and reflected under it."""
        client.cookies = auth_cookie(UserId(uuid4()))
        client.post("/profiles", json={"name": "art"})
        freet_id = client.post(
            "/freets", json={"content": "sketch", "profile_name": "art"}
        ).json()["freet_id"]
        client.post("/reflections", json={"content": "hmm", "profile_name": "art"})

        response = client.delete("/profiles/art")

        assert response.status_code == 200
        assert response.json()["deleted_freets"] == 1
        assert response.json()["deleted_reflections"] == 1
        assert client.get("/reflections").json()["reflections"] == []
        assert client.get(f"/freets/{freet_id}").status_code == 404
        assert client.delete("/profiles/art").status_code == 404


class TestAccountRoutes:
    """Account deletion over HTTP."""

    def test_delete_account(self, client, auth_cookie):
        """Everything the caller owns is removed and the session ends."""
        client.cookies = auth_cookie(UserId(uuid4()))
        client.post("/profiles", json={"name": "art"})
        client.post("/freets", json={"content": "a", "profile_name": "art"})
        client.post("/freets", json={"content": "b"})
        client.post("/reflections", json={"content": "c"})

        response = client.delete("/users/me")

        assert response.status_code == 200
        assert response.json()["deleted_freets"] == 2
        assert response.json()["deleted_profiles"] == 1
        assert response.json()["deleted_reflections"] == 1
        assert client.get("/freets").json()["freets"] == []

    def test_delete_account_requires_login(self, client):
        """Anonymous callers cannot delete an account."""
        assert client.delete("/users/me").status_code == 401
