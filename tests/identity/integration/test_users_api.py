"""Integration tests for the /api/users endpoints."""


def _register(client, name="Anderson", email="god@god.com", password="123456"):
    return client.post(
        "/api/users/register",
        json={"name": name, "email": email, "password": password},
    )


class TestRegisterEndpoint:
    def test_register_user(self, client, container):
        response = _register(client)
        assert response.status_code == 201
        assert response.json() == {"user": {"name": "Anderson", "email": "god@god.com"}}
        assert container.users.get_by_email("god@god.com") is not None

    def test_register_does_not_return_password(self, client):
        response = _register(client)
        assert "password" not in response.json()["user"]

    def test_register_same_email_twice(self, client):
        first = _register(client)
        second = _register(client, name="Outro")
        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"error": "Email já cadastrado"}

    def test_register_missing_fields_is_unprocessable(self, client):
        response = client.post("/api/users/register", json={"email": "god@god.com"})
        assert response.status_code == 422


class TestLoginEndpoint:
    def test_login_returns_token_and_user(self, client, container):
        _register(client)
        response = client.post("/api/users/login", json={"email": "god@god.com", "password": "123456"})
        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"] == {"name": "Anderson", "email": "god@god.com"}
        assert container.auth_service.verify_token(data["token"]).email == "god@god.com"

    def test_login_with_wrong_password(self, client):
        _register(client)
        response = client.post("/api/users/login", json={"email": "god@god.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Credenciais inválidas"}

    def test_login_with_unknown_email(self, client):
        response = client.post(
            "/api/users/login",
            json={"email": "email_invalido@camada.com", "password": "12345"},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Credenciais inválidas"}
