from fastapi.testclient import TestClient


def register(client: TestClient, email: str = "alice@example.com", password: str = "password123") -> dict:
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
