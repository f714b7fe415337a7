"""Integration tests for routes."""


def test_home_page(client):
    """Home page is accessible without certificate."""
    response = client.get("/")
    assert response.is_success
    assert "Wanderer" in response.body
    assert "Entrance Hall" in response.body


def test_map_page(client):
    response = client.get("/map")
    assert response.is_success
    assert "Treasure Chamber" in response.body


def test_help_page(client):
    response = client.get("/help")
    assert response.is_success
    assert "exit" in response.body.lower()


def test_play_requires_cert(client):
    response = client.get("/play")
    assert response.is_certificate_required


def test_play_with_cert(auth_client):
    response = auth_client.get("/play")
    assert response.is_success
    assert "Entrance Hall" in response.body
    assert "/go/north" in response.body


def test_go_direction(auth_client):
    response = auth_client.get("/go/north")
    assert response.is_success
    assert "Great Hall" in response.body

    response = auth_client.get("/play")
    assert "Great Hall" in response.body


def test_go_nowhere(auth_client):
    response = auth_client.get("/go/up")
    assert response.is_success
    assert "cannot" in response.body
    assert "Entrance Hall" in response.body


def test_wait(auth_client):
    response = auth_client.get("/wait")
    assert response.is_success
    assert "Time passes" in response.body


def test_new_game_prompt(auth_client):
    response = auth_client.get("/new")
    assert response.is_input_required


def test_new_game_confirmed(auth_client):
    auth_client.get("/go/east")
    response = auth_client.get_input("/new", "YES")
    assert response.is_success
    assert "Entrance Hall" in response.body
