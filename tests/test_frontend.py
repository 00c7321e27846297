# tests/test_frontend.py

from app.routes.frontend import resolve_asset


def test_serves_index_at_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "id=\"root\"" in response.text


def test_serves_static_asset(client):
    response = client.get("/assets/app.js")
    assert response.status_code == 200
    assert response.text == "console.log('app');"


def test_unknown_route_falls_back_to_index(client):
    """Client-side routes such as /about get the single-page app"""
    response = client.get("/about")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "id=\"root\"" in response.text


def test_nested_unknown_route_falls_back_to_index(client):
    response = client.get("/orders/42/details")
    assert response.status_code == 200
    assert "id=\"root\"" in response.text


def test_unknown_api_route_is_not_the_spa(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_resolve_asset_stays_inside_bundle(static_dir, tmp_path):
    (tmp_path / "secret.txt").write_text("secret")

    assert resolve_asset(str(static_dir), "../secret.txt") == (static_dir / "index.html").resolve()


def test_resolve_asset_missing_bundle(tmp_path):
    assert resolve_asset(str(tmp_path / "nowhere"), "about") is None


def test_missing_bundle_returns_404(client, tmp_path):
    client.app.state.context.settings.STATIC_DIR = str(tmp_path / "nowhere")
    response = client.get("/about")
    assert response.status_code == 404


def test_overlong_path_segment_falls_back_to_index(client):
    response = client.get("/" + "a" * 300)
    assert response.status_code == 200
    assert "id=\"root\"" in response.text


def test_null_byte_in_path_falls_back_to_index(client):
    response = client.get("/foo%00bar")
    assert response.status_code == 200
    assert "id=\"root\"" in response.text


def test_resolve_asset_rejected_names(static_dir):
    index = (static_dir / "index.html").resolve()
    assert resolve_asset(str(static_dir), "a" * 300) == index
    assert resolve_asset(str(static_dir), "foo\x00bar") == index
