# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from app import create_app
from config import Settings


def _client(settings: Settings | None = None) -> FlaskClient:
    app = create_app(settings or Settings())
    app.config["TESTING"] = True
    return app.test_client()


def test_index_lists_dialects() -> None:
    response = _client().get("/")

    assert response.status_code == 200
    assert response.get_json() == {
        "dialects": ["rack", "rack-text", "rack-xml", "rackml"],
        "default_dialect": "rack-text",
    }


def test_render_text_body(core_text: str) -> None:
    response = _client().post("/render/rack-text", data=core_text.encode("utf-8"))

    assert response.status_code == 200
    assert response.mimetype == "image/svg+xml"
    assert response.get_data(as_text=True).startswith("<svg")


def test_render_form_field(two_rack_xml: str) -> None:
    response = _client().post("/render/rack-xml", data={"source": two_rack_xml})

    assert response.status_code == 200
    assert "Web1" in response.get_data(as_text=True)


def test_render_uses_default_dialect(two_rack_xml: str) -> None:
    client = _client(Settings(default_dialect="rackml"))
    response = client.post("/render", data=two_rack_xml.encode("utf-8"))
    assert response.status_code == 200


def test_format_error_returns_400_with_line() -> None:
    response = _client().post("/render/rack", data=b"caption: A\nheight: x\nitems:")

    assert response.status_code == 400
    assert response.get_json() == {"error": "invalid height value: x", "line": 2}


def test_format_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="app"):
        _client().post("/render/rackml", data=b"<rack/>")
    assert "root element must be racks" in caplog.text


def test_unknown_dialect_returns_404() -> None:
    response = _client().post("/render/yaml", data=b"x")
    assert response.status_code == 404


def test_empty_source_returns_400() -> None:
    response = _client().post("/render/rack-text", data=b"   ")
    assert response.status_code == 400
    assert response.get_json() == {"error": "empty source"}


def test_internal_links_are_rewritten() -> None:
    client = _client(Settings(internal_link_base="notes://open?file="))
    text = b"caption: A\nheight: 2\nitems:\n- server: [[Web1]]"
    response = client.post("/render/rack-text", data=text)

    body = response.get_data(as_text=True)
    assert 'href="notes://open?file=Web1"' in body
    assert "[[" not in body


def test_settings_loaded_from_environment(tmp_path, monkeypatch) -> None:
    config = tmp_path / "rackviz.yaml"
    config.write_text("default_dialect: rack-xml\nmax_content_length: 2048\n")
    monkeypatch.setenv("RACKVIZ_CONFIG", str(config))

    app = create_app()
    assert app.config["MAX_CONTENT_LENGTH"] == 2048
    assert app.config["RACKVIZ_SETTINGS"].default_dialect == "rack-xml"


def test_rack_height_over_limit_is_rejected() -> None:
    client = _client(Settings(max_rack_height=48))
    response = client.post("/render/rack-text", data=b"caption: A\nheight: 100000000\nitems:")

    assert response.status_code == 400
    assert response.get_json() == {"error": "rack height 100000000 exceeds limit of 48", "line": None}


def test_rack_height_at_limit_is_rendered() -> None:
    client = _client(Settings(max_rack_height=48))
    response = client.post("/render/rackml", data=b'<racks><rack height="48"/></racks>')
    assert response.status_code == 200
