from __future__ import annotations

import pytest

from baaskit import ClientConfig


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BAASBOX_BASE_URL", "https://baas.example.com")
    monkeypatch.setenv("BAASBOX_APP_CODE", "abc")
    monkeypatch.setenv("BAASBOX_TIMEOUT", "2.5")
    monkeypatch.setenv("BAASBOX_RECORDS_PER_PAGE", "50")
    cfg = ClientConfig.from_env()
    assert cfg == ClientConfig("https://baas.example.com", "abc", 2.5, 50)


def test_from_yaml_file(tmp_path) -> None:
    path = tmp_path / "baas.yaml"
    path.write_text("baseUrl: http://h:1\nappCode: xyz\nrecordsPerPage: 7\n")
    cfg = ClientConfig.from_file(path)
    assert cfg.base_url == "http://h:1"
    assert cfg.app_code == "xyz"
    assert cfg.default_records_per_page == 7
    assert cfg.timeout == 10.0


def test_from_json_file(tmp_path) -> None:
    path = tmp_path / "baas.json"
    path.write_text('{"appCode": "j"}')
    assert ClientConfig.from_file(path).app_code == "j"


def test_missing_file(tmp_path) -> None:
    with pytest.raises(RuntimeError):
        ClientConfig.from_file(tmp_path / "nope.yaml")
