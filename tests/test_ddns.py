import json

import pytest

import ddns as cli

HOSTS = '{"AA:BB:CC:DD:EE:FF": {"name": "nas"}}'


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    monkeypatch.setenv("DDNS_HOSTS", HOSTS)
    monkeypatch.delenv("DDNS_CAN_DELETE", raising=False)
    path = tmp_path / "settings.toml"
    path.write_text(
        "can_delete = false\n"
        "[cache]\n"
        'backend = "filesystem"\n'
        f'path = "{(tmp_path / "cache").as_posix()}"\n'
    )
    return path


def run(settings_file, *args):
    return cli.main(["--settings", str(settings_file), *args])


def test_set_then_get(settings_file, capsys):
    assert run(settings_file, "set", "aabbccddeeff", "10.0.0.5") == cli.EXIT_OK
    assert json.loads(capsys.readouterr().out)["identifier"] == "AA:BB:CC:DD:EE:FF"

    assert run(settings_file, "get", "AA-BB-CC-DD-EE-FF") == cli.EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"address": "10.0.0.5"}


def test_get_unknown_host(settings_file, capsys):
    assert run(settings_file, "get", "11:22:33:44:55:66") == cli.EXIT_NOT_FOUND
    assert capsys.readouterr().out == ""


def test_set_unknown_host(settings_file):
    assert run(settings_file, "set", "112233445566", "10.0.0.9") == cli.EXIT_ERROR


def test_delete_disabled(settings_file, capsys):
    run(settings_file, "set", "aabbccddeeff", "10.0.0.5")
    assert run(settings_file, "delete", "aabbccddeeff") == cli.EXIT_ERROR
    capsys.readouterr()
    run(settings_file, "get", "aabbccddeeff")
    assert json.loads(capsys.readouterr().out) == {"address": "10.0.0.5"}


def test_delete_enabled(settings_file, monkeypatch, capsys):
    monkeypatch.setenv("DDNS_CAN_DELETE", "true")
    run(settings_file, "set", "aabbccddeeff", "10.0.0.5")
    assert run(settings_file, "delete", "aabbccddeeff") == cli.EXIT_OK
    capsys.readouterr()
    run(settings_file, "get", "aabbccddeeff")
    assert json.loads(capsys.readouterr().out) == {"address": None}


def test_list(settings_file, capsys):
    assert run(settings_file, "list") == cli.EXIT_OK
    assert json.loads(capsys.readouterr().out) == [
        {"identifier": "AA:BB:CC:DD:EE:FF", "address": None, "name": "nas"},
    ]


def test_malformed_hosts(settings_file, monkeypatch):
    monkeypatch.setenv("DDNS_HOSTS", "[1, 2]")
    assert run(settings_file, "list") == cli.EXIT_ERROR


def test_error_log_names_the_identifier(settings_file, caplog):
    caplog.set_level("ERROR")
    assert run(settings_file, "set", "112233445566", "10.0.0.9") == cli.EXIT_ERROR
    assert "unknown_host: Host not found! (112233445566)" in caplog.text
