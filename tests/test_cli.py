from __future__ import annotations

from cmdtype import __description__, __version__
from cmdtype.cli import app


def test_version_flag(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "cmdtype" in result.stdout
    assert __version__ in result.stdout


def test_help_flag(runner):
    result = runner.invoke(app, ["-h"])
    assert result.exit_code == 0
    assert "Options" in result.stdout
    assert "--path" in result.stdout
    assert __description__ in result.stdout


def test_no_selector_shows_help(runner):
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Examples" in result.stdout


def test_type_option(runner, fake_type, monkeypatch):
    monkeypatch.setenv("BUILTIN_TYPE_BIN", str(fake_type("ls is /bin/ls\n")))

    result = runner.invoke(app, ["-t", "ls"])

    assert result.exit_code == 0
    assert result.stdout == "file\n"


def test_path_wins_over_all_and_type(runner, fake_type, monkeypatch):
    monkeypatch.setenv("BUILTIN_TYPE_BIN", str(fake_type("ls is /bin/ls\n")))

    result = runner.invoke(app, ["--type", "ls", "--all", "ls", "--path", "ls"])

    assert result.exit_code == 0
    assert result.stdout == "/bin/ls\n"


def test_all_wins_over_type(runner, fake_type, monkeypatch):
    monkeypatch.setenv("BUILTIN_TYPE_BIN", str(fake_type("ls is /bin/ls\n")))

    result = runner.invoke(app, ["-t", "ls", "-a", "ls"])

    assert result.stdout == "ls is /bin/ls\n"


def test_lookup_failure_is_not_fatal(runner, fake_type, monkeypatch):
    monkeypatch.setenv("BUILTIN_TYPE_BIN", str(fake_type("", exit_code=1)))

    result = runner.invoke(app, ["-a", "nope"])

    assert result.exit_code == 0
    assert result.stdout == "nope not found\n"


def test_binary_from_config_file(runner, fake_type, tmp_path):
    script = fake_type("cd is a shell builtin\n")
    config = tmp_path / "cmdtype.toml"
    config.write_text(f'builtin_type_bin = "{script}"\n', encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "-t", "cd"])

    assert result.exit_code == 0
    assert result.stdout == "builtin\n"


def test_environment_wins_over_config_file(runner, fake_type, tmp_path, monkeypatch):
    config = tmp_path / "cmdtype.toml"
    config.write_text(
        f'builtin_type_bin = "{fake_type("cd is a shell builtin")}"\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("BUILTIN_TYPE_BIN", str(fake_type("if is a shell keyword\n")))

    result = runner.invoke(app, ["--config", str(config), "-t", "if"])

    assert result.stdout == "keyword\n"


def test_missing_config_file_exits(runner, tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "missing.toml"), "-t", "ls"])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_invalid_config_file_exits(runner, tmp_path):
    config = tmp_path / "cmdtype.toml"
    config.write_text("builtin_type_bin = [\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "-p", "ls"])

    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
