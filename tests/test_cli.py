"""Tests for CLI helpers."""

from types import SimpleNamespace

import pytest
from flask import Flask

import app.cli as cli


def _cli_app() -> Flask:
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///cli-test.db"
    return app


def test_parser_commands():
    """The parser knows both commands and their safety flags."""
    parser = cli.create_parser()

    args = parser.parse_args(["init-db", "--recreate", "--yes-i-am-sure"])
    assert args.command == "init-db"
    assert args.recreate is True
    assert args.yes_i_am_sure is True

    args = parser.parse_args(["load-test-data"])
    assert args.command == "load-test-data"
    assert args.yes_i_am_sure is False


def test_handle_init_db_reports_tables(monkeypatch, capsys):
    """init-db should name the target database and the created tables."""
    calls = []
    monkeypatch.setattr(cli, "check_db_connection", lambda: True)
    monkeypatch.setattr(cli, "init_db", lambda recreate=False: calls.append(recreate) or ["persons"])

    cli.handle_init_db(app=_cli_app())

    output = capsys.readouterr().out
    assert "🗄  Using database: sqlite:///cli-test.db" in output
    assert "persons" in output
    assert calls == [False]


def test_handle_init_db_recreate_requires_confirmation(monkeypatch, capsys):
    """Dropping tables without the safety flag exits with code 1."""
    monkeypatch.setattr(cli, "check_db_connection", lambda: True)
    monkeypatch.setattr(cli, "init_db", lambda recreate=False: pytest.fail("init_db must not run"))

    with pytest.raises(SystemExit) as exc_info:
        cli.handle_init_db(app=_cli_app(), recreate=True, confirmed=False)

    assert exc_info.value.code == 1
    assert "--yes-i-am-sure" in capsys.readouterr().err


def test_handle_init_db_without_connection(monkeypatch, capsys):
    """A database that cannot be reached exits with code 1."""
    monkeypatch.setattr(cli, "check_db_connection", lambda: False)

    with pytest.raises(SystemExit) as exc_info:
        cli.handle_init_db(app=_cli_app())

    assert exc_info.value.code == 1
    assert "Cannot connect to database" in capsys.readouterr().err


def test_handle_load_test_data_requires_confirmation(monkeypatch):
    """load-test-data refuses to run without the safety flag."""
    monkeypatch.setattr(cli, "check_db_connection", lambda: True)

    with pytest.raises(SystemExit) as exc_info:
        cli.handle_load_test_data(app=_cli_app(), confirmed=False)

    assert exc_info.value.code == 1


def test_handle_load_test_data_recreates_and_loads(monkeypatch, capsys):
    """load-test-data recreates the schema before loading persons."""
    calls = []
    app = _cli_app()
    monkeypatch.setattr(cli, "check_db_connection", lambda: True)
    monkeypatch.setattr(cli, "init_db", lambda recreate=False: calls.append(("init_db", recreate)) or [])
    monkeypatch.setattr(cli, "load_test_data_hook", lambda a: calls.append(("load", a)) or 3)

    cli.handle_load_test_data(app=app, confirmed=True)

    assert calls == [("init_db", True), ("load", app)]
    assert "3 persons" in capsys.readouterr().out


def test_handle_load_test_data_failure_exits(monkeypatch, capsys):
    """Failures while loading data exit with code 1."""
    monkeypatch.setattr(cli, "check_db_connection", lambda: True)
    monkeypatch.setattr(cli, "init_db", lambda recreate=False: [])

    def failing_hook(app):
        raise RuntimeError("disk full")

    monkeypatch.setattr(cli, "load_test_data_hook", failing_hook)

    with pytest.raises(SystemExit) as exc_info:
        cli.handle_load_test_data(app=_cli_app(), confirmed=True)

    assert exc_info.value.code == 1
    assert "disk full" in capsys.readouterr().err


def test_load_test_data_hook_stores_sample_persons(app):
    """The hook loads the sample persons into the database."""
    from app.startup import SAMPLE_PERSON_NAMES, load_test_data_hook

    with app.app_context():
        count = load_test_data_hook(app)

    assert count == len(SAMPLE_PERSON_NAMES)


def test_main_without_command_prints_help(monkeypatch, capsys):
    """Running without a command exits with code 1."""
    monkeypatch.setattr("sys.argv", ["springweb-cli"])
    monkeypatch.setattr(cli, "create_app", lambda: SimpleNamespace())

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 1
    assert "init-db" in capsys.readouterr().out
