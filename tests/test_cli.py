# SPDX-License-Identifier: MIT

from typer.testing import CliRunner

from strikechart import configuration
from strikechart.bootstrap import Services, build_services
from strikechart.repository.configuration import CONFIGURATION_REPO
from strikechart.terminal.app import app

from .fakes import FakeResponse, FakeSession, envelope, raw_task

runner = CliRunner()

TASKS = [
    raw_task("d1", "Stretch", "daily", completed=False, streak=5),
    raw_task("h1", "Drink water", "habit"),
    raw_task("t1", "File taxes", "todo", completed=False),
    raw_task("d2", "Read", "daily", completed=True, streak=2),
]


def login(services: Services) -> None:
    services.credentials_repo.save_credentials("user-1", "token-1")


def test_login_with_tokens(services: Services, session: FakeSession) -> None:
    session.route("GET", "/user", FakeResponse(200, envelope({"id": "user-1"})))

    result = runner.invoke(app, ["login", "--user-id", "user-1", "--api-token", "token-1"], obj=services)

    assert result.exit_code == 0, result.output
    assert "Connected to Habitica" in result.output
    assert services.sync.is_authenticated()


def test_login_wrong_password_exits_with_message(services: Services, session: FakeSession) -> None:
    session.route("POST", "/user/auth/local/login", FakeResponse(401, envelope(None, False, "nope")))

    result = runner.invoke(app, ["li", "-u", "alice", "-p", "wrong"], obj=services)

    assert result.exit_code == 1
    assert "Failed to authenticate with Habitica" in result.output
    assert not services.sync.is_authenticated()


def test_login_reports_unwritable_data_path(config_dir, session: FakeSession) -> None:
    blocker = config_dir / "blocker"
    blocker.write_text("a file where a directory should be")
    services = build_services(
        configuration.get_default_configuration(),
        data_path=blocker / "shared",
        session=session,  # type: ignore[arg-type]
    )
    session.route(
        "POST",
        "/user/auth/local/login",
        FakeResponse(200, envelope({"id": "user-1", "apiToken": "token-1"})),
    )

    result = runner.invoke(app, ["login", "-u", "alice", "-p", "secret"], obj=services)

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Failed to save data" in result.output


def test_login_requires_both_tokens(services: Services) -> None:
    result = runner.invoke(app, ["login", "--user-id", "user-1"], obj=services)
    assert result.exit_code == 1


def test_logout(services: Services) -> None:
    login(services)
    result = runner.invoke(app, ["logout"], obj=services)
    assert result.exit_code == 0
    assert not services.sync.is_authenticated()


def test_habit_list_shows_dailies_only(services: Services, session: FakeSession) -> None:
    login(services)
    session.route("GET", "/tasks/user", FakeResponse(200, envelope(TASKS)))

    result = runner.invoke(app, ["habit", "list"], obj=services)

    assert result.exit_code == 0, result.output
    assert "Stretch" in result.output
    assert "Read" in result.output
    assert "Drink water" not in result.output
    assert "File taxes" not in result.output
    assert "5 day streak" in result.output


def test_habit_list_without_login(services: Services) -> None:
    result = runner.invoke(app, ["h", "ls"], obj=services)
    assert result.exit_code == 1
    assert "credentials not found" in result.output


def test_habit_select_by_position_refreshes(services: Services, session: FakeSession) -> None:
    login(services)
    session.route("GET", "/tasks/user", FakeResponse(200, envelope(TASKS)))

    result = runner.invoke(app, ["habit", "select", "2"], obj=services)

    assert result.exit_code == 0, result.output
    assert "Tracking: Read" in result.output
    selected = services.selected_habit_repo.get_selected_habit()
    assert selected is not None
    assert selected["id"] == "d2"
    habit_data = services.habit_data_repo.get_habit_data()
    assert habit_data is not None
    assert habit_data["habit_id"] == "d2"


def test_habit_select_unknown(services: Services, session: FakeSession) -> None:
    login(services)
    session.route("GET", "/tasks/user", FakeResponse(200, envelope(TASKS)))

    result = runner.invoke(app, ["habit", "select", "h1"], obj=services)

    assert result.exit_code == 1
    assert services.selected_habit_repo.get_selected_habit() is None


def test_habit_show_without_cache(services: Services) -> None:
    result = runner.invoke(app, ["habit", "show"], obj=services)
    assert result.exit_code == 1
    assert "No habit data yet" in result.output


def test_refresh_then_status(services: Services, session: FakeSession) -> None:
    login(services)
    session.route("GET", "/tasks/user", FakeResponse(200, envelope(TASKS)))
    runner.invoke(app, ["habit", "select", "d1"], obj=services)

    result = runner.invoke(app, ["habit", "refresh"], obj=services)
    assert result.exit_code == 0, result.output
    assert "Last 45 days" in result.output

    result = runner.invoke(app, ["status"], obj=services)
    assert result.exit_code == 0, result.output
    assert "Stretch" in result.output
    assert "45" in result.output


def test_widget_timeline_lists_24_entries(services: Services) -> None:
    result = runner.invoke(app, ["widget", "timeline"], obj=services)
    assert result.exit_code == 0, result.output
    assert "sample" in result.output
    assert "at_end" in result.output
    assert " 24 " in result.output


def test_widget_show_families(services: Services) -> None:
    result = runner.invoke(app, ["widget", "show", "--family", "medium"], obj=services)
    assert result.exit_code == 0, result.output
    assert "Strike Chart" in result.output
    assert "Streak" in result.output

    result = runner.invoke(app, ["w", "s", "-f", "large"], obj=services)
    assert result.exit_code == 1


def test_widget_watch_single_iteration(services: Services) -> None:
    result = runner.invoke(app, ["widget", "watch", "--iterations", "1"], obj=services)
    assert result.exit_code == 0, result.output
    assert "sample" in result.output


def test_config_set_persists(config_dir) -> None:
    result = runner.invoke(app, ["config", "set", "--widget-family", "medium", "--log-level", "debug"])

    assert result.exit_code == 0, result.output
    assert CONFIGURATION_REPO.get_config()["widget_family"] == "medium"
    assert CONFIGURATION_REPO.get_config()["log_level"] == "DEBUG"
    assert "widget_family: medium" in configuration.APP_CONFIG_PATH.read_text()


def test_config_set_rejects_unknown_family(config_dir) -> None:
    result = runner.invoke(app, ["config", "set", "--widget-family", "huge"])
    assert result.exit_code == 1
