from click.testing import CliRunner

from vatsim_online import cli
from vatsim_online.airports import AIRPORTS
from vatsim_online.errors import ServiceUnreachable


class ConnectedClient:
    def resolve_v3_url(self):
        return "https://data.vatsim.net/v3/vatsim-data.json"


class OfflineClient:
    def resolve_v3_url(self):
        raise ServiceUnreachable("Got status 502 from https://status.vatsim.net/status.json")


def test_show_airports():
    result = CliRunner().invoke(cli.main, ["--show-airports"])
    assert result.exit_code == 0
    assert result.output.split() == AIRPORTS


def test_missing_airport_is_usage_error():
    result = CliRunner().invoke(cli.main, [])
    assert result.exit_code == 2
    assert "No specified airport" in result.output


def test_unknown_airport():
    result = CliRunner().invoke(cli.main, ["ZZZZ"])
    assert result.exit_code == 1
    assert "Unsupported airport ZZZZ" in result.output


def test_initial_connection_failure(monkeypatch):
    monkeypatch.setattr(cli, "VatsimClient", OfflineClient)
    result = CliRunner().invoke(cli.main, ["KSAN"])
    assert result.exit_code == 1
    assert "Could not set up access to VATSIM API" in result.output


def test_runs_dashboard_with_options(monkeypatch):
    calls = []

    async def fake_run(client, airport, center, view_distance, interval):
        calls.append((airport, center, view_distance, interval))

    monkeypatch.setattr(cli, "VatsimClient", ConnectedClient)
    monkeypatch.setattr(cli, "run_dashboard", fake_run)
    result = CliRunner().invoke(cli.main, ["ksan", "-d", "35", "--interval", "30"])

    assert result.exit_code == 0, result.output
    assert calls == [("KSAN", (32.7338, -117.1933), 35.0, 30.0)]


def test_default_distance(monkeypatch):
    calls = []

    async def fake_run(client, airport, center, view_distance, interval):
        calls.append(view_distance)

    monkeypatch.setattr(cli, "VatsimClient", ConnectedClient)
    monkeypatch.setattr(cli, "run_dashboard", fake_run)
    result = CliRunner().invoke(cli.main, ["KLAS"])

    assert result.exit_code == 0, result.output
    assert calls == [20]


def test_open_stats_launches_browser(monkeypatch):
    from conftest import make_row

    opened = []
    monkeypatch.setattr(cli.webbrowser, "open", opened.append)
    cli.open_stats(make_row(1234567))
    assert opened == ["https://stats.vatsim.net/stats/1234567"]
