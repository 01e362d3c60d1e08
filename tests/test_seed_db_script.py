from scripts.seed_db import main

from dashboard_seed import placeholder_data


def test_script_seeds_and_prints_counts(test_engine, capsys):
    url = test_engine.url.render_as_string(hide_password=False)

    assert main(["--database-url", url]) == 0

    out = capsys.readouterr().out
    assert f"users: {len(placeholder_data.users)} inserted" in out
    assert f"revenue: {len(placeholder_data.revenue)} inserted" in out

    # Re-running inserts nothing
    assert main(["--database-url", url]) == 0
    out = capsys.readouterr().out
    assert "users: 0 inserted" in out
    assert "invoices: 0 inserted" in out


def test_script_exits_nonzero_on_failure(tmp_path):
    url = f"sqlite:///{(tmp_path / 'missing' / 'x.db').as_posix()}"
    assert main(["--database-url", url]) == 1
