# tests/test_cli.py

import pytest

from goddesscal.cli import main


def test_day_command(capsys):
    assert main(["day", "2019-07-25"]) == 0
    assert capsys.readouterr().out.strip() == "1-113-Cerridwen-24 MMG"

    assert main(["day", "2019-07-25", "--style", "short"]) == 0
    assert capsys.readouterr().out.strip() == "113-3-24"


def test_bare_date_shortcut(capsys):
    assert main(["2148-08-13", "--style", "medium"]) == 0
    assert capsys.readouterr().out.strip() == "235-Maria-29"


def test_day_debug(capsys):
    assert main(["day", "1901-08-14", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "DayInfo(" in out
    assert "'jdn': 2415611" in out


def test_gregorian_command(capsys):
    assert main(["gregorian", "113", "3", "24"]) == 0
    assert capsys.readouterr().out.strip() == "2019-07-25"

    assert main(["gregorian", "1", "1", "1", "--cycle", "2", "--datetime"]) == 0
    assert capsys.readouterr().out.strip() == "2395-08-16T00:00:00+00:00"


def test_invalid_date_exits():
    with pytest.raises(SystemExit) as info:
        main(["gregorian", "471", "1", "1"])
    assert "Year 471" in str(info.value.code)

    with pytest.raises(SystemExit) as info:
        main(["day", "1900-01-01"])
    assert "before the calendar epoch" in str(info.value.code)


def test_info_command(capsys):
    assert main(["info"]) == 0
    out = capsys.readouterr().out
    assert "epoch_jdn" in out
    assert "2415611" in out


def test_new_years_command(capsys):
    assert main(["new-years", "--from-year", "112", "--to-year", "114"]) == 0
    out = capsys.readouterr().out
    assert "2019-05-04" in out
    assert len([ln for ln in out.splitlines() if ln[:3].isdigit()]) == 3


def test_pretty_month_command(capsys):
    assert main(["pretty-month", "--goddess", "113", "3"]) == 0
    out = capsys.readouterr().out
    assert "Cerridwen" in out
    assert "07-25" in out


def test_diag_year_lengths_text(capsys):
    assert main(["diag", "year-lengths", "--text"]) == 0
    out = capsys.readouterr().out
    assert "short years: 48" in out
    assert "231-240  ....#....#" in out


def test_verbose_flag(capsys):
    assert main(["-v", "info"]) == 0


def test_far_cycle_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["gregorian", "1", "1", "1", "--cycle", "20"])
    assert str(info.value.code).startswith("goddesscal: ")
    assert "9999" in str(info.value.code)

    with pytest.raises(SystemExit) as info:
        main(["gregorian", "1", "1", "1", "--cycle", "20", "--datetime"])
    assert str(info.value.code).startswith("goddesscal: ")


def test_malformed_date_is_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        main(["day", "2019-13-01"])
    assert info.value.code == 2
    assert "invalid date '2019-13-01'" in capsys.readouterr().err

    with pytest.raises(SystemExit) as info:
        main(["2019-02-30"])
    assert info.value.code == 2
