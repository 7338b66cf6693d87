import io

import pytest

from cursed_diner.restaurant import Restaurant
from cursed_diner.simulate import main, run, simulate


def _restaurant():
    out = io.StringIO()
    return Restaurant(out=out), out


def test_maxsize_sets_restaurant_size():
    restaurant, _ = _restaurant()
    run(["MAXSIZE", "7"], restaurant)
    assert restaurant.maxsize == 7


def test_red_and_light_print_table_from_current_seat():
    restaurant, out = _restaurant()
    run("MAXSIZE 3 RED a 5 RED b 3 LIGHT 1".split(), restaurant)
    assert out.getvalue().splitlines() == ["b-3", "a-5"]


def test_light_zero_prints_queue():
    restaurant, out = _restaurant()
    run("MAXSIZE 1 RED a 5 RED b 7 LIGHT 0".split(), restaurant)
    assert out.getvalue().splitlines() == ["b-7"]
    assert [c.name for c in restaurant.table] == ["a"]


def test_unknown_command_is_read_as_light():
    restaurant, out = _restaurant()
    run("MAXSIZE 2 RED a 4 SHOW 1".split(), restaurant)
    assert out.getvalue().splitlines() == ["a-4"]


def test_integer_reads_leading_digits_only():
    restaurant, out = _restaurant()
    run("MAXSIZE 2 RED a +5x LIGHT 1".split(), restaurant)
    assert out.getvalue().splitlines() == ["a-5"]


def test_blue_empties_table_through_runner():
    restaurant, _ = _restaurant()
    run("MAXSIZE 4 RED a 1 RED b 2 BLUE 10".split(), restaurant)
    assert len(restaurant.table) == 0
    assert len(restaurant.history) == 0


def test_missing_argument_raises():
    restaurant, _ = _restaurant()
    with pytest.raises(ValueError):
        run(["MAXSIZE"], restaurant)


def test_bad_integer_raises():
    restaurant, _ = _restaurant()
    with pytest.raises(ValueError):
        run(["BLUE", "many"], restaurant)


def test_simulate_reads_file(tmp_path):
    script = tmp_path / "script.txt"
    script.write_text("MAXSIZE 3\nRED a 5\nRED b 3\nLIGHT 1\n", encoding="utf-8")
    restaurant, out = _restaurant()
    simulate(script, restaurant)
    assert out.getvalue().splitlines() == ["b-3", "a-5"]


def test_simulate_matches_run(tmp_path):
    text = "MAXSIZE 4 RED a 2 RED b -3 RED c 6 REVERSAL LIGHT 1"
    script = tmp_path / "script.txt"
    script.write_text(text, encoding="utf-8")
    from_file, file_out = _restaurant()
    simulate(script, from_file)
    direct, direct_out = _restaurant()
    run(text.split(), direct)
    assert file_out.getvalue() == direct_out.getvalue()


def test_main_runs_given_script(tmp_path, capsys):
    script = tmp_path / "script.txt"
    script.write_text("MAXSIZE 2 RED a 9 LIGHT 1", encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a-9"]


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "absent.txt" in capsys.readouterr().err