import io

from rich.console import Console

from bb_simulator.transitions import parse_table
from bb_tools.ruleset_inspect import build_table_view, main, pretty_print_ruleset

BB3 = "1RB 1Rh 1LB 0RC 1LC 1LA"


def test_table_view_has_one_row_per_state():
    view = build_table_view(parse_table(BB3))
    assert view.row_count == 3
    assert [column.header for column in view.columns] == ["State", "0", "1"]
    assert list(view.columns[0].cells) == ["A", "B", "C"]
    assert list(view.columns[1].cells) == ["1RB", "1LB", "1LC"]
    assert list(view.columns[2].cells) == ["[green]1Rh[/green]", "0RC", "1LA"]


def test_pretty_print_ruleset():
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, color_system=None)
    pretty_print_ruleset(parse_table(BB3), console=console)
    out = buffer.getvalue()
    assert "Transition Table" in out
    assert "States: 3" in out
    assert "Standard form: 1RB1Rh_1LB0RC_1LC1LA" in out


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "bb3.txt"
    path.write_text(BB3, encoding="utf-8")
    main([str(path)])
    assert "1RB1Rh_1LB0RC_1LC1LA" in capsys.readouterr().out
