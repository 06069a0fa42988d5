from ordered_chain.cli import main


def test_renders_initial_values(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "1 -> 2 -> 3 -> None\n"


def test_empty_chain(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "None\n"


def test_push_insert_pop(capsys):
    rc = main(["b", "--push", "a", "--insert", "2", "c", "--pop", "1"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == ["popped: a", "b -> c -> None"]


def test_pop_past_end_stops(capsys):
    assert main(["x", "--pop", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == ["popped: x", "None"]


def test_insert_out_of_bounds(capsys):
    assert main(["1", "--insert", "10", "2"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "out of bounds" in captured.err


def test_insert_bad_index(capsys):
    assert main(["1", "--insert", "x", "2"]) == 2
    assert "must be an integer" in capsys.readouterr().err


def test_custom_style(capsys):
    assert main(["1", "2", "--separator", ", ", "--sentinel", "nil"]) == 0
    assert capsys.readouterr().out == "1, 2, nil\n"
