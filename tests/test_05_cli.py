"""Command line interface."""
import logging
import pytest
from matrixdet import DisableLogger
from matrixdet.cli import main


@pytest.fixture
def files(tmp_path):
    source = tmp_path / "input.txt"
    source.write_bytes(b"2\n1 0\n0 1\n2\n1 x\n0 1\n")
    return source, tmp_path / "output.txt"


def test_success(files):
    source, sink = files
    assert main([str(source), str(sink)]) == 0
    text = sink.read_text()
    assert "Calculated value: 1\n\n" in text
    assert "Encountered error on line 1 due to --> 'invalid character 'x''" in text


@pytest.mark.parametrize("argv", [[], ["only_one.txt"], ["a.txt", "b.txt", "c.txt"]])
def test_wrong_argument_count(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    assert "usage: matrixdet" in capsys.readouterr().err


def test_unopenable_input(tmp_path, capsys):
    sink = tmp_path / "output.txt"
    assert main([str(tmp_path / "missing.txt"), str(sink)]) == 1
    assert "Make sure the input/output path is correct." in capsys.readouterr().err
    assert not sink.exists()


def test_unopenable_output(files, capsys):
    source, _ = files
    assert main([str(source), str(source.parent / "no_such_dir" / "out.txt")]) == 1
    assert "Make sure the input/output path is correct." in capsys.readouterr().err


def test_quiet_disables_logging(files):
    source, sink = files
    assert main([str(source), str(sink), "--quiet"]) == 0
    assert logging.root.manager.disable == logging.NOTSET


def test_disable_logger(caplog):
    with DisableLogger():
        logging.getLogger("matrixdet").warning("hidden")
    logging.getLogger("matrixdet").warning("shown")
    assert "hidden" not in caplog.text
    assert "shown" in caplog.text
