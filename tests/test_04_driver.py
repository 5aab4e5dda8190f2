"""compute_determinants over streams and files."""
import io
import pytest
from matrixdet import StreamIOError, compute_determinants, iter_characters, CHUNK_SIZE, ENCODING

SAMPLE = "2\n1 2\n3 4\n2\n1  2\n3 4\n3\n2 0 0\n0 3 0\n0 0 4\n"


@pytest.mark.parametrize("chunk_size", [1, 3, 4096])
def test_streams(chunk_size):
    out = io.StringIO()
    results = compute_determinants(io.StringIO(SAMPLE), out, **{CHUNK_SIZE: chunk_size})
    assert [r.determinant for r in results] == [-2, None, 24]
    assert not results[1].ok
    assert out.getvalue().count("Calculated value:") == 2
    assert out.getvalue().count("Encountered error on line 1") == 1


def test_files_keep_crlf(tmp_path):
    source = tmp_path / "in.txt"
    sink = tmp_path / "out.txt"
    source.write_bytes(b"2\r\n0 1\r\n1 0\r\n")
    results = compute_determinants(source, str(sink), **{ENCODING: 'ascii'})
    assert results[0].determinant == -1
    assert sink.read_bytes() == b"2\r\n0 1\r\n1 0\r\nCalculated value: -1\n\n"


def test_unknown_option():
    with pytest.raises(Exception, match="not supported"):
        compute_determinants(io.StringIO(""), io.StringIO(), colour='red')


def test_iter_characters_is_lazy():
    chars = iter_characters(io.StringIO("abc"), chunk_size=2)
    assert next(chars) == "a"
    assert list(chars) == ["b", "c"]


def test_iter_characters_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        list(iter_characters(io.StringIO("abc"), chunk_size=0))


class FailingSource(io.StringIO):

    def read(self, size=-1):
        raise OSError("device not ready")


def test_read_failure_is_fatal():
    with pytest.raises(StreamIOError, match="read the input"):
        compute_determinants(FailingSource(), io.StringIO())


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        compute_determinants(tmp_path / "missing.txt", io.StringIO())
