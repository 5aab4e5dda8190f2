import io
import pytest
from matrixdet import MatrixStreamParser


@pytest.fixture(params=['\n', '\r\n'], ids=['lf', 'crlf'], scope="session")
def eol(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for both supported line endings."""
    return request.param


@pytest.fixture
def transcribe():
    """Feed a text through a fresh parser and return (transcript, results)."""

    def _transcribe(text: str):
        out = io.StringIO()
        parser = MatrixStreamParser(out)
        parser.feed_text(text)
        parser.finish()
        return out.getvalue(), parser.results

    return _transcribe
