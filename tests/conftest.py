import httpx
import pytest

ENDPOINT = "http://analysis.test/analyze"


@pytest.fixture
def anyio_backend():
    # Run AnyIO tests on asyncio only; trio is not installed.
    return "asyncio"


@pytest.fixture
def make_client():
    from irab_analyzer.analysis import AnalysisClient

    def _make(handler, **kwargs):
        return AnalysisClient(ENDPOINT, transport=httpx.MockTransport(handler), **kwargs)

    return _make
