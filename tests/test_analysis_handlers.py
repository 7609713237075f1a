from dataclasses import dataclass, field

import httpx
import pytest

from irab_analyzer.analysis import GENERIC_ERROR_MESSAGE, AnalysisClient, Failure, Pending
from irab_analyzer.analysis import handlers

ENDPOINT = "http://analysis.test/analyze"

OK_BODY = {"success": True, "output": [{"word": "ذهب", "irab": "فعل ماضٍ"}]}


@dataclass
class View:
    sentence: str = ""
    status: str = "empty"
    words: list = field(default_factory=list)
    error_message: str = ""


def client_for(handler):
    return lambda: AnalysisClient(ENDPOINT, transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "sentence, status, expected",
    [
        ("ذهب الولد", "empty", True),
        ("ذهب الولد", "success", True),
        ("ذهب الولد", "failure", True),
        ("ذهب الولد", "pending", False),
        ("   ", "empty", False),
        ("", "failure", False),
    ],
)
def test_submit_enabled(sentence, status, expected):
    assert handlers.submit_enabled(sentence, status) is expected


def test_has_result():
    assert handlers.has_result("success")
    assert handlers.has_result("failure")
    assert not handlers.has_result("pending")
    assert not handlers.has_result("empty")


@pytest.mark.anyio
async def test_submission_goes_pending_then_success():
    view = View(sentence=" ذهب الولد ")
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(view.status)
        return httpx.Response(200, json=OK_BODY)

    flow = handlers.begin_submission(view, client_for(handler))

    assert flow is not None
    assert view.status == "pending"
    assert not handlers.submit_enabled(view.sentence, view.status)

    handlers.apply_result(view, await handlers.settle_submission(flow))

    assert seen == ["pending"]
    assert view.status == "success"
    assert view.words == [{"word": "ذهب", "irab": "فعل ماضٍ"}]
    assert view.error_message == ""


def test_submission_while_pending_is_ignored():
    view = View(sentence="ذهب", status="pending")

    flow = handlers.begin_submission(view, client_for(lambda r: httpx.Response(200, json=OK_BODY)))

    assert flow is None
    assert view.status == "pending"


def test_blank_submission_is_ignored():
    view = View(sentence="  ", status="failure", error_message="x")

    assert handlers.begin_submission(view, client_for(lambda r: httpx.Response(200))) is None
    assert view.status == "failure"
    assert view.error_message == "x"


def test_configuration_error_settles_to_generic_failure():
    def broken_client():
        raise ValueError("Analysis API URL is not configured.")

    view = View(sentence="ذهب الولد", status="success", words=[{"word": "a", "irab": "b"}])

    assert handlers.begin_submission(view, broken_client) is None
    assert view.status == "failure"
    assert view.error_message == GENERIC_ERROR_MESSAGE
    assert view.words == []


def test_default_client_reads_environment(monkeypatch):
    monkeypatch.setenv("ANALYSIS_API_URL", "http://configured.test/analyze")

    assert handlers.default_client().endpoint == "http://configured.test/analyze"


@pytest.mark.anyio
async def test_unexpected_client_error_settles_to_generic_failure():
    class ExplodingClient:
        async def analyze(self, sentence):
            raise RuntimeError("bug")

    view = View(sentence="ذهب الولد")
    flow = handlers.begin_submission(view, ExplodingClient)

    result = await handlers.settle_submission(flow)
    handlers.apply_result(view, result)

    assert result == Failure(GENERIC_ERROR_MESSAGE)
    assert view.status == "failure"
    assert handlers.submit_enabled(view.sentence, view.status)


def test_current_result_round_trips_view():
    assert isinstance(handlers.current_result(View(status="pending")), Pending)


def test_clear_resets_settled_result():
    view = View(sentence="ذهب", status="failure", error_message="نص غير صالح")

    assert handlers.clear(view)
    assert view == View()


def test_clear_is_ignored_while_pending():
    view = View(sentence="ذهب", status="pending")

    assert not handlers.clear(view)
    assert view.sentence == "ذهب"
    assert view.status == "pending"
