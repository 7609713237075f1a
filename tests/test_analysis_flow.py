import httpx
import pytest

from irab_analyzer.analysis import (
    EMPTY,
    GENERIC_ERROR_MESSAGE,
    PENDING,
    AnalysisFlow,
    Empty,
    Failure,
    Pending,
    SubmissionRejected,
    Success,
    WordAnalysis,
    can_submit,
)

OK_BODY = {"success": True, "output": [{"word": "ذهب", "irab": "فعل ماضٍ"}]}


def test_can_submit_rules():
    assert can_submit("ذهب الولد", EMPTY)
    assert can_submit("ذهب", Failure("x"))
    assert can_submit("ذهب", Success(()))
    assert not can_submit("", EMPTY)
    assert not can_submit("   \n\t", EMPTY)
    assert not can_submit("ذهب الولد", PENDING)


@pytest.mark.anyio
async def test_state_is_pending_before_the_response_arrives(make_client):
    observed = []
    flow = None

    def handler(request: httpx.Request) -> httpx.Response:
        observed.append(flow.result)
        return httpx.Response(200, json=OK_BODY)

    flow = AnalysisFlow(make_client(handler))
    returned = flow.begin("ذهب الولد")

    assert isinstance(returned, Pending)
    assert isinstance(flow.result, Pending)

    await flow.finish()

    assert observed == [PENDING]


@pytest.mark.anyio
async def test_submit_success(make_client):
    flow = AnalysisFlow(make_client(lambda request: httpx.Response(200, json=OK_BODY)))

    result = await flow.submit("ذهب الولد")

    assert result == Success((WordAnalysis(word="ذهب", irab="فعل ماضٍ"),))
    assert flow.result == result
    assert len(flow.result.items) == 1


@pytest.mark.anyio
async def test_submit_domain_failure(make_client):
    flow = AnalysisFlow(
        make_client(
            lambda request: httpx.Response(200, json={"success": False, "error": "نص غير صالح"})
        )
    )

    assert await flow.submit("ذهب الولد") == Failure("نص غير صالح")


@pytest.mark.anyio
async def test_submit_transport_failure(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    flow = AnalysisFlow(make_client(handler))

    assert await flow.submit("ذهب الولد") == Failure(GENERIC_ERROR_MESSAGE)
    assert flow.can_submit("ذهب الولد")


def test_empty_input_is_rejected_without_state_change(make_client):
    flow = AnalysisFlow(make_client(lambda request: httpx.Response(200, json=OK_BODY)))

    with pytest.raises(SubmissionRejected):
        flow.begin("   ")

    assert isinstance(flow.result, Empty)


def test_overlapping_submission_is_rejected(make_client):
    flow = AnalysisFlow(make_client(lambda request: httpx.Response(200, json=OK_BODY)))
    flow.begin("ذهب الولد")

    assert not flow.can_submit("ذهب الولد")
    with pytest.raises(SubmissionRejected):
        flow.begin("ذهب الولد")


@pytest.mark.anyio
async def test_finish_without_begin_is_rejected(make_client):
    flow = AnalysisFlow(make_client(lambda request: httpx.Response(200, json=OK_BODY)))

    with pytest.raises(SubmissionRejected):
        await flow.finish()


@pytest.mark.anyio
async def test_new_submission_replaces_previous_result(make_client):
    responses = iter(
        [
            httpx.Response(200, json=OK_BODY),
            httpx.Response(200, json={"success": False, "error": "نص غير صالح"}),
        ]
    )
    flow = AnalysisFlow(make_client(lambda request: next(responses)))
    transitions = []
    flow.subscribe(transitions.append)

    await flow.submit("ذهب الولد")
    await flow.submit("ذهب")

    assert [type(item) for item in transitions] == [Pending, Success, Pending, Failure]
    assert flow.result == Failure("نص غير صالح")


@pytest.mark.anyio
async def test_unsubscribed_listener_sees_nothing(make_client):
    flow = AnalysisFlow(make_client(lambda request: httpx.Response(200, json=OK_BODY)))
    transitions = []
    unsubscribe = flow.subscribe(transitions.append)
    unsubscribe()

    await flow.submit("ذهب الولد")

    assert transitions == []


@pytest.mark.anyio
async def test_unexpected_client_error_still_settles():
    class ExplodingClient:
        async def analyze(self, sentence):
            raise RuntimeError("bug")

    flow = AnalysisFlow(ExplodingClient())

    with pytest.raises(RuntimeError):
        await flow.submit("ذهب الولد")

    assert flow.result == Failure(GENERIC_ERROR_MESSAGE)
