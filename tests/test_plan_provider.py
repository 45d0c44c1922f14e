"""Tests for the Gemini adapter and plan parsing."""

from types import SimpleNamespace

import httpx
import pytest
from google.genai.errors import UnknownApiResponseError

from fitness_coach.agents.plan_provider import (
    GeminiTextClient,
    PlanProvider,
    parse_plan,
    strip_code_fences,
)
from fitness_coach.errors import (
    MissingCredentialError,
    PlanCredentialError,
    PlanParseError,
    PlanProviderError,
    PlanUpstreamError,
    ResponseShapeError,
    UpstreamServiceError,
)



def fake_genai_client(text=None, error=None):
    """Object shaped like genai.Client for the async generate call."""
    calls = []

    async def generate_content(model, contents):
        calls.append({"model": model, "contents": contents})
        if error is not None:
            raise error
        return SimpleNamespace(text=text)

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return client, calls


class TestStripCodeFences:
    """Tests for strip_code_fences."""

    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_code_fences('```\n{"a": 1}```\n') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


class TestParsePlan:
    """Tests for parse_plan."""

    def test_fenced_plan(self, plan_json):
        """A fenced response parses to the same plan as the bare JSON."""
        fenced = parse_plan(f"```json\n{plan_json}\n```")
        assert fenced == parse_plan(plan_json)
        assert fenced.user_data.name == "Jo"

    def test_invalid_json(self):
        with pytest.raises(PlanParseError):
            parse_plan("Here is your plan: Monday squats")

    def test_wrong_structure(self):
        with pytest.raises(PlanParseError):
            parse_plan('{"workoutPlan": {"day": "Monday"}}')

    def test_deeply_nested(self):
        """Pathological nesting is a parse failure, not a crash."""
        with pytest.raises(PlanParseError):
            parse_plan("[" * 100000 + "]" * 100000)


class TestGeminiTextClient:
    """Tests for GeminiTextClient."""

    async def test_generate(self):
        client, calls = fake_genai_client(text="hello")
        gemini = GeminiTextClient(api_key="key", model="gemini-2.5-flash", client=client)

        assert await gemini.generate("prompt") == "hello"
        assert calls == [{"model": "gemini-2.5-flash", "contents": "prompt"}]

    async def test_missing_key(self):
        """Without a key the service is never contacted."""
        gemini = GeminiTextClient(api_key=None)

        with pytest.raises(MissingCredentialError):
            await gemini.generate("prompt")

    async def test_transport_error(self):
        client, _ = fake_genai_client(error=httpx.ConnectError("connection refused"))
        gemini = GeminiTextClient(api_key="key", client=client)

        with pytest.raises(UpstreamServiceError):
            await gemini.generate("prompt")

    async def test_empty_response(self):
        client, _ = fake_genai_client(text=None)
        gemini = GeminiTextClient(api_key="key", client=client)

        with pytest.raises(ResponseShapeError):
            await gemini.generate("prompt")

    @pytest.mark.parametrize(
        "error",
        [
            UnknownApiResponseError("not json"),
            ConnectionResetError("reset by peer"),
            OSError("network unreachable"),
        ],
    )
    async def test_other_sdk_failures(self, error):
        """Failures outside the SDK's APIError still count as upstream errors."""
        client, _ = fake_genai_client(error=error)
        gemini = GeminiTextClient(api_key="key", client=client)

        with pytest.raises(UpstreamServiceError) as exc_info:
            await gemini.generate("prompt")

        assert exc_info.value.__cause__ is error


class TestPlanProvider:
    """Tests for PlanProvider error mapping."""

    async def test_single_call(self, fake_text_client):
        """Exactly one generation call is made per plan."""
        provider = PlanProvider(fake_text_client)
        plan = await provider.generate("prompt")

        assert plan.user_data.fitness_goal == "weight-loss"
        assert fake_text_client.prompts == ["prompt"]

    async def test_missing_credential(self, make_text_client):
        provider = PlanProvider(make_text_client(error=MissingCredentialError("Gemini")))

        with pytest.raises(PlanCredentialError):
            await provider.generate("prompt")

    async def test_upstream_failure(self, failing_text_client):
        provider = PlanProvider(failing_text_client)

        with pytest.raises(PlanUpstreamError):
            await provider.generate("prompt")

    async def test_unparseable_text(self, make_text_client):
        provider = PlanProvider(make_text_client(response="Sorry, I cannot help"))

        with pytest.raises(PlanProviderError):
            await provider.generate("prompt")
