import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from research_advisor.config import DocumentLimits, ModelConfig
from research_advisor.errors import AIServiceError, DocumentTooShortError, InvalidInputError
from research_advisor.schemas.base import ViabilityStatus
from research_advisor.services import prompts
from research_advisor.services.advisor import ResearchAdvisor, build_share_text
from research_advisor.utils.model_router import TaskType

PAPER_TEXT = "Sleep consolidates memory. " * 10


@pytest.fixture
def client():
    mock = MagicMock()
    mock.generate_text = AsyncMock(return_value="### Topic Overview\nSummary.")
    return mock


@pytest.fixture
def advisor(client):
    return ResearchAdvisor(client=client)


def test_analyze_topic_prompt(advisor, client):
    asyncio.run(advisor.analyze_topic("Federated learning in hospitals"))

    prompt = client.generate_text.call_args.args[0]
    kwargs = client.generate_text.call_args.kwargs
    assert 'Analyze the following research paper topic: "Federated learning in hospitals"' in prompt
    for heading in ("### Topic Overview", "### Existing Research",
                    "### Topic Viability Analysis", "### Recommended Paper Structure"):
        assert heading in prompt
    assert "- **Journal/Conference:**" in prompt
    assert kwargs["temperature"] == ModelConfig.ANALYSIS_TEMPERATURE
    assert kwargs["context"] == "analysis"
    assert kwargs["task_type"] == TaskType.REASONING
    assert kwargs["system_instruction"] == prompts.ANALYSIS_SYSTEM_INSTRUCTION
    assert kwargs["use_search"] is True

@pytest.mark.parametrize("topic", ["", "   "])
def test_blank_topic_rejected_before_request(advisor, client, topic):
    with pytest.raises(InvalidInputError) as exc_info:
        asyncio.run(advisor.analyze_topic(topic))
    assert exc_info.value.field == "topic"
    client.generate_text.assert_not_called()

def test_inspire_topics_prompt(advisor, client):
    asyncio.run(advisor.inspire_topics("Marine Biology", "Undergraduate"))

    prompt = client.generate_text.call_args.args[0]
    kwargs = client.generate_text.call_args.kwargs
    assert "- **Field of Research:** Marine Biology" in prompt
    assert "- **Education Level:** Undergraduate" in prompt
    assert "### [Topic Title]\n**Description:**" in prompt
    assert kwargs["temperature"] == ModelConfig.INSPIRATION_TEMPERATURE
    assert kwargs["task_type"] == TaskType.CREATIVE
    assert kwargs["use_search"] is True

def test_blank_field_rejected(advisor, client):
    with pytest.raises(InvalidInputError):
        asyncio.run(advisor.inspire_topics(" ", "Expert"))
    client.generate_text.assert_not_called()

def test_short_document_rejected(advisor, client):
    with pytest.raises(DocumentTooShortError) as exc_info:
        asyncio.run(advisor.generate_feedback("   too short   ", "Undergraduate"))
    assert exc_info.value.length == len("too short")
    assert exc_info.value.minimum == DocumentLimits.MIN_TEXT_LENGTH
    assert "does not contain enough text" in str(exc_info.value)
    client.generate_text.assert_not_called()

def test_feedback_prompt_without_criteria(advisor, client):
    asyncio.run(advisor.generate_feedback(PAPER_TEXT, "Postgraduate"))

    prompt = client.generate_text.call_args.args[0]
    assert "intended for the **Postgraduate** academic level" in prompt
    assert PAPER_TEXT in prompt
    assert "Grading Criteria/Rubric" not in prompt
    assert '- **Quote:** "[The exact quote from the paper text]"' in prompt
    assert client.generate_text.call_args.kwargs["context"] == "paper feedback"
    assert not client.generate_text.call_args.kwargs.get("use_search", False)

def test_feedback_prompt_with_criteria(advisor, client):
    asyncio.run(advisor.generate_feedback(PAPER_TEXT, "Professional", "Clarity 40%, Rigor 60%"))

    prompt = client.generate_text.call_args.args[0]
    assert "**Grading Criteria/Rubric:**" in prompt
    assert "Clarity 40%, Rigor 60%" in prompt
    assert "and the provided rubric" in prompt

def test_feedback_text_truncated():
    long_text = "a" * (DocumentLimits.MAX_PROMPT_CHARS + 500)
    prompt = prompts.build_feedback_prompt(long_text, "Undergraduate")
    assert "a" * DocumentLimits.MAX_PROMPT_CHARS in prompt
    assert "a" * (DocumentLimits.MAX_PROMPT_CHARS + 1) not in prompt

def test_client_errors_propagate(advisor, client):
    client.generate_text.side_effect = AIServiceError("Rate Limit Exceeded", "analysis")
    with pytest.raises(AIServiceError, match="Rate Limit Exceeded"):
        asyncio.run(advisor.analyze_topic("Topic"))

def test_parsed_variants(advisor, client, analysis_reply, feedback_reply, inspiration_reply):
    client.generate_text.return_value = analysis_reply
    analysis = asyncio.run(advisor.analyze_topic_parsed("Federated learning"))
    assert analysis.viability.status == ViabilityStatus.WISE_CHOICE

    client.generate_text.return_value = feedback_reply
    feedback = asyncio.run(advisor.generate_feedback_parsed(PAPER_TEXT, "Undergraduate"))
    assert feedback.grade == 72

    client.generate_text.return_value = inspiration_reply
    topics = asyncio.run(advisor.inspire_topics_parsed("Ecology", "Expert"))
    assert len(topics) == 2

def test_build_share_text(analysis_reply):
    from research_advisor.parsing import parse_topic_analysis

    text = build_share_text("Federated learning", parse_topic_analysis(analysis_reply))
    assert text.startswith('Check out my research topic analysis for: "Federated learning"')
    assert "- Viability: Wise Choice" in text
    assert "- Overview: Federated learning lets hospitals" in text
