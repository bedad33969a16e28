"""
Research Advisor Service

Assembles prompts, calls the AI client and hands complete replies to
the parsers. Input checks happen here, before any request is sent:
the parsers only ever see complete, non-empty text.
"""

import logging

from research_advisor.config import DocumentLimits, ModelConfig
from research_advisor.errors import DocumentTooShortError, InvalidInputError
from research_advisor.parsing import parse_feedback, parse_inspiration, parse_topic_analysis
from research_advisor.schemas.analysis import TopicAnalysis
from research_advisor.schemas.feedback import FeedbackAnalysis
from research_advisor.schemas.inspiration import InspirationTopic
from research_advisor.services import prompts
from research_advisor.utils.gemini_client import GeminiClient, OpenRouterClient, get_ai_client
from research_advisor.utils.model_router import TaskType

logger = logging.getLogger(__name__)


class ResearchAdvisor:
    """
    Entry point for the three advisor features.

    Usage:
        advisor = ResearchAdvisor()
        analysis = await advisor.analyze_topic_parsed("Federated learning in hospitals")
    """

    def __init__(self, client: GeminiClient | OpenRouterClient | None = None) -> None:
        self._client = client or get_ai_client()

    # -------------------------------------------------------------------------
    # Raw replies
    # -------------------------------------------------------------------------

    async def analyze_topic(self, topic: str) -> str:
        """Four-section analysis of a research topic, as Markdown."""
        if not topic or not topic.strip():
            raise InvalidInputError("topic", "Please enter a research topic.")

        logger.info(f"Analyzing topic '{topic.strip()}'")
        return await self._client.generate_text(
            prompts.build_analysis_prompt(topic),
            system_instruction=prompts.ANALYSIS_SYSTEM_INSTRUCTION,
            temperature=ModelConfig.ANALYSIS_TEMPERATURE,
            context="analysis",
            empty_message=prompts.ANALYSIS_EMPTY_MESSAGE,
            task_type=TaskType.REASONING,
            use_search=True,
        )

    async def inspire_topics(self, field: str, education_level: str) -> str:
        """Topic suggestions for a field and education level, as Markdown."""
        if not field or not field.strip():
            raise InvalidInputError("field", "Please enter a field of research.")

        logger.info(f"Generating topics for '{field.strip()}' ({education_level})")
        return await self._client.generate_text(
            prompts.build_inspiration_prompt(field, education_level),
            system_instruction=prompts.INSPIRATION_SYSTEM_INSTRUCTION,
            temperature=ModelConfig.INSPIRATION_TEMPERATURE,
            context="inspiration",
            empty_message=prompts.INSPIRATION_EMPTY_MESSAGE,
            task_type=TaskType.CREATIVE,
            use_search=True,
        )

    async def generate_feedback(
        self,
        text: str,
        level: str,
        criteria: str | None = None,
    ) -> str:
        """
        Critique of a paper, as Markdown.

        Args:
            text: Cleaned paper text
            level: Intended academic level
            criteria: Optional grading rubric text

        Raises:
            DocumentTooShortError: If the text is under the minimum length
        """
        length = len(text.strip()) if text else 0
        if length < DocumentLimits.MIN_TEXT_LENGTH:
            raise DocumentTooShortError(length, DocumentLimits.MIN_TEXT_LENGTH)

        if length > DocumentLimits.MAX_PROMPT_CHARS:
            logger.warning(
                f"Paper text truncated from {length} to "
                f"{DocumentLimits.MAX_PROMPT_CHARS} characters"
            )

        return await self._client.generate_text(
            prompts.build_feedback_prompt(text, level, criteria),
            system_instruction=prompts.FEEDBACK_SYSTEM_INSTRUCTION,
            temperature=ModelConfig.FEEDBACK_TEMPERATURE,
            context="paper feedback",
            empty_message=prompts.FEEDBACK_EMPTY_MESSAGE,
            task_type=TaskType.REASONING,
        )

    # -------------------------------------------------------------------------
    # Parsed replies
    # -------------------------------------------------------------------------

    async def analyze_topic_parsed(self, topic: str) -> TopicAnalysis:
        return parse_topic_analysis(await self.analyze_topic(topic))

    async def inspire_topics_parsed(self, field: str, education_level: str) -> list[InspirationTopic]:
        return parse_inspiration(await self.inspire_topics(field, education_level))

    async def generate_feedback_parsed(
        self,
        text: str,
        level: str,
        criteria: str | None = None,
    ) -> FeedbackAnalysis:
        return parse_feedback(await self.generate_feedback(text, level, criteria))


def build_share_text(topic: str, analysis: TopicAnalysis) -> str:
    """Short summary of an analysis for sharing or copying."""
    status = analysis.viability.status.value.replace("_", " ").title()
    return (
        f'Check out my research topic analysis for: "{topic}"\n\n'
        f"- Viability: {status}\n"
        f"- Overview: {analysis.overview.summary}\n\n"
        "Generated by the AI Research Assistant."
    )
