"""
Prompt Templates

The Markdown layout requested here is the only contract the parsers
rely on. Every heading and bold label is taken from the shared
vocabulary so that the prompt and the parsers stay in step.
"""

from research_advisor.config import DocumentLimits
from research_advisor.parsing.vocabulary import (
    SECTION_DELIMITER as H,
    STRUCTURE_SECTIONS,
    STRUCTURE_SUBLABELS,
    AnalysisLabels as A,
    FeedbackLabels as F,
    InspirationLabels,
)
from research_advisor.schemas.base import ViabilityStatus

ANALYSIS_SYSTEM_INSTRUCTION = (
    "You are an expert academic research advisor. Your task is to provide a "
    "comprehensive analysis of a given research paper topic, formatted in "
    "Markdown as requested in the user prompt."
)

INSPIRATION_SYSTEM_INSTRUCTION = (
    "You are an expert academic research advisor. Your task is to generate "
    "innovative research paper topics based on a field and education level, "
    "formatted in Markdown as requested in the user prompt."
)

FEEDBACK_SYSTEM_INSTRUCTION = (
    "You are a PhD-level academic reviewer. Your task is to provide a rigorous, "
    "in-depth critique of a research paper based on its text and the intended "
    "academic level. Format your feedback strictly in Markdown as requested."
)

ANALYSIS_EMPTY_MESSAGE = (
    "The AI returned an empty response. This might be due to a content safety "
    "filter. Please adjust your topic and try again."
)
INSPIRATION_EMPTY_MESSAGE = (
    "The AI returned an empty response. This might be due to a content safety "
    "filter. Please adjust your field of research and try again."
)
FEEDBACK_EMPTY_MESSAGE = (
    "The AI returned an empty response. This might be due to a content safety "
    "filter or an issue with the provided text."
)

_WISE = ViabilityStatus.WISE_CHOICE.value
_CAUTION = ViabilityStatus.CAUTION_ADVISED.value
_NOVEL = ViabilityStatus.NOVEL_OPPORTUNITY.value
_CORE, _QUESTIONS, _TIP = STRUCTURE_SUBLABELS


def _structure_example(section: str) -> str:
    return (
        f"- **{section}:**\n"
        f"  - **{_CORE}:** [Description]\n"
        f"  - **{_QUESTIONS}:**\n"
        "    - [Question 1?]\n"
        "    - [Question 2?]\n"
        f"  - **{_TIP}:** [Tip or Pitfall]\n"
    )


def build_analysis_prompt(topic: str) -> str:
    """Four-section analysis of a research topic."""
    first, second, *rest = STRUCTURE_SECTIONS
    remaining = ", ".join(rest[:-1]) + f", and {rest[-1]}"
    return f"""
Analyze the following research paper topic: "{topic}".

Please provide a comprehensive analysis in four distinct sections, formatted in Markdown.

{H}{A.OVERVIEW}
Provide a brief, one-paragraph overview of the topic. Following the overview, use these exact labels on new lines:
- **{A.EDUCATION_LEVEL}** [Specify minimum level, e.g., High School, Undergraduate, Postgraduate, Expert]
- **{A.PREREQUISITES}** [List any prerequisite materials or knowledge required]

{H}{A.EXISTING_RESEARCH}
Perform a deep search for existing academic papers on this or very similar topics. List between 5 and 10 of the most relevant ones. For each paper, provide only the following details:
- **{A.PAPER_TITLE}** [Title of the paper]
- **{A.PAPER_AUTHORS}** [List of authors]
- **{A.PAPER_JOURNAL}** [Name of the journal or conference]
- **{A.PAPER_YEAR}** [Year of publication]

{H}{A.VIABILITY}
Based on your deep search, provide a **strict and critical** recommendation on the viability of this topic for a research paper. Your evaluation should be rigorous. Start the recommendation with one of three labels: "{_WISE}", "{_CAUTION}", or "{_NOVEL}".

Use the following strict criteria for your classification:
- **{_NOVEL}**: Reserve this classification *only* for topics that are genuinely groundbreaking, with minimal to no direct pre-existing research found. The potential for a completely new contribution must be exceptionally high and clearly demonstrable. Be highly critical before assigning this.
- **{_WISE}**: This applies to topics with a solid foundation of existing research that also present a *clear, specific, and achievable* gap for a novel contribution. Do not assign this label if the field is oversaturated or if the potential contribution is merely incremental.
- **{_CAUTION}**: This should be your default classification for topics that are very broad, heavily saturated with existing research, or where a novel contribution would be extremely difficult to achieve. If there is any significant challenge, saturation, or ambiguity, choose this label.

After the label, provide detailed reasoning for your recommendation, using bullet points to highlight key arguments regarding research saturation, existing gaps, and the *difficulty* of making a novel contribution.

{H}{A.STRUCTURE}
Provide a highly detailed, expert-level guide on how to structure a paper on this topic. For each standard academic section, provide the following three elements:
1.  **{_CORE}:** A clear description of what this section should contain.
2.  **{_QUESTIONS}:** 2-3 key questions the author should answer within this section to ensure it's comprehensive.
3.  **{_TIP}:** A "pro-tip" or a common pitfall to avoid for this specific section, tailored to the research topic.

Structure your response for each section using markdown, for example:
{_structure_example(first)}{_structure_example(second)}
...and so on for all standard sections including {remaining}.
"""


def build_inspiration_prompt(field: str, education_level: str) -> str:
    """Five to seven topic suggestions for a student profile."""
    return f"""
Generate a list of 5 to 7 innovative and suitable research paper topics for a student with the following profile:

- **Field of Research:** {field}
- **Education Level:** {education_level}

For each topic, provide a compelling title and a 2-3 sentence description explaining the topic's significance, potential research questions, and why it's a good fit for the specified education level.

Format the response in Markdown with each topic as a distinct section. Use the following structure for each topic, and nothing else:

{H}[Topic Title]
**{InspirationLabels.DESCRIPTION}** [Your detailed description here]
"""


def build_feedback_prompt(text: str, level: str, criteria: str | None = None) -> str:
    """
    Three-section critique of a paper.

    The paper text is truncated to DocumentLimits.MAX_PROMPT_CHARS; the
    rubric block is included only when criteria are given.
    """
    rubric = ""
    if criteria:
        rubric = f"""
**Grading Criteria/Rubric:**
You MUST use the following criteria as the primary basis for your grade and feedback.
---
{criteria}
---
"""
    rubric_grade = " and the provided rubric" if criteria else ""
    rubric_general = " Relate your feedback to the provided criteria where applicable." if criteria else ""

    return f"""
Please provide a rigorous, PhD-level critique of the following research paper text. The paper is intended for the **{level}** academic level.
{rubric}
*Important: The provided text has been automatically extracted from a document and may contain formatting artifacts (e.g., broken words, strange spacing). Please do your best to interpret the text and provide feedback despite these potential issues.*

**Paper Text:**
---
{text[:DocumentLimits.MAX_PROMPT_CHARS]}
---

**Your Task:**
Analyze the text and provide feedback in three distinct sections, formatted strictly in Markdown. If a rubric or criteria was provided, explicitly reference it in your feedback.

{H}{F.GRADE}
Provide a single numerical grade out of 100. Be critical and base the grade on the standards for the specified academic level{rubric_grade}.
- **{F.GRADE_FIELD}** [Your numerical grade here]

{H}{F.GENERAL}
Provide high-level, constructive feedback on the paper's overall quality. Comment on the clarity of the thesis, the strength of the argument, the logical flow, the structure, and the writing style. Use bullet points for your main comments.{rubric_general}

{H}{F.SPECIFIC}
Identify specific areas for improvement directly from the text. For each point, provide a direct quote from the paper and your specific comment on how to improve it. List at least 5-10 specific points. Format each point as follows:
- **{F.QUOTE}** "[The exact quote from the paper text]"
  - **{F.COMMENT}** [Your detailed comment and suggestion for improvement]
"""
