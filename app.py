"""
Research Advisor
Streamlit interface for topic analysis, topic inspiration and paper feedback

Run with: streamlit run app.py
"""

import asyncio
import logging

import streamlit as st

# Load environment (optional)
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass  # Ignore if missing, secrets/env are used directly

from research_advisor.config import DocumentLimits, get_setting
from research_advisor.errors import ResearchAdvisorError
from research_advisor.ingestion.reader import read_upload
from research_advisor.parsing import parse_feedback, parse_inspiration, parse_topic_analysis
from research_advisor.parsing.emphasis import render_emphasis, to_html
from research_advisor.schemas import (
    AcademicLevel,
    EducationLevel,
    FeedbackAnalysis,
    InspirationTopic,
    TopicAnalysis,
)
from research_advisor.services.advisor import ResearchAdvisor, build_share_text
from research_advisor.storage.history import HistoryStore

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("research_advisor.app")

# Page config - must be first
st.set_page_config(
    page_title="Research Advisor",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="expanded"
)


# --- ACCESS CONTROL (GATEKEEPER) ---
def check_password():
    """Returns `True` if the user had the correct access code."""
    password = get_setting("ACCESS_CODE")

    # If no code set, allow access
    if not password:
        return True

    def password_entered():
        """Checks whether the code entered by the user is correct."""
        if st.session_state["password"] == password:
            st.session_state["password_correct"] = True
            del st.session_state["password"]  # don't store password
        else:
            st.session_state["password_correct"] = False

    if "password_correct" not in st.session_state:
        st.text_input(
            "Enter Access Code 🔒", type="password", on_change=password_entered, key="password"
        )
        st.caption("This tool is restricted. Please enter the code provided by the administrator.")
        return False

    elif not st.session_state["password_correct"]:
        st.text_input(
            "Enter Access Code 🔒", type="password", on_change=password_entered, key="password"
        )
        st.error("😕 Access denied. Please try again.")
        return False

    return True


if not check_password():
    st.stop()


st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

    html, body, [class*="css"] {
        font-family: 'Inter', sans-serif;
    }

    .viability-card {
        border-left: 4px solid;
        border-radius: 8px;
        padding: 20px;
        margin-bottom: 16px;
        white-space: pre-wrap;
    }
    .viability-WISE_CHOICE { border-color: #22c55e; background-color: #f0fdf4; }
    .viability-CAUTION_ADVISED { border-color: #eab308; background-color: #fefce8; }
    .viability-NOVEL_OPPORTUNITY { border-color: #a855f7; background-color: #faf5ff; }
    .viability-UNKNOWN { border-color: #94a3b8; background-color: #f1f5f9; }

    .grade-badge {
        font-size: 3rem;
        font-weight: 700;
        color: #7c3aed;
    }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    .stDeployButton {display:none;}
</style>
""", unsafe_allow_html=True)


# --- PROVISIONING ---
@st.cache_resource
def get_advisor():
    """Initialize the advisor (Cached)."""
    return ResearchAdvisor()


@st.cache_resource
def get_history_store():
    return HistoryStore()


def rich(text: str) -> None:
    """Render a parsed field with its **bold** spans."""
    html = render_emphasis(text, to_html).replace("\n", "<br />")
    st.markdown(html, unsafe_allow_html=True)


def run(coro):
    return asyncio.run(coro)


# =============================================================================
# TOPIC ANALYZER
# =============================================================================

def render_analysis(topic: str, analysis: TopicAnalysis) -> None:
    overview = analysis.overview
    with st.container(border=True):
        st.caption("TOPIC OVERVIEW")
        rich(overview.summary)
        col1, col2 = st.columns(2)
        with col1:
            st.markdown("**Education Level**")
            rich(overview.education_level)
        with col2:
            st.markdown("**Prerequisites**")
            rich(overview.prerequisites)

    viability = analysis.viability
    st.markdown(
        f'<div class="viability-card viability-{viability.status.value}">'
        f"<h3>{viability.status.display_title}</h3>"
        f"{render_emphasis(viability.reasoning, to_html)}</div>",
        unsafe_allow_html=True,
    )

    st.subheader("Existing Research")
    if not analysis.papers:
        st.info("No papers were found for this topic.")
    for paper in analysis.papers:
        with st.container(border=True):
            rich(f"**{paper.title}**")
            st.caption(f"{paper.authors} · {paper.journal} · {paper.year}")

    st.subheader("Recommended Paper Structure")
    for section in analysis.structure:
        with st.expander(section.title):
            st.markdown("**Core Content**")
            rich(section.core_content)
            st.markdown("**Guiding Questions**")
            rich(section.guiding_questions.replace("- ", "• "))
            st.markdown("**Expert Tip**")
            rich(section.expert_tip)

    with st.expander("Share"):
        st.code(build_share_text(topic, analysis), language=None)


def analyze(topic: str) -> None:
    try:
        with st.spinner("Analyzing topic..."):
            markdown = run(get_advisor().analyze_topic(topic))
    except ResearchAdvisorError as e:
        logger.warning(f"Topic analysis failed for '{topic}': {e}")
        st.session_state["analyzer_error"] = str(e)
        return

    st.session_state["analyzer_error"] = None
    st.session_state["analysis"] = markdown
    st.session_state["analyzed_topic"] = topic
    item = get_history_store().add(topic, markdown)
    st.session_state["selected_history_id"] = item.id


def topic_analyzer_tab() -> None:
    pending = st.session_state.pop("pending_topic", None)
    topic = st.text_input(
        "Research topic",
        value=pending or st.session_state.get("analyzed_topic", ""),
        placeholder="e.g. The impact of microplastics on freshwater ecosystems",
    )
    if st.button("🔍 Analyze Topic", type="primary", use_container_width=True) or pending:
        analyze(pending or topic)

    if st.session_state.get("analyzer_error"):
        st.error(st.session_state["analyzer_error"])

    markdown = st.session_state.get("analysis")
    if markdown:
        render_analysis(st.session_state.get("analyzed_topic", ""), parse_topic_analysis(markdown))


# =============================================================================
# INSPIRE ME
# =============================================================================

def render_inspiration(topics: list[InspirationTopic]) -> None:
    if not topics:
        st.warning("No topics could be read from the response. Please try again.")
        return
    for i, topic in enumerate(topics):
        with st.container(border=True):
            st.markdown(f"#### {topic.title}")
            rich(topic.description)
            if st.button("Analyze this topic →", key=f"inspire-{i}"):
                st.session_state["pending_topic"] = topic.title
                st.toast("Analysis started, see the Topic Analyzer tab.")
                st.rerun()


def inspire_tab() -> None:
    field = st.text_input("Field of research", placeholder="e.g. Marine Biology")
    level = st.selectbox("Education level", [lvl.value for lvl in EducationLevel], index=1)

    if st.button("✨ Inspire Me", type="primary", use_container_width=True):
        try:
            with st.spinner("Generating topics..."):
                st.session_state["inspiration"] = run(get_advisor().inspire_topics(field, level))
            st.session_state["inspirer_error"] = None
        except ResearchAdvisorError as e:
            st.session_state["inspirer_error"] = str(e)

    if st.session_state.get("inspirer_error"):
        st.error(st.session_state["inspirer_error"])

    markdown = st.session_state.get("inspiration")
    if markdown:
        render_inspiration(parse_inspiration(markdown))


# =============================================================================
# PAPER FEEDBACK
# =============================================================================

def render_feedback(feedback: FeedbackAnalysis) -> None:
    col1, col2 = st.columns([1, 3])
    with col1:
        st.caption("PREDICTED GRADE")
        st.markdown(f'<div class="grade-badge">{feedback.grade}/100</div>', unsafe_allow_html=True)
    with col2:
        st.caption("GENERAL FEEDBACK")
        for line in feedback.general_feedback.split("\n"):
            if line.startswith("- "):
                line = "• " + line[2:]
            rich(line)

    st.subheader("Specific Feedback")
    for item in feedback.specific_feedback:
        with st.container(border=True):
            st.markdown(f"> {item.quote}")
            rich(item.comment)


def feedback_tab() -> None:
    paper = st.file_uploader("Paper", type=["pdf", "docx", "doc", "txt"])
    criteria_file = st.file_uploader("Grading criteria (optional)", type=["pdf", "docx", "doc", "txt"])
    level = st.selectbox("Academic level", [lvl.value for lvl in AcademicLevel], index=1)

    if st.button("📝 Get Feedback", type="primary", use_container_width=True, disabled=paper is None):
        try:
            with st.spinner("Reading document and generating feedback..."):
                document = read_upload(paper.name, paper.getvalue(), paper.type)
                criteria = None
                if criteria_file is not None:
                    criteria = read_upload(
                        criteria_file.name, criteria_file.getvalue(), criteria_file.type
                    ).content
                st.session_state["feedback"] = run(
                    get_advisor().generate_feedback(document.content, level, criteria)
                )
            st.session_state["feedback_error"] = None
        except ResearchAdvisorError as e:
            st.session_state["feedback_error"] = str(e)

    st.caption(f"Documents need at least {DocumentLimits.MIN_TEXT_LENGTH} characters of text.")

    if st.session_state.get("feedback_error"):
        st.error(st.session_state["feedback_error"])

    markdown = st.session_state.get("feedback")
    if markdown:
        render_feedback(parse_feedback(markdown))


# =============================================================================
# HISTORY
# =============================================================================

def history_sidebar() -> None:
    store = get_history_store()
    with st.sidebar:
        st.markdown("### Research **Advisor**")
        st.markdown("---")
        st.markdown("#### History")
        items = store.list()
        if not items:
            st.caption("No analyses yet.")
        for item in items:
            selected = item.id == st.session_state.get("selected_history_id")
            label = ("▶ " if selected else "") + item.topic
            if st.button(label, key=f"history-{item.id}", use_container_width=True):
                st.session_state["analysis"] = item.analysis
                st.session_state["analyzed_topic"] = item.topic
                st.session_state["selected_history_id"] = item.id
                st.rerun()
        if items and st.button("🗑️ Clear History", use_container_width=True):
            store.clear()
            st.session_state["selected_history_id"] = None
            st.rerun()


def main():
    history_sidebar()
    analyzer, inspire, feedback = st.tabs(["Topic Analyzer", "Inspire Me", "Paper Feedback"])
    with analyzer:
        topic_analyzer_tab()
    with inspire:
        inspire_tab()
    with feedback:
        feedback_tab()


if __name__ == "__main__":
    main()
