"""
Shared fixtures: sample replies in the layout the prompts request.
"""

import pytest


ANALYSIS_REPLY = """Here is the analysis you asked for.

### Topic Overview

Federated learning lets hospitals train shared models without pooling patient records.
- **Education Level:** Postgraduate
- **Prerequisites:** Machine learning fundamentals, basic **privacy** law

### Existing Research

- **Title:** Communication-Efficient Learning of Deep Networks from Decentralized Data
- **Authors:** McMahan, Moore, Ramage, Hampson, Arcas
- **Journal/Conference:** AISTATS
- **Year:** 2017

- **Title:** Federated Learning for Healthcare Informatics
- **Authors:** Xu, Glicksberg, Su
- **Journal/Conference:** Journal of Healthcare Informatics Research
- **Year:** 2021

### Topic Viability Analysis

**WISE_CHOICE**: The field is active but clinical deployment studies remain scarce.
- **Saturation:** Moderate.

### Recommended Paper Structure

- **Title:**
  - **Core Content:** A concise title naming the setting.
  - **Guiding Questions:**
    - Does it name the method?
    - Does it name the domain?
  - **Expert Tip:** Avoid acronyms.
- **Abstract:**
  - **Core Content:** Summarise problem, method and results.
  - **Expert Tip:** Write it last.
- **Methodology:**
  - **Core Content:** Describe the federation setup.
  - **Guiding Questions:**
    - How many sites?
  - **Expert Tip:** Report non-IID splits.

### Closing Remarks

Good luck!
"""

FEEDBACK_REPLY = (
    "### Predicted Grade\n\n- **Grade:** 72\n\n"
    "### General Feedback\n\nSolid work.\n\n"
    "### Specific Feedback\n\n"
    '- **Quote:** "X causes Y"\n  - **Comment:** Needs citation.\n'
)

INSPIRATION_REPLY = """### [Microplastics in Alpine Lakes]
**Description:** Investigate how airborne microplastics reach remote lakes.

### Urban Heat Islands and School Attendance
**Description:** Link classroom temperatures to absenteeism
across two summers.
"""


@pytest.fixture
def analysis_reply() -> str:
    return ANALYSIS_REPLY


@pytest.fixture
def feedback_reply() -> str:
    return FEEDBACK_REPLY


@pytest.fixture
def inspiration_reply() -> str:
    return INSPIRATION_REPLY


@pytest.fixture
def sample_pdf_path(tmp_path):
    """A two-page PDF built with PyMuPDF."""
    import fitz

    path = tmp_path / "sample_paper.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Deep learning for crop yield predic-")
    page.insert_text((72, 90), "tion in arid regions.")
    page = doc.new_page()
    page.insert_text((72, 72), "Results show a twelve percent improvement.")
    doc.save(str(path))
    doc.close()
    return str(path)
