"""
Research Advisor

Turns the Markdown replies of a generative text service into typed
records for topic analysis, topic inspiration and paper feedback.
"""

__version__ = "1.0.0"
