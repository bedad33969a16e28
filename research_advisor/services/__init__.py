"""
Research Advisor Services

Prompt assembly and the advisor facade around the AI client.
"""
