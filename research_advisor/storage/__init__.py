"""
History persistence.
"""
