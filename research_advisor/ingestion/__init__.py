"""
Document text extraction for uploaded papers and rubrics.
"""
