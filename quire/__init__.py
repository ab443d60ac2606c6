"""
Quire - structured resume compilation to LaTeX, HTML and PDF

Turns a validated resume record into three artifacts that share one data model
but never share an escaping dialect.

Architecture:
- Templating Context: resume data model, LaTeX source and HTML preview generation
- Rendering Context: minimal PDF encoding, document compilation, latest-document store
"""

__version__ = "0.1.0"
