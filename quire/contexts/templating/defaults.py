"""
Default values for Quire.

The sample resume seeds the latest-document store so a reader never finds it
empty before the first real compile.
"""

import copy
from typing import Any, Dict

SAMPLE_RESUME: Dict[str, Any] = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "headline": "Mathematical Analyst",
    "summary": "Innovative mathematician with a passion for analytical engines and elegant proofs.",
    "skills": ["Analytical Thinking", "Algorithms", "Technical Writing"],
    "experience": [
        {
            "company": "Analytical Engines",
            "role": "Contributor",
            "startDate": "1833",
            "endDate": "1843",
            "achievements": [
                "Documented computation methods for complex sequences",
                "Collaborated on early computer science concepts",
            ],
        }
    ],
}


def get_sample_resume() -> Dict[str, Any]:
    """Return a deep copy of the sample resume input."""
    return copy.deepcopy(SAMPLE_RESUME)
