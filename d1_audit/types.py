"""
D1 Audit Types

Enums shared by every check and by the report.
"""
from enum import Enum


class Category(str, Enum):
    """Area of the page a check looks at, in report order"""

    META = "meta"
    CONTENT = "content"
    IMAGES = "images"
    TECHNICAL = "technical"
    SOCIAL = "social"
    PERFORMANCE = "performance"


class Severity(str, Enum):
    """Outcome of a single check"""

    CRITICAL = "critical"
    WARNING = "warning"
    PASSED = "passed"
    INFO = "info"  # diagnostic only, never scored


class Grade(str, Enum):
    """Letter grade derived from the score"""

    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
