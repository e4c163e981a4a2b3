# utils/validators.py
import re
from datetime import date

PERCENTAGE_RE = re.compile(r"^(100(\.0{1,2})?|[1-9]?\d(\.\d{1,2})?)%?$")
CGPA_RE = re.compile(r"^(10(\.0{1,2})?|[0-9](\.\d{1,2})?)$")
YEAR_RE = re.compile(r"^\d{4}$")


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_yes_no(value):
    """Form selects send 'yes'/'no'; JSON clients send booleans."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in ("yes", "y", "true", "1"):
        return True
    if text in ("no", "n", "false", "0"):
        return False
    raise ValueError("Please select Yes/No")


def check_year(value, earliest: int, label: str = "Year"):
    """Blank input is a missing year (None); callers decide whether that is allowed."""
    value = blank_to_none(value)
    if value is None:
        return None
    text = str(value).strip()
    if not YEAR_RE.match(text):
        raise ValueError("Please enter a valid 4-digit year")
    year = int(text)
    current = date.today().year
    if year < earliest or year > current:
        raise ValueError(f"{label} must be between {earliest} and {current}")
    return year


def check_grade(value):
    """Percentage (0-100, optional %) or CGPA (0-10); kept as text."""
    value = blank_to_none(value)
    if value is None:
        return None
    text = str(value).strip()
    if not PERCENTAGE_RE.match(text) and not CGPA_RE.match(text):
        raise ValueError("Enter valid percentage (0-100%) or CGPA (0-10)")
    return text
