"""Password strength scoring and random password generation."""
import re
import secrets
import string
from collections import Counter

from app.schemas.password import CriterionSchema, StrengthOutSchema

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
FALLBACK_CHARS = LOWERCASE + NUMBERS

DEFAULT_LENGTH = 16
MIN_LENGTH = 4
MAX_LENGTH = 128

STRONG_LENGTH = 12

# (label, check) in display order; each passed check adds one point
CRITERIA = [
    ("At least 12 characters", lambda p: len(p) >= STRONG_LENGTH),
    ("Contains uppercase letter", lambda p: re.search(r"[A-Z]", p) is not None),
    ("Contains lowercase letter", lambda p: re.search(r"[a-z]", p) is not None),
    ("Contains number", lambda p: re.search(r"[0-9]", p) is not None),
    ("Contains special character", lambda p: re.search(r"[^A-Za-z0-9]", p) is not None),
]


def strength_label(score: int) -> str:
    if score <= 2:
        return "Weak"
    if score == 3:
        return "Moderate"
    return "Strong"


def check_strength(password: str) -> StrengthOutSchema:
    """Score 0-5, one point per satisfied criterion."""
    checks = [CriterionSchema(label=label, passed=check(password)) for label, check in CRITERIA]
    score = sum(1 for c in checks if c.passed)
    return StrengthOutSchema(score=score, strength=strength_label(score), checks=checks)


def generate_password(
    length: int = DEFAULT_LENGTH,
    uppercase: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
) -> str:
    """Random password from the selected character classes.

    Every selected class appears at least once (as long as length allows):
    a missing class overwrites a character whose class stays covered. With no class
    selected, lowercase letters and digits are used.
    """
    classes = [
        chars
        for chars, selected in (
            (UPPERCASE, uppercase),
            (LOWERCASE, lowercase),
            (NUMBERS, numbers),
            (SYMBOLS, symbols),
        )
        if selected
    ]
    pool = "".join(classes) or FALLBACK_CHARS

    chars = [secrets.choice(pool) for _ in range(length)]

    for cls in classes:
        if any(ch in cls for ch in chars):
            continue
        counts = Counter(_class_of(ch, classes) for ch in chars)
        # only overwrite characters whose class stays covered afterwards
        spare = [i for i, ch in enumerate(chars) if counts[_class_of(ch, classes)] > 1]
        if not spare:
            break
        chars[secrets.choice(spare)] = secrets.choice(cls)

    return "".join(chars)


def _class_of(ch: str, classes: list[str]) -> int:
    for i, cls in enumerate(classes):
        if ch in cls:
            return i
    return -1
