import re

# (prefix)(secret) pairs; group 2 is replaced.
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Authorization:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(token\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
    r"()(gh[pousr]_[A-Za-z0-9]{20,})",
    r"()(github_pat_[A-Za-z0-9_]{20,})",
]


def redact_text(text: str) -> str:
    """Redacts GitHub tokens and auth headers from a string."""
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)

    return redacted_text
