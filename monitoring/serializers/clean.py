import bleach


def clean_text(value: str) -> str:
    """Strip markup and surrounding whitespace from free text."""
    return bleach.clean((value or '').strip(), tags=[], strip=True)
