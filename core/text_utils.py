# Purpose: Small text helpers shared by the navigation presenter and views.

import re
import unicodedata


def slugify(text: str, separator: str = "-") -> str:
    """
    Convert text to a URL-safe slug.

    'Star us on Github' -> 'star-us-on-github'
    "Don't Panic" -> 'dont-panic'
    """
    if not text:
        return ""
    # Transliterate to ASCII where possible, drop the rest
    text = unicodedata.normalize("NFKD", str(text)).encode("ascii", "ignore").decode("ascii")
    flip = "_" if separator == "-" else "-"
    text = text.replace(flip, separator)
    text = text.replace("@", f"{separator}at{separator}")
    text = text.lower()
    sep = re.escape(separator)
    # Punctuation is removed, not turned into a word break
    text = re.sub(rf"[^a-z0-9\s{sep}]", "", text)
    text = re.sub(rf"[{sep}\s]+", separator, text)
    return text.strip(separator)
