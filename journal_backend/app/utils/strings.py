# journal_backend/app/utils/strings.py

import re
from unicodedata import normalize

def fold_accents(text: str) -> str:
    # "Média" -> "Media", "Cítrica" -> "Citrica"
    return normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")

def safe_filename(name: str, fallback: str = "file") -> str:
    """
    Portable filename for stored uploads: path parts dropped, accents folded,
    anything outside [A-Za-z0-9._-] collapsed to a single underscore.
    """
    if not name:
        return fallback
    name = re.split(r"[\\/]", name)[-1]
    name = fold_accents(name)
    name = re.sub(r"[^A-Za-z0-9._-]+", "_", name)
    name = re.sub(r"_+", "_", name).strip("._")
    return name or fallback
