"""
Movie title aliases applied by the HTTP layer before show resolution

The booking pages send loose titles ("django unchained (2012)", "DUNE PART
TWO"). Any input containing one of the keys maps to the catalog title; other
input passes through trimmed.
"""
from typing import Optional, Tuple

# (upper-case fragment, catalog title), checked in order
TITLE_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("DJANGO", "Django"),
    ("DUNE", "Dune 2"),
    ("SHAWSHANK", "Shawshank Redemption"),
    ("INTERSTELLAR", "Interstellar"),
)


def normalize_movie_title(title: Optional[str]) -> str:
    value = (title or "").strip()
    upper = value.upper()
    for fragment, catalog_title in TITLE_ALIASES:
        if fragment in upper:
            return catalog_title
    return value
