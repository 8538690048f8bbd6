import pytest

from movie_booking.api.title_aliases import normalize_movie_title


@pytest.mark.parametrize("raw, expected", [
    ("DJANGO", "Django"),
    ("  django unchained ", "Django"),
    ("Dune: Part Two", "Dune 2"),
    ("the shawshank redemption", "Shawshank Redemption"),
    ("INTERSTELLAR (2014)", "Interstellar"),
    ("  Oppenheimer ", "Oppenheimer"),
    ("", ""),
    (None, ""),
])
def test_normalize_movie_title(raw, expected):
    assert normalize_movie_title(raw) == expected
