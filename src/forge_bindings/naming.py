"""Contract name transforms for generated identifiers."""

import re

_UPPERCASE = re.compile(r"([A-Z])")


def to_constant_case(name: str) -> str:
    """
    Convert a contract name to an upper-snake-case constant prefix.

    Every uppercase letter gets an underscore in front of it, so acronyms
    are split letter by letter: "ERC20Token" -> "E_R_C20_TOKEN".

    Args:
        name: Contract name, e.g. "MovieRating"

    Returns:
        Constant prefix, e.g. "MOVIE_RATING"
    """
    return _UPPERCASE.sub(r"_\1", name).removeprefix("_").upper()


def to_camel_case(name: str) -> str:
    """
    Lowercase the first character of a contract name.

    Args:
        name: Contract name, e.g. "MovieRating"

    Returns:
        File stem, e.g. "movieRating"
    """
    return name[:1].lower() + name[1:]
