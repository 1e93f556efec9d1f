"""
Template composition.

A template pattern is a literal string with ``{{token}}`` placeholders, e.g.
``"{{streets}} {{street_suffixes}} No:{{building_number}}"``. Each token is
resolved by calling the generator registered for it; the generator may itself
compose another pattern one level down. Fragments are substituted as-is and
never rescanned for further tokens.

When a token occurs more than once in a pattern its generator is called once
and every occurrence receives that same value.
"""

import logging
import re
from collections.abc import Callable, Mapping, Sequence

from .exceptions import TemplateResolutionError
from .random_service import RandomService

logger = logging.getLogger(__name__)

Generator = Callable[[], object]

_TOKEN = re.compile(r"\{\{\s*([^{}]*?)\s*\}\}")
_TOKEN_NAME = re.compile(r"^[A-Za-z0-9_]+$")


def find_tokens(pattern: str) -> list[str]:
    """
    Return the distinct token names of a pattern in order of first appearance.

    Raises:
        TemplateResolutionError: If a placeholder is malformed or unbalanced
    """
    names: list[str] = []
    for match in _TOKEN.finditer(pattern):
        name = match.group(1)
        if not _TOKEN_NAME.match(name):
            raise TemplateResolutionError(
                name, pattern, f"Malformed placeholder '{match.group(0)}' in pattern '{pattern}'"
            )
        if name not in names:
            names.append(name)

    remainder = _TOKEN.sub("", pattern)
    if "{{" in remainder or "}}" in remainder:
        raise TemplateResolutionError(
            "", pattern, f"Unbalanced placeholder braces in pattern '{pattern}'"
        )
    return names


class TemplateEngine:
    """
    Resolves template patterns against a fixed set of named generators.

    Args:
        random_service: Source used to pick among candidate patterns
    """

    def __init__(self, random_service: RandomService):
        self.random = random_service

    def resolve(self, pattern: str, generators: Mapping[str, Generator]) -> str:
        """
        Substitute every token of ``pattern``.

        Only generators for tokens present in the pattern are invoked. Any
        generator failure propagates; no partially resolved string is returned.

        Raises:
            TemplateResolutionError: If a token has no registered generator
        """
        values: dict[str, str] = {}
        for name in find_tokens(pattern):
            generator = generators.get(name)
            if generator is None:
                raise TemplateResolutionError(name, pattern)
            values[name] = str(generator())

        if not values:
            return pattern
        return _TOKEN.sub(lambda match: values[match.group(1)], pattern)

    def compose(self, patterns: Sequence[str], generators: Mapping[str, Generator]) -> str:
        """Pick one pattern uniformly and resolve it."""
        pattern = self.random.uniform_element(patterns)
        logger.debug(f"Composing pattern {pattern!r}")
        return self.resolve(pattern, generators)
