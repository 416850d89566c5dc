"""Named placeholder extraction.

Regex based scan of SQL text for ``:name`` placeholders. String literals,
comments, dollar-quoted bodies and ``::type`` casts are matched first and
skipped so their contents are never mistaken for placeholders.
"""

import re
from collections import OrderedDict
from typing import Final

from sqlrelate.exceptions import ParameterError
from sqlrelate.parameters.types import PlaceholderInfo

__all__ = ("ParameterValidator",)


_PARAMETER_REGEX: Final = re.compile(
    r"""
    # Literals and comments, matched first and skipped
    (?P<dquote>"(?:[^"\\]|\\.)*") |
    (?P<squote>'(?:[^'\\]|\\.)*') |
    (?P<dollar_quoted_string>\$(?P<dollar_quote_tag_inner>\w*)\$[\s\S]*?\$(?P=dollar_quote_tag_inner)\$) |
    (?P<line_comment>--[^\r\n]*) |
    (?P<block_comment>/\*(?:[^*]|\*(?!/))*\*/) |
    # Tokens that resemble placeholders
    (?P<pg_q_operator>\?\?|\?\||\?&) |
    (?P<pg_cast>::(?P<cast_type>\w+)) |
    (?P<positional_colon>:(?P<colon_num>\d+)) |
    # Placeholders
    (?P<named_colon>:(?P<colon_name>[A-Za-z_]\w*)) |
    (?P<qmark>\?)
    """,
    re.VERBOSE | re.MULTILINE | re.DOTALL,
)


class ParameterValidator:
    """Extracts named placeholders from SQL text."""

    __slots__ = ("_cache_max_size", "_parameter_cache")

    def __init__(self, cache_max_size: int = 5000) -> None:
        """Initialize the extractor with a bounded LRU cache.

        Args:
            cache_max_size: Maximum number of SQL strings whose placeholders are cached.
        """
        self._parameter_cache: OrderedDict[str, list[PlaceholderInfo]] = OrderedDict()
        self._cache_max_size = cache_max_size

    def extract_parameters(self, sql: str) -> "list[PlaceholderInfo]":
        """Extract named placeholders in order of appearance.

        Args:
            sql: SQL string to analyze

        Returns:
            List of PlaceholderInfo objects, sorted by position

        Raises:
            ParameterError: If the SQL mixes positional ``?`` or numeric ``:1`` markers
                with named placeholders. Positions would be ambiguous.
        """
        cached = self._parameter_cache.get(sql)
        if cached is not None:
            self._parameter_cache.move_to_end(sql)
            return cached

        parameters: list[PlaceholderInfo] = []
        for match in _PARAMETER_REGEX.finditer(sql):
            if match.group("named_colon"):
                parameters.append(
                    PlaceholderInfo(
                        name=match.group("colon_name"),
                        start=match.start("named_colon"),
                        end=match.end("named_colon"),
                        ordinal=len(parameters),
                    )
                )
            elif match.group("qmark") and sql[match.end() :].lstrip().startswith(("'", '"')):
                # A lone ? followed by a literal is the pg key-exists operator.
                continue
            elif match.group("qmark") or match.group("positional_colon"):
                marker = match.group("qmark") or match.group("positional_colon")
                msg = f"Positional marker {marker!r} at offset {match.start()} cannot be mixed with named placeholders"
                raise ParameterError(msg, sql)

        if len(self._parameter_cache) >= self._cache_max_size:
            self._parameter_cache.popitem(last=False)
        self._parameter_cache[sql] = parameters
        return parameters

    def has_parameters(self, sql: str) -> bool:
        return bool(self.extract_parameters(sql))

    def parameter_names(self, sql: str) -> "list[str]":
        """Distinct placeholder names in order of first appearance."""
        return list(dict.fromkeys(info.name for info in self.extract_parameters(sql)))
