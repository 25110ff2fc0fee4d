"""LST token handlers."""

from lstpy.tokens.base import (
    DeferredToken,
    LstToken,
    TokenParseResult,
    has_illegal_separator,
    is_empty,
    validate_tokens,
)
from lstpy.tokens.grammar import (
    RawFieldGroup,
    Segment,
    parse_field_group,
    parse_natural_attacks_grammar,
    split_segments,
    split_weapon_groups,
)
from lstpy.tokens.natural_attacks import NaturalAttacksToken
from lstpy.tokens.size import SizeToken


def default_tokens() -> tuple[LstToken, ...]:
    tokens: list[LstToken] = [
        NaturalAttacksToken(),
        SizeToken(),
    ]
    return tuple(sorted(tokens, key=lambda token: token.token_name))


__all__ = [
    "DeferredToken",
    "LstToken",
    "NaturalAttacksToken",
    "RawFieldGroup",
    "Segment",
    "SizeToken",
    "TokenParseResult",
    "default_tokens",
    "has_illegal_separator",
    "is_empty",
    "parse_field_group",
    "parse_natural_attacks_grammar",
    "split_segments",
    "split_weapon_groups",
    "validate_tokens",
]
