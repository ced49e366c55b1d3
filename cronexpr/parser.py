"""Cron expression parser.

Turns six whitespace-separated tokens (second minute hour day month
day_of_week) into a CronExpr. Every token goes through the same field
grammar, tried in this order (first match wins):

    1. *                 -> AnyField
    2. 30                -> ValueField
    3. */5, 0-30/5       -> StepField   (split on the last "/")
    4. 1,5-7,9           -> ListField   (two or more items)
    5. 13-15             -> RangeField  (split on the first "-")

Forms 3 and 4 fall through to the next form when they don't fit, so a
token only fails once nothing matches.

Examples:
    parse("30 0-30/5 13-15,18 * * 1-5")
    parse("0 0 12 * * 1", ParserConfig(validate_domains=True))
"""

from __future__ import annotations

import logging
import re

from cronexpr.config import ParserConfig
from cronexpr.errors import (
    CronParseError,
    DescendingRangeError,
    EmptyExpressionError,
    FieldParseError,
    IncompleteExpressionError,
    InvalidStepError,
    TooManyFieldsError,
)
from cronexpr.models.expression import FIELD_DOMAINS, FIELD_NAMES, CronExpr
from cronexpr.models.fields import (
    AnyField,
    CronField,
    ListField,
    RangeField,
    StepField,
    ValueField,
)

logger = logging.getLogger(__name__)

MAX_VALUE = 255

# ASCII whitespace only; str.split() would also split on Unicode spaces
_ASCII_WHITESPACE = " \t\n\r\f\v"
_SEPARATOR_RE = re.compile(r"[ \t\n\r\f\v]+")
_INT_RE = re.compile(r"[0-9]+")

_DEFAULT_CONFIG = ParserConfig()


def parse(text: str, config: ParserConfig | None = None) -> CronExpr:
    """Parse a six-field cron expression.

    Args:
        text: Expression text, fields separated by runs of ASCII whitespace.
        config: Parser switches; strict defaults when omitted.

    Returns:
        The parsed CronExpr.

    Raises:
        EmptyExpressionError: text is empty or only whitespace.
        IncompleteExpressionError: fewer than six fields.
        TooManyFieldsError: more than six fields (unless ignored by config).
        FieldParseError: a field is malformed. InvalidStepError and
            DescendingRangeError are the more specific variants.
    """
    config = config or _DEFAULT_CONFIG

    stripped = text.strip(_ASCII_WHITESPACE)
    if not stripped:
        raise EmptyExpressionError(text)

    tokens = _SEPARATOR_RE.split(stripped)
    if len(tokens) < len(FIELD_NAMES):
        raise IncompleteExpressionError(text, len(tokens))
    if len(tokens) > len(FIELD_NAMES):
        if not config.ignore_extra_fields:
            raise TooManyFieldsError(text, len(tokens))
        logger.debug("Ignoring extra cron fields %r in %r", tokens[len(FIELD_NAMES):], text)
        tokens = tokens[:len(FIELD_NAMES)]

    fields = {
        name: _FieldGrammar(token, config, index, name, text).parse()
        for index, (name, token) in enumerate(zip(FIELD_NAMES, tokens))
    }
    expr = CronExpr(**fields)
    logger.debug("Parsed cron expression %r -> %s", text, expr)
    return expr


def parse_field(token: str, config: ParserConfig | None = None) -> CronField:
    """Parse a single field token on its own.

    Domain validation is skipped since the token has no position.
    """
    return _FieldGrammar(token, config or _DEFAULT_CONFIG).parse()


def is_valid(text: str, config: ParserConfig | None = None) -> bool:
    """Check whether text parses, without raising."""
    try:
        parse(text, config)
    except CronParseError:
        return False
    return True


def _parse_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    # zero-padding aside, anything past 3 digits is over MAX_VALUE
    if len(text.lstrip("0")) > 3:
        return None
    value = int(text)
    return value if value <= MAX_VALUE else None


def _parse_range(text: str) -> RangeField | None:
    start, sep, end = text.partition("-")
    if not sep:
        return None
    lo = _parse_int(start)
    hi = _parse_int(end)
    if lo is None or hi is None:
        return None
    return RangeField(start=lo, end=hi)


def _parse_list(text: str) -> ListField | None:
    items: list[ValueField | RangeField] = []
    for part in text.split(","):
        value = _parse_int(part)
        if value is not None:
            items.append(ValueField(value=value))
            continue
        range_field = _parse_range(part)
        if range_field is None:
            return None
        items.append(range_field)

    if len(items) < 2:
        return None
    return ListField(items=items)


class _FieldGrammar:
    """Parses one token, raising errors that point back at its position."""

    def __init__(
        self,
        token: str,
        config: ParserConfig,
        index: int = -1,
        field_name: str = "",
        expression: str = "",
    ) -> None:
        self.token = token
        self.config = config
        self.index = index
        self.field_name = field_name
        self.expression = expression

    def parse(self) -> CronField:
        field = self._parse_structure()
        self._check(field)
        return field

    def _parse_structure(self) -> CronField:
        token = self.token

        if token == "*":
            return AnyField()

        value = _parse_int(token)
        if value is not None:
            return ValueField(value=value)

        step = self._parse_step()
        if step is not None:
            return step

        list_field = _parse_list(token)
        if list_field is not None:
            return list_field

        range_field = _parse_range(token)
        if range_field is not None:
            return range_field

        raise self._error(FieldParseError)

    def _parse_step(self) -> StepField | None:
        base_text, sep, step_text = self.token.rpartition("/")
        if not sep:
            return None

        step = _parse_int(step_text)
        if step is None:
            return None

        if base_text == "*":
            base: AnyField | RangeField = AnyField()
        else:
            range_field = _parse_range(base_text)
            if range_field is None:
                return None
            base = range_field

        if step == 0:
            raise self._error(InvalidStepError)
        return StepField(base=base, step=step)

    def _check(self, field: CronField) -> None:
        ranges, values = _leaves(field)

        if not self.config.allow_descending_ranges:
            if any(r.is_descending for r in ranges):
                raise self._error(DescendingRangeError)

        if self.config.validate_domains and self.field_name in FIELD_DOMAINS:
            lo, hi = FIELD_DOMAINS[self.field_name]
            for value in values:
                if not lo <= value <= hi:
                    raise self._error(
                        FieldParseError,
                        reason=f"{value} is outside {self.field_name} range {lo}-{hi}",
                    )

    def _error(self, error_cls: type[FieldParseError], reason: str = "") -> FieldParseError:
        return error_cls(
            self.token,
            index=self.index,
            field_name=self.field_name,
            expression=self.expression,
            reason=reason,
        )


def _leaves(field: CronField) -> tuple[list[RangeField], list[int]]:
    """Collect the ranges and every numeric bound inside a field."""
    if isinstance(field, ValueField):
        return [], [field.value]
    if isinstance(field, RangeField):
        return [field], [field.start, field.end]
    if isinstance(field, ListField):
        ranges: list[RangeField] = []
        values: list[int] = []
        for item in field.items:
            item_ranges, item_values = _leaves(item)
            ranges.extend(item_ranges)
            values.extend(item_values)
        return ranges, values
    if isinstance(field, StepField):
        return _leaves(field.base)
    return [], []
