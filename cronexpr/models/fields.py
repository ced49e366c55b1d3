"""Field models -- the five kinds of rule a cron field can hold.

Each kind is a frozen pydantic model tagged with a ``kind`` literal, so the
union below is a discriminated union and dumps/validates without ambiguity.
Every model knows how to test a single integer against itself.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Numeric leaves fit in a byte. Calendar domains (hour 0-23, ...) are not
# enforced here.
FieldValue = Annotated[int, Field(ge=0, le=255)]


class _FieldModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class AnyField(_FieldModel):
    """``*`` -- matches every value."""

    kind: Literal["any"] = "any"

    def matches(self, value: int) -> bool:
        return True


class ValueField(_FieldModel):
    """A single value, e.g. ``30``."""

    kind: Literal["value"] = "value"
    value: FieldValue

    def matches(self, value: int) -> bool:
        return self.value == value


class RangeField(_FieldModel):
    """An inclusive range, e.g. ``13-15``.

    ``start <= end`` is not enforced by the model. A descending range never
    matches anything.
    """

    kind: Literal["range"] = "range"
    start: FieldValue
    end: FieldValue

    @property
    def is_descending(self) -> bool:
        return self.start > self.end

    def matches(self, value: int) -> bool:
        return self.start <= value <= self.end


ListItem = Annotated[Union[ValueField, RangeField], Field(discriminator="kind")]


class ListField(_FieldModel):
    """Two or more values/ranges joined by commas, e.g. ``13-15,18``."""

    kind: Literal["list"] = "list"
    items: tuple[ListItem, ...] = Field(min_length=2)

    def matches(self, value: int) -> bool:
        return any(item.matches(value) for item in self.items)


StepBase = Annotated[Union[AnyField, RangeField], Field(discriminator="kind")]


class StepField(_FieldModel):
    """Every ``step``-th value, over everything (``*/5``) or a range (``0-30/5``)."""

    kind: Literal["step"] = "step"
    base: StepBase = Field(default_factory=AnyField)
    step: Annotated[int, Field(ge=1, le=255)]

    def matches(self, value: int) -> bool:
        if isinstance(self.base, AnyField):
            return value % self.step == 0

        # Bounds first: guarantees value >= start before subtracting
        if not self.base.matches(value):
            return False
        return (value - self.base.start) % self.step == 0


CronField = Annotated[
    Union[AnyField, ValueField, RangeField, ListField, StepField],
    Field(discriminator="kind"),
]
