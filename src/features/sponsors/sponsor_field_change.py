from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

from util.errors import ServiceError

T = TypeVar("T")


@dataclass(frozen = True)
class FieldChange(Generic[T]):
    """
    Outcome of resolving one optional field of a partial update.

    A field is either left as-is (`unchanged`), replaced with a validated value (`set_to`),
    or rejected (`invalid`, carrying the error to raise). Each field is resolved once and
    the outcomes are then merged into a single update record.
    """

    class Kind(Enum):
        unchanged = "unchanged"
        set_to = "set_to"
        invalid = "invalid"

    kind: Kind
    value: T | None = None
    error: ServiceError | None = None

    @classmethod
    def unchanged(cls) -> "FieldChange[T]":
        return cls(FieldChange.Kind.unchanged)

    @classmethod
    def set_to(cls, value: T) -> "FieldChange[T]":
        return cls(FieldChange.Kind.set_to, value = value)

    @classmethod
    def invalid(cls, error: ServiceError) -> "FieldChange[T]":
        return cls(FieldChange.Kind.invalid, error = error)

    @classmethod
    def resolve(cls, raw_value: str | None, resolver: Callable[[str], T]) -> "FieldChange[T]":
        if not raw_value:
            return cls.unchanged()
        try:
            return cls.set_to(resolver(raw_value))
        except ServiceError as e:
            return cls.invalid(e)

    @property
    def is_invalid(self) -> bool:
        return self.kind == FieldChange.Kind.invalid

    @staticmethod
    def raise_first_invalid(*changes: "FieldChange") -> None:
        for change in changes:
            if change.is_invalid:
                raise change.error

    def value_or_none(self) -> T | None:
        """Returns the new value, or None when unchanged. Raises the stored error when invalid."""
        if self.error is not None:
            raise self.error
        return self.value
