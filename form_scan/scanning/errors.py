"""Errors raised while scanning form fields into destinations."""

from enum import Enum

from form_scan.scanning.destinations import FieldKind


class ScanErrorKind(str, Enum):
    """Why a scan request failed."""

    NO_SUCH_FIELD = "NO_SUCH_FIELD"  # No field in the form with the requested name
    MULTIPLE_VALUES = "MULTIPLE_VALUES"  # Zero or more than one value under the name
    INCOMPATIBLE_VALUE = "INCOMPATIBLE_VALUE"  # Value cannot be converted to the kind
    INCOMPATIBLE_TYPE = "INCOMPATIBLE_TYPE"  # Destination kind is not supported


class ConversionError(ValueError):
    """Raised when a raw form string cannot be converted to a field kind."""

    def __init__(self, literal: str, kind: FieldKind, message: str) -> None:
        super().__init__(message)
        self.literal = literal
        self.kind = kind


class IntegerSyntaxError(ConversionError):
    """The string is not a base-10 integer literal for the kind."""

    def __init__(self, literal: str, kind: FieldKind) -> None:
        super().__init__(
            literal, kind, f'parsing "{literal}" as {kind.value}: invalid syntax'
        )


class IntegerRangeError(ConversionError):
    """The literal is well formed but outside the kind's range."""

    def __init__(self, literal: str, kind: FieldKind) -> None:
        super().__init__(
            literal, kind, f'parsing "{literal}" as {kind.value}: value out of range'
        )


class BoolLiteralError(ConversionError):
    """The string is neither of the accepted boolean literals."""

    def __init__(self, literal: str) -> None:
        super().__init__(
            literal, FieldKind.BOOL, f"'{literal}' is not a valid bool value"
        )


_DETAILS: dict[ScanErrorKind, str] = {
    ScanErrorKind.NO_SUCH_FIELD: "no field with such name",
    ScanErrorKind.MULTIPLE_VALUES: "there is not exactly one value for this field",
    ScanErrorKind.INCOMPATIBLE_VALUE: "unable to parse string to required type",
    ScanErrorKind.INCOMPATIBLE_TYPE: "type of this field is incompatible with the scanner",
}


class ScanError(Exception):
    """Raised on the first scan request that fails.

    Attributes:
        position: Zero-based index of the failing request.
        name: Field name of the failing request.
        kind: Why the request failed.
        sub_error: Underlying conversion failure for INCOMPATIBLE_VALUE,
            None for every other kind.
    """

    def __init__(
        self,
        position: int,
        name: str,
        kind: ScanErrorKind,
        sub_error: ConversionError | None = None,
    ) -> None:
        self.position = position
        self.name = name
        self.kind = kind
        self.sub_error = sub_error
        super().__init__(self.message)

    @classmethod
    def no_such_field(cls, position: int, name: str) -> "ScanError":
        return cls(position, name, ScanErrorKind.NO_SUCH_FIELD)

    @classmethod
    def multiple_values(cls, position: int, name: str) -> "ScanError":
        return cls(position, name, ScanErrorKind.MULTIPLE_VALUES)

    @classmethod
    def incompatible_value(
        cls, position: int, name: str, sub_error: ConversionError
    ) -> "ScanError":
        return cls(position, name, ScanErrorKind.INCOMPATIBLE_VALUE, sub_error)

    @classmethod
    def incompatible_type(cls, position: int, name: str) -> "ScanError":
        return cls(position, name, ScanErrorKind.INCOMPATIBLE_TYPE)

    @property
    def detail(self) -> str:
        """Kind-specific part of the message."""
        if self.sub_error is not None:
            return str(self.sub_error)
        return _DETAILS[self.kind]

    @property
    def message(self) -> str:
        return f"scan error in field #{self.position} '{self.name}': {self.detail}"

    def __repr__(self) -> str:
        return (
            f"ScanError(position={self.position}, name={self.name!r}, "
            f"kind={self.kind.value})"
        )
