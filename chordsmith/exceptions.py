"""Errors raised for programmer mistakes at the library boundary.

Both derive from ``ValueError`` so callers that already guard parameter
validation with ``except ValueError`` keep working.
"""

import enum
import typing


class InvalidDegreeError (ValueError):

	"""Raised when a scale degree falls outside 1-7."""

	def __init__ (self, degree: typing.Any) -> None:

		self.degree = degree

		super().__init__(f"Scale degree must be between 1 and 7, got {degree!r}")


class UnknownEnumError (ValueError):

	"""Raised when a named option is not one of the accepted values."""

	def __init__ (self, kind: str, value: typing.Any, accepted: typing.Iterable[str]) -> None:

		self.kind = kind
		self.value = value
		self.accepted = sorted(accepted)

		super().__init__(
			f"Unknown {kind}: {value!r}. Expected one of: {', '.join(self.accepted)}"
		)


EnumType = typing.TypeVar("EnumType", bound=enum.Enum)


def parse_enum (enum_cls: typing.Type[EnumType], value: typing.Any, kind: str) -> EnumType:

	"""Return the member of ``enum_cls`` named by ``value``.

	Accepts an existing member or its string value (e.g. ``"arc"``).

	Raises:
		UnknownEnumError: If ``value`` matches no member.
	"""

	if isinstance(value, enum_cls):
		return value

	try:
		return enum_cls(value)

	except ValueError:
		raise UnknownEnumError(kind, value, [member.value for member in enum_cls]) from None
