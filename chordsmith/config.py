"""Generation parameters for the batch progression generator.

:class:`GenerationConfig` bundles the high-level style controls. The named
options are closed enums, and string values are accepted and converted on
construction:

- ``tension_curve``: ``"arc"``, ``"wave"``, ``"buildup"``, ``"release"``,
  ``"random"`` (plus ``"flat"``, the fallback for unrecognised names)
- ``rhythmic_style``: ``"steady"``, ``"syncopated"``, ``"euclidean"``,
  ``"sparse"``, ``"random"``
- ``phrase_structure``: ``"AABA"``, ``"ABAB"``, ``"ABAC"``,
  ``"question-answer"``, ``"through-composed"``

Unknown rhythmic styles and phrase structures raise
:class:`~chordsmith.exceptions.UnknownEnumError`. Only the tension curve
falls back, to a flat 0.5 curve, and a warning is logged when it does.

Example:
	```python
	config = GenerationConfig(density=0.75, tension_curve="buildup", rhythmic_style="syncopated")
	```
"""

import dataclasses
import enum
import logging
import typing

import chordsmith.exceptions


logger = logging.getLogger(__name__)


class TensionCurve (str, enum.Enum):

	ARC = "arc"
	WAVE = "wave"
	BUILDUP = "buildup"
	RELEASE = "release"
	RANDOM = "random"
	FLAT = "flat"


class RhythmicStyle (str, enum.Enum):

	STEADY = "steady"
	SYNCOPATED = "syncopated"
	EUCLIDEAN = "euclidean"
	SPARSE = "sparse"
	RANDOM = "random"


class PhraseStructure (str, enum.Enum):

	AABA = "AABA"
	ABAB = "ABAB"
	ABAC = "ABAC"
	QUESTION_ANSWER = "question-answer"
	THROUGH_COMPOSED = "through-composed"


def parse_tension_curve (value: typing.Union[TensionCurve, str]) -> TensionCurve:

	"""Return the tension curve named by ``value``, or ``FLAT`` if it is unrecognised."""

	if isinstance(value, TensionCurve):
		return value

	try:
		return TensionCurve(value)

	except ValueError:
		logger.warning(f"Unknown tension curve {value!r}, using a flat curve")
		return TensionCurve.FLAT


def parse_rhythmic_style (value: typing.Union[RhythmicStyle, str]) -> RhythmicStyle:

	"""Return the rhythmic style named by ``value``."""

	return chordsmith.exceptions.parse_enum(RhythmicStyle, value, "rhythmic style")


def parse_phrase_structure (value: typing.Union[PhraseStructure, str]) -> PhraseStructure:

	"""Return the phrase structure named by ``value``."""

	return chordsmith.exceptions.parse_enum(PhraseStructure, value, "phrase structure")


@dataclasses.dataclass(frozen=True)
class GenerationConfig:

	"""
	Style controls for one generated progression.

	Attributes:
		slots: Number of timeline slots to fill (at least 1).
		density: Share of slots that carry a chord, 0.0 (sparse) to 1.0 (every slot).
		tension_curve: Shape of the target tension across the progression.
		rhythmic_style: How chord slots are placed among rests.
		phrase_structure: Phrase grouping attached to each slot.
		creativity: 0.0 follows the statistics strictly; 1.0 adds the most
			randomness and favours iii and vii°.
	"""

	slots: int = 16
	density: float = 0.5
	tension_curve: TensionCurve = TensionCurve.ARC
	rhythmic_style: RhythmicStyle = RhythmicStyle.STEADY
	phrase_structure: PhraseStructure = PhraseStructure.ABAB
	creativity: float = 0.5


	def __post_init__ (self) -> None:

		if isinstance(self.slots, bool) or not isinstance(self.slots, int) or self.slots < 1:
			raise ValueError(f"Slots must be a positive integer, got {self.slots!r}")

		if not 0.0 <= self.density <= 1.0:
			raise ValueError("Density must be between 0 and 1")

		if not 0.0 <= self.creativity <= 1.0:
			raise ValueError("Creativity must be between 0 and 1")

		object.__setattr__(self, "tension_curve", parse_tension_curve(self.tension_curve))
		object.__setattr__(self, "rhythmic_style", parse_rhythmic_style(self.rhythmic_style))
		object.__setattr__(self, "phrase_structure", parse_phrase_structure(self.phrase_structure))


	@classmethod
	def from_dict (cls, values: typing.Mapping[str, typing.Any]) -> "GenerationConfig":

		"""Build a config from a mapping, rejecting keys that are not config fields.

		Hyphenated and camelCase keys as written by hosts (``"tensionCurve"``) are
		accepted alongside the snake_case field names.
		"""

		field_names = {field.name for field in dataclasses.fields(cls)}
		kwargs: typing.Dict[str, typing.Any] = {}

		for key, value in values.items():
			name = _field_name(key)

			if name not in field_names:
				known = ", ".join(sorted(field_names))
				raise ValueError(f"Unknown config field '{key}'. Known fields: {known}")

			kwargs[name] = value

		return cls(**kwargs)


	def merged (self, **overrides: typing.Any) -> "GenerationConfig":

		"""Return a copy with ``overrides`` applied (shallow merge)."""

		return GenerationConfig.from_dict({**self.to_dict(), **overrides})


	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the config as plain values (enum members become their strings)."""

		return {
			"slots": self.slots,
			"density": self.density,
			"tension_curve": self.tension_curve.value,
			"rhythmic_style": self.rhythmic_style.value,
			"phrase_structure": self.phrase_structure.value,
			"creativity": self.creativity,
		}


def _field_name (key: str) -> str:

	"""Convert ``"tensionCurve"`` or ``"tension-curve"`` to ``"tension_curve"``."""

	snake = "".join("_" + char.lower() if char.isupper() else char for char in key)

	return snake.replace("-", "_").lstrip("_")
