"""Chord definitions for diatonic, Nashville-numbered chords.

This module turns a key, a scale degree (1-7) and an optional quality into the
MIDI pitches of a chord, names chords for display, and applies the
instrument's chord modifier buttons to a base quality.

Module-level constants:
- `CHORD_INTERVALS`: Maps each `ChordQuality` to its semitone offsets from the root
- `CHORD_LABELS`: Maps each `ChordQuality` to a display label (e.g. ``"Maj7"``)
- `DEGREE_QUALITIES`: Default triad quality for each major-scale degree
- `MODIFICATIONS`: Quality rewrite table for each `ChordModification`

Scale degrees follow the Nashville Number System: ``1`` is the tonic, ``5`` the
dominant, ``7`` the diminished leading-tone chord.
"""

import dataclasses
import enum
import typing

import chordsmith.exceptions
import chordsmith.intervals
import chordsmith.voicings


class ChordQuality (str, enum.Enum):

	MAJOR = "major"
	MINOR = "minor"
	DOM7 = "dom7"
	MAJ7 = "maj7"
	MIN7 = "min7"
	SUS2 = "sus2"
	SUS4 = "sus4"
	AUG = "aug"
	DIM = "dim"
	MAJ9 = "maj9"
	MIN9 = "min9"
	MAJ6 = "maj6"


class ChordModification (str, enum.Enum):

	MAJ_MIN = "maj/min"
	SEVENTH = "7th"
	MAJ7_MIN7 = "maj7/min7"
	MAJ9_MIN9 = "maj9/min9"
	SUS4 = "sus4"
	SUS2_ADD6 = "sus2/add6"
	DIM = "dim"
	AUG = "aug"


CHORD_INTERVALS: typing.Dict[ChordQuality, typing.List[int]] = {
	ChordQuality.MAJOR: [0, 4, 7],
	ChordQuality.MINOR: [0, 3, 7],
	ChordQuality.DOM7: [0, 4, 7, 10],
	ChordQuality.MAJ7: [0, 4, 7, 11],
	ChordQuality.MIN7: [0, 3, 7, 10],
	ChordQuality.SUS2: [0, 2, 7],
	ChordQuality.SUS4: [0, 5, 7],
	ChordQuality.AUG: [0, 4, 8],
	ChordQuality.DIM: [0, 3, 6],
	ChordQuality.MAJ9: [0, 4, 7, 11, 14],
	ChordQuality.MIN9: [0, 3, 7, 10, 14],
	ChordQuality.MAJ6: [0, 4, 7, 9],
}

CHORD_LABELS: typing.Dict[ChordQuality, str] = {
	ChordQuality.MAJOR: "Major",
	ChordQuality.MINOR: "Minor",
	ChordQuality.DOM7: "7",
	ChordQuality.MAJ7: "Maj7",
	ChordQuality.MIN7: "Min7",
	ChordQuality.SUS2: "Sus2",
	ChordQuality.SUS4: "Sus4",
	ChordQuality.AUG: "Aug",
	ChordQuality.DIM: "Dim",
	ChordQuality.MAJ9: "Maj9",
	ChordQuality.MIN9: "Min9",
	ChordQuality.MAJ6: "Maj6",
}

# I, ii, iii, IV, V, vi, vii°
DEGREE_QUALITIES: typing.List[ChordQuality] = [
	ChordQuality.MAJOR,
	ChordQuality.MINOR,
	ChordQuality.MINOR,
	ChordQuality.MAJOR,
	ChordQuality.MAJOR,
	ChordQuality.MINOR,
	ChordQuality.DIM,
]

MODIFICATIONS: typing.Dict[ChordModification, typing.Dict[ChordQuality, ChordQuality]] = {
	ChordModification.MAJ_MIN: {
		ChordQuality.MAJOR: ChordQuality.MINOR,
		ChordQuality.MINOR: ChordQuality.MAJOR,
	},
	ChordModification.SEVENTH: {
		ChordQuality.MAJOR: ChordQuality.DOM7,
		ChordQuality.MINOR: ChordQuality.MIN7,
	},
	ChordModification.MAJ7_MIN7: {
		ChordQuality.MAJOR: ChordQuality.MAJ7,
		ChordQuality.MINOR: ChordQuality.MIN7,
		ChordQuality.DOM7: ChordQuality.MAJ7,
		ChordQuality.MIN7: ChordQuality.MIN7,
	},
	ChordModification.MAJ9_MIN9: {
		ChordQuality.MAJOR: ChordQuality.MAJ9,
		ChordQuality.MINOR: ChordQuality.MIN9,
		ChordQuality.MAJ7: ChordQuality.MAJ9,
		ChordQuality.MIN7: ChordQuality.MIN9,
	},
	ChordModification.SUS4: {
		ChordQuality.MAJOR: ChordQuality.SUS4,
		ChordQuality.MINOR: ChordQuality.SUS4,
	},
	ChordModification.SUS2_ADD6: {
		ChordQuality.MAJOR: ChordQuality.SUS2,
		ChordQuality.MINOR: ChordQuality.MAJ6,
	},
	ChordModification.DIM: {
		ChordQuality.MAJOR: ChordQuality.DIM,
		ChordQuality.MINOR: ChordQuality.DIM,
	},
	ChordModification.AUG: {
		ChordQuality.MAJOR: ChordQuality.AUG,
		ChordQuality.MINOR: ChordQuality.AUG,
	},
}

QualityLike = typing.Union[ChordQuality, str]


def parse_quality (quality: QualityLike) -> ChordQuality:

	"""Return the `ChordQuality` for a member or its string value."""

	return chordsmith.exceptions.parse_enum(ChordQuality, quality, "chord quality")


def default_quality (degree: int) -> ChordQuality:

	"""Return the diatonic triad quality of a major-scale degree (``2`` → minor)."""

	chordsmith.intervals.validate_degree(degree)

	return DEGREE_QUALITIES[degree - 1]


def _resolve_quality (degree: int, quality: typing.Optional[QualityLike]) -> ChordQuality:

	if quality is None:
		return default_quality(degree)

	return parse_quality(quality)


def chord (
	key: str,
	degree: int,
	quality: typing.Optional[QualityLike] = None,
	inversion: int = 0,
	octave: int = 3
) -> typing.List[int]:

	"""Return the MIDI pitches for a scale-degree chord.

	Pitches are built upward from the degree's root in the given octave
	(C4 = 60, so octave 3 starts at 48). Intervals that pass the octave
	boundary carry into the next octave rather than wrapping.

	Parameters:
		key: Key name (e.g. ``"C"``, ``"F#"``, ``"Bb"``)
		degree: Scale degree 1-7
		quality: Chord quality; defaults to the diatonic triad of the degree
		inversion: Number of bass notes lifted an octave. Values at or above
			the chord size leave root position unchanged.
		octave: Octave of the key root

	Raises:
		InvalidDegreeError: If ``degree`` is outside 1-7.

	Example:
		```python
		chord("C", 1, "major", 0, 4)  # [60, 64, 67]
		chord("C", 1, "major", 1, 4)  # [64, 67, 72]
		chord("G", 5)                 # [50, 54, 57]  - D major in octave 3
		```
	"""

	root_pc = chordsmith.intervals.degree_root_pc(key, degree)
	resolved = _resolve_quality(degree, quality)

	base = (octave + 1) * 12
	pitches: typing.List[int] = []

	for interval in CHORD_INTERVALS[resolved]:
		semitones = root_pc + interval
		pitches.append(base + (semitones % 12) + 12 * (semitones // 12))

	return chordsmith.voicings.invert_pitches(pitches, inversion)


def chord_name (key: str, degree: int, quality: typing.Optional[QualityLike] = None) -> str:

	"""Return a display name such as ``"G Major"`` or ``"B Dim"``."""

	root_pc = chordsmith.intervals.degree_root_pc(key, degree)
	resolved = _resolve_quality(degree, quality)

	return f"{chordsmith.intervals.PC_TO_NOTE_NAME[root_pc]} {CHORD_LABELS[resolved]}"


def apply_modification (base: QualityLike, modification: typing.Union[ChordModification, str]) -> ChordQuality:

	"""Apply a chord modifier to a base quality.

	Pairs missing from `MODIFICATIONS` return ``base`` unchanged. This is the
	intended behaviour for modifiers that have no meaning for a quality (e.g.
	``sus4`` on a diminished chord), not an error.

	Example:
		```python
		apply_modification("major", "maj/min")  # ChordQuality.MINOR
		apply_modification("dim", "sus4")       # ChordQuality.DIM
		```
	"""

	base_quality = parse_quality(base)
	mod = chordsmith.exceptions.parse_enum(ChordModification, modification, "chord modification")

	return MODIFICATIONS[mod].get(base_quality, base_quality)


@dataclasses.dataclass(frozen=True)
class DiatonicChord:

	"""
	A chord on a scale degree of a major key.

	Holds the same parameters as :func:`chord` so a host can keep a chord around
	and render its pitches or name on demand.
	"""

	key: str
	degree: int
	quality: typing.Optional[ChordQuality] = None
	inversion: int = 0
	octave: int = 3


	def __post_init__ (self) -> None:

		chordsmith.intervals.key_name_to_pc(self.key)
		chordsmith.intervals.validate_degree(self.degree)

		if self.quality is not None:
			object.__setattr__(self, "quality", parse_quality(self.quality))


	@property
	def resolved_quality (self) -> ChordQuality:

		"""Return the explicit quality, or the degree's diatonic default."""

		return _resolve_quality(self.degree, self.quality)


	def pitches (self) -> typing.List[int]:

		"""Return the MIDI pitches of this chord."""

		return chord(self.key, self.degree, self.quality, self.inversion, self.octave)


	def name (self) -> str:

		"""Return a human-friendly chord name."""

		return chord_name(self.key, self.degree, self.quality)


	def modified (self, modification: typing.Union[ChordModification, str]) -> "DiatonicChord":

		"""Return a copy with a chord modifier applied to its quality."""

		return dataclasses.replace(self, quality=apply_modification(self.resolved_quality, modification))
