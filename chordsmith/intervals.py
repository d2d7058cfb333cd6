import typing

import chordsmith.exceptions


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]


MAJOR_SCALE: typing.List[int] = [0, 2, 4, 5, 7, 9, 11]

NATURAL_MINOR_SCALE: typing.List[int] = [0, 2, 3, 5, 7, 8, 10]

SCALE_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": MAJOR_SCALE,
	"minor": NATURAL_MINOR_SCALE,
}

ROMAN_NUMERALS: typing.List[str] = ["I", "ii", "iii", "IV", "V", "vi", "vii°"]


def key_name_to_pc (key_name: str) -> int:

	"""Validate a key name and return its pitch class (0–11).

	Parameters:
		key_name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Raises:
		ValueError: If the key name is not recognised.

	Example:
		```python
		key_name_to_pc("C")   # → 0
		key_name_to_pc("Bb")  # → 10
		```
	"""

	if key_name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown key name: {key_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[key_name]


def validate_degree (degree: int) -> int:

	"""Return ``degree`` unchanged if it is a scale degree 1-7, else raise ``InvalidDegreeError``."""

	if isinstance(degree, bool) or not isinstance(degree, int) or degree < 1 or degree > 7:
		raise chordsmith.exceptions.InvalidDegreeError(degree)

	return degree


def degree_root_pc (key_name: str, degree: int) -> int:

	"""Return the pitch class of a major-scale degree's root in the given key.

	Example:
		```python
		degree_root_pc("C", 5)  # → 7 (G)
		degree_root_pc("A", 4)  # → 2 (D)
		```
	"""

	validate_degree(degree)

	return (key_name_to_pc(key_name) + MAJOR_SCALE[degree - 1]) % 12


def roman_numeral (degree: int) -> str:

	"""Return the roman numeral for a major-key degree (``5`` → ``"V"``)."""

	validate_degree(degree)

	return ROMAN_NUMERALS[degree - 1]


def get_scale_intervals (mode: str = "major") -> typing.List[int]:

	"""
	Return the semitone offsets for a ``"major"`` or ``"minor"`` (natural minor) scale.
	"""

	if mode not in SCALE_INTERVALS:
		raise chordsmith.exceptions.UnknownEnumError("scale mode", mode, SCALE_INTERVALS)

	return list(SCALE_INTERVALS[mode])


def scale_notes (key_name: str, mode: str = "major") -> typing.List[str]:

	"""
	Return the note names of a key's scale, starting on the key root.

	Parameters:
		key_name: Note name for the key (e.g., ``"C"``, ``"F#"``).
		mode: ``"major"`` or ``"minor"``.

	Example:
		```python
		scale_notes("A", "minor")  # → ["A", "B", "C", "D", "E", "F", "G"]
		```
	"""

	key_pc = key_name_to_pc(key_name)

	return [PC_TO_NOTE_NAME[(key_pc + interval) % 12] for interval in get_scale_intervals(mode)]
