import pytest

import chordsmith.exceptions
import chordsmith.intervals


def test_key_name_to_pc () -> None:

	"""Sharps and flats map to the same pitch class."""

	assert chordsmith.intervals.key_name_to_pc("C") == 0
	assert chordsmith.intervals.key_name_to_pc("F#") == 6
	assert chordsmith.intervals.key_name_to_pc("Gb") == 6


def test_degree_root_pc () -> None:

	"""Degree roots follow the major scale."""

	assert [chordsmith.intervals.degree_root_pc("C", d) for d in range(1, 8)] == [0, 2, 4, 5, 7, 9, 11]
	assert chordsmith.intervals.degree_root_pc("A", 4) == 2


def test_validate_degree_rejects_bool () -> None:

	"""Booleans are not scale degrees even though True == 1."""

	with pytest.raises(chordsmith.exceptions.InvalidDegreeError):
		chordsmith.intervals.validate_degree(True)


def test_roman_numerals () -> None:

	"""Roman numerals are upper case for major degrees."""

	assert chordsmith.intervals.roman_numeral(1) == "I"
	assert chordsmith.intervals.roman_numeral(6) == "vi"
	assert chordsmith.intervals.roman_numeral(7) == "vii°"


def test_scale_notes () -> None:

	"""Major and natural minor scales in note names."""

	assert chordsmith.intervals.scale_notes("C") == ["C", "D", "E", "F", "G", "A", "B"]
	assert chordsmith.intervals.scale_notes("A", "minor") == ["A", "B", "C", "D", "E", "F", "G"]


def test_unknown_mode_raises () -> None:

	"""Only major and minor modes are supported."""

	with pytest.raises(chordsmith.exceptions.UnknownEnumError):
		chordsmith.intervals.scale_notes("C", "dorian")
