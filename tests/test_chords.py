import pytest

import chordsmith.chords
import chordsmith.exceptions


def test_c_major_in_octave_four () -> None:

	"""C major, root position, octave 4 should be middle C, E and G."""

	assert chordsmith.chords.chord("C", 1, "major", 0, 4) == [60, 64, 67]


def test_first_inversion () -> None:

	"""First inversion lifts the root an octave."""

	assert chordsmith.chords.chord("C", 1, "major", 1, 4) == [64, 67, 72]


def test_default_octave_is_three () -> None:

	"""Without an octave the chord sits in octave 3 (C3 = 48)."""

	assert chordsmith.chords.chord("C", 1) == [48, 52, 55]


def test_default_qualities_follow_the_major_scale () -> None:

	"""Degrees default to I, ii, iii, IV, V, vi, vii° qualities."""

	expected = ["major", "minor", "minor", "major", "major", "minor", "dim"]

	for degree, quality in zip(range(1, 8), expected):
		assert chordsmith.chords.default_quality(degree) == quality


def test_diminished_leading_tone () -> None:

	"""Degree 7 in C is B diminished: B, D, F with D and F carried up an octave."""

	assert chordsmith.chords.chord("C", 7, octave=4) == [71, 74, 77]


def test_octave_carry_in_other_keys () -> None:

	"""Chord tones that pass B carry into the next octave instead of wrapping."""

	# A major's IV is D major: D (62), F# (66), A (69)
	assert chordsmith.chords.chord("A", 4, octave=4) == [62, 66, 69]

	# G major's V is D major, root pitch class 2 in octave 3
	assert chordsmith.chords.chord("G", 5) == [50, 54, 57]


def test_flat_key_names () -> None:

	"""Flat spellings resolve to the same pitch class as their sharps."""

	assert chordsmith.chords.chord("Bb", 1) == chordsmith.chords.chord("A#", 1)


def test_extended_qualities () -> None:

	"""Ninth chords span more than an octave."""

	assert chordsmith.chords.chord("C", 1, "maj9", 0, 4) == [60, 64, 67, 71, 74]
	assert chordsmith.chords.chord("C", 2, chordsmith.chords.ChordQuality.MIN7, 0, 4) == [62, 65, 69, 72]


@pytest.mark.parametrize("degree", [0, 8, -1, 100])
def test_invalid_degree_raises (degree: int) -> None:

	"""Degrees outside 1-7 fail fast rather than clamping."""

	with pytest.raises(chordsmith.exceptions.InvalidDegreeError):
		chordsmith.chords.chord("C", degree)


def test_unknown_quality_raises () -> None:

	"""An unknown chord quality is rejected."""

	with pytest.raises(chordsmith.exceptions.UnknownEnumError):
		chordsmith.chords.chord("C", 1, "mystery")


def test_unknown_key_raises () -> None:

	"""An unknown key name is rejected."""

	with pytest.raises(ValueError):
		chordsmith.chords.chord("H", 1)


def test_chord_names () -> None:

	"""Chord names combine the root note and a quality label."""

	assert chordsmith.chords.chord_name("C", 1) == "C Major"
	assert chordsmith.chords.chord_name("C", 2) == "D Minor"
	assert chordsmith.chords.chord_name("C", 7) == "B Dim"
	assert chordsmith.chords.chord_name("G", 5, "dom7") == "D 7"
	assert chordsmith.chords.chord_name("F", 4) == "A# Major"


def test_apply_modification () -> None:

	"""Modifiers rewrite qualities they know about."""

	assert chordsmith.chords.apply_modification("major", "maj/min") == "minor"
	assert chordsmith.chords.apply_modification("minor", "maj/min") == "major"
	assert chordsmith.chords.apply_modification("major", "7th") == "dom7"
	assert chordsmith.chords.apply_modification("min7", "maj9/min9") == "min9"
	assert chordsmith.chords.apply_modification("minor", "sus2/add6") == "maj6"


def test_unmapped_modification_is_identity () -> None:

	"""A modifier with no rule for the quality leaves it unchanged."""

	assert chordsmith.chords.apply_modification("dim", "sus4") == "dim"
	assert chordsmith.chords.apply_modification("maj9", "aug") == "maj9"


def test_unknown_modification_raises () -> None:

	"""Unknown modifier names are programmer errors."""

	with pytest.raises(chordsmith.exceptions.UnknownEnumError):
		chordsmith.chords.apply_modification("major", "flat5")


def test_diatonic_chord_value_object () -> None:

	"""DiatonicChord renders the same pitches and name as the functions."""

	ii = chordsmith.chords.DiatonicChord(key="D", degree=2, octave=4)

	assert ii.pitches() == chordsmith.chords.chord("D", 2, octave=4)
	assert ii.name() == "E Minor"
	assert ii.resolved_quality == chordsmith.chords.ChordQuality.MINOR


def test_diatonic_chord_modified () -> None:

	"""Applying a modifier returns a new chord with the rewritten quality."""

	tonic = chordsmith.chords.DiatonicChord(key="C", degree=1, octave=4)
	seventh = tonic.modified("maj7/min7")

	assert seventh.quality == chordsmith.chords.ChordQuality.MAJ7
	assert seventh.pitches() == [60, 64, 67, 71]
	assert tonic.quality is None


def test_diatonic_chord_validates () -> None:

	"""Invalid degrees are rejected at construction."""

	with pytest.raises(chordsmith.exceptions.InvalidDegreeError):
		chordsmith.chords.DiatonicChord(key="C", degree=9)
