"""Harmonic tension of each major-scale degree.

Values run from 0 (fully stable) to 1 (strongly pulling toward resolution).
The batch generator matches degrees against a target tension curve, and
every generated chord slot carries its degree's value for visualisation.
"""

import typing

import chordsmith.intervals


DEGREE_TENSION: typing.Dict[int, float] = {
	1: 0.1,  # I - home
	2: 0.4,
	3: 0.5,
	4: 0.3,  # IV - mild pull
	5: 0.8,  # V - dominant
	6: 0.4,
	7: 0.9,  # vii° - leading-tone chord
}


def degree_tension (degree: int) -> float:

	"""Return the static tension of a scale degree."""

	chordsmith.intervals.validate_degree(degree)

	return DEGREE_TENSION[degree]
