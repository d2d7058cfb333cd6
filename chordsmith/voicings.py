"""Chord inversions over absolute pitch lists.

An inversion lifts the lowest pitch of a voicing by an octave, one pitch at a
time, so the pitch-class content of the chord never changes.

Example:
	```python
	from chordsmith.voicings import invert_pitches
	invert_pitches([60, 64, 67], 1)  # [64, 67, 72]
	```
"""

import typing


def invert_pitches (pitches: typing.List[int], inversion: int) -> typing.List[int]:

	"""Rotate a chord voicing into an inversion.

	Inversion 0 is root position. Each step removes the lowest pitch and
	appends it an octave higher.

	An inversion greater than or equal to the number of pitches leaves the
	voicing in root position. There is no "next octave" inversion.

	Parameters:
		pitches: Ascending MIDI pitches (e.g., ``[60, 64, 67]``)
		inversion: Which inversion to produce (0 = root position)

	Returns:
		A new list of MIDI pitches

	Raises:
		ValueError: If ``inversion`` is negative.

	Example:
		```python
		invert_pitches([60, 64, 67], 0)  # [60, 64, 67]
		invert_pitches([60, 64, 67], 2)  # [67, 72, 76]
		invert_pitches([60, 64, 67], 3)  # [60, 64, 67]  - out of range, unchanged
		```
	"""

	if inversion < 0:
		raise ValueError(f"Inversion must be non-negative, got {inversion}")

	if inversion == 0 or inversion >= len(pitches):
		return list(pitches)

	inverted = list(pitches)

	for _ in range(inversion):
		lowest = inverted.pop(0)
		inverted.append(lowest + 12)

	return inverted
