"""Phrase grouping for generated progressions.

Maps a phrase form and a slot count to a phrase id per slot. Slots that share
an id play the same role in the form: in ``AABA`` the first slot of each A
section carries id 0, while the bridge uses ids offset by the section size.

The ids are grouping metadata for hosts (highlighting, looping a phrase);
they never influence which chord is chosen.
"""

import typing

import chordsmith.config


def phrases_per_section (slots: int) -> int:

	"""Return the number of phrase ids in one section (at least 2)."""

	return max(2, slots // 4)


def _aaba (slots: int, size: int) -> typing.List[int]:

	a_section = list(range(size))
	b_section = [i + size for i in range(size)]
	form = a_section + a_section + b_section + a_section

	# Longer progressions repeat the whole form.
	return [form[i % len(form)] for i in range(slots)]


def _abab (slots: int, size: int) -> typing.List[int]:

	half = slots // 2

	return [i % size if i < half else (i % size) + size for i in range(slots)]


def _abac (slots: int, size: int) -> typing.List[int]:

	third = slots // 3
	ids: typing.List[int] = []

	for i in range(slots):

		if i < third:
			ids.append(i)

		elif i < third * 2:
			ids.append(i - third + size)

		else:
			ids.append(i - third * 2)

	return ids


def _question_answer (slots: int, size: int) -> typing.List[int]:

	return [i // 2 for i in range(slots)]


def _through_composed (slots: int, size: int) -> typing.List[int]:

	return list(range(slots))


FORM_BUILDERS: typing.Dict[chordsmith.config.PhraseStructure, typing.Callable[[int, int], typing.List[int]]] = {
	chordsmith.config.PhraseStructure.AABA: _aaba,
	chordsmith.config.PhraseStructure.ABAB: _abab,
	chordsmith.config.PhraseStructure.ABAC: _abac,
	chordsmith.config.PhraseStructure.QUESTION_ANSWER: _question_answer,
	chordsmith.config.PhraseStructure.THROUGH_COMPOSED: _through_composed,
}


def generate_phrase_structure (
	form: typing.Union[chordsmith.config.PhraseStructure, str],
	slots: int
) -> typing.List[int]:

	"""Return one phrase id per slot for the given form.

	Parameters:
		form: Phrase structure (``"AABA"``, ``"ABAB"``, ``"ABAC"``,
			``"question-answer"``, ``"through-composed"``)
		slots: Number of slots

	Raises:
		UnknownEnumError: If ``form`` is not a phrase structure.

	Example:
		```python
		generate_phrase_structure("question-answer", 6)  # [0, 0, 1, 1, 2, 2]
		generate_phrase_structure("ABAB", 8)             # [0, 1, 0, 1, 2, 3, 2, 3]
		```
	"""

	resolved = chordsmith.config.parse_phrase_structure(form)

	if slots <= 0:
		return []

	return FORM_BUILDERS[resolved](slots, phrases_per_section(slots))
