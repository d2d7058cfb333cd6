import argparse
import logging
import os
import random
import typing

import yaml

import chordsmith.chords
import chordsmith.generator
import chordsmith.intervals
import chordsmith.presets
import chordsmith.suggestion


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str) -> dict:

	"""
	Load configuration from a YAML file.

	Recognised top-level keys are ``key`` (e.g. ``"G"``) and ``generation``
	(a partial generation config, merged over the defaults).
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def parse_args (argv: typing.Optional[typing.List[str]] = None) -> argparse.Namespace:

	parser = argparse.ArgumentParser(prog="chordsmith", description="Generate or suggest diatonic chord progressions.")

	source = parser.add_mutually_exclusive_group()
	source.add_argument("--preset", help="Named generation preset (e.g. 'Pop Hit').")
	source.add_argument("--artist", help="Artist style mapped onto a preset (e.g. 'Jinsang').")

	parser.add_argument("--config", default="chordsmith.yaml", help="YAML config file (default: chordsmith.yaml).")
	parser.add_argument("--key", help="Key name for chord names (default: C, or the config file's key).")
	parser.add_argument("--seed", type=int, help="Seed for repeatable output.")
	parser.add_argument("--suggest", metavar="DEGREES", help="Comma-separated degrees played so far; prints next-chord suggestions.")

	return parser.parse_args(argv)


def _print_progression (slots: typing.List[chordsmith.generator.GenerativeSlot], key: str) -> None:

	names = chordsmith.generator.progression_chord_names(slots, key)

	for slot, name in zip(slots, names):

		if slot.degree is None:
			print(f"{slot.position:>3}  .")
			continue

		numeral = chordsmith.intervals.roman_numeral(slot.degree)
		print(f"{slot.position:>3}  {numeral:<5} {name:<10} vel={slot.velocity:.2f} dur={slot.duration} phrase={slot.phrase}")


def _print_suggestions (degrees: typing.List[int], key: str, rng: random.Random) -> None:

	history = chordsmith.suggestion.ChordHistory()

	for timestamp, degree in enumerate(degrees):
		history.record(degree, float(timestamp))

	for suggestion in chordsmith.suggestion.suggest_next_chords(history.entries(), rng=rng):
		name = chordsmith.chords.chord_name(key, suggestion.degree)
		print(f"{name:<10} {suggestion.probability:>5.0%}  {suggestion.category.value:<11} {suggestion.reason}")


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point for the chordsmith command line.
	"""

	args = parse_args(argv)
	file_config = load_config(args.config)

	key = args.key or file_config.get('key', 'C')
	chordsmith.intervals.key_name_to_pc(key)

	rng = random.Random(args.seed)

	if args.suggest is not None:
		degrees = [int(part) for part in args.suggest.split(",") if part.strip()]
		_print_suggestions(degrees, key, rng)
		return

	if args.preset:
		config = chordsmith.presets.preset_config(args.preset, **file_config.get('generation', {}))

	elif args.artist:
		config, preset_name, description = chordsmith.presets.artist_config(args.artist)
		config = config.merged(**file_config.get('generation', {}))
		logger.info(f"{args.artist}: {description} ({preset_name})")

	else:
		config = chordsmith.presets.merge_config(file_config.get('generation', {}))

	slots = chordsmith.generator.generate_progression(config, rng=rng, key=key)
	_print_progression(slots, key)


if __name__ == "__main__":
	main()
