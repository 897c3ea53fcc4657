"""Headless engine replay CLI entry point.

Reads a JSON file of input batches, runs each batch through one tick of a
default Engine, and prints the resulting EngineOutput for every tick as JSON.

The input file holds either a single batch ({"events": [...]}) or a list
of batches ([{"events": [...]}, ...]).

Usage:
    python editor/src/headless.py <input_file> [--last-only] [--selection-move] [-v]

Examples:
    python editor/src/headless.py examples/marquee_drag.json
    python editor/src/headless.py session.json --last-only --indent 2
"""

import sys
import os
import argparse
import json
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from services.engine import Engine, EngineSettings
from utils.event_codec import BatchDecodeError, decode_batch, encode_output

logger = logging.getLogger(__name__)


def _load_batches(file_path: str) -> list:
    """Read and decode every batch in the file.

    Returns:
        List of event lists, one per tick.

    Raises:
        BatchDecodeError: if the file is not valid JSON or a batch is malformed.
    """
    with open(file_path, "r", encoding="utf-8-sig") as f:
        text = f.read()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BatchDecodeError(f"malformed JSON ({e})") from e

    if isinstance(data, dict):
        return [decode_batch(data)]
    if isinstance(data, list) and data and all(isinstance(item, dict) and 'events' in item for item in data):
        return [decode_batch(item) for item in data]
    # A bare list of events is a single batch
    return [decode_batch(data)]


def replay(batches, settings=None):
    """Run batches through a fresh default engine; returns encoded outputs, one per tick."""
    engine = Engine.with_default_document(settings)
    outputs = []
    for idx, batch in enumerate(batches):
        output = engine.tick(batch)
        logger.debug("Tick %d: %d event(s), selection=%s", idx, len(batch), engine.selected)
        outputs.append(encode_output(output))
    return outputs


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Replay input batches through the canvas engine (headless).',
    )
    parser.add_argument(
        'input_file',
        help='Path to a JSON file with one batch or a list of batches.',
    )
    parser.add_argument(
        '--last-only',
        action='store_true',
        help='Print only the output of the final tick.',
    )
    parser.add_argument(
        '--selection-move',
        action='store_true',
        help='Enable dragging selected shapes.',
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=None,
        help='Indent the JSON output by this many spaces.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args(argv)

    # Logging goes to stderr so stdout stays valid JSON
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    input_path = os.path.abspath(args.input_file)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        batches = _load_batches(input_path)
    except (BatchDecodeError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    outputs = replay(batches, EngineSettings(selection_move=args.selection_move))
    if args.last_only:
        outputs = outputs[-1:]

    for output in outputs:
        print(json.dumps(output, indent=args.indent))
    return 0


if __name__ == '__main__':
    sys.exit(main())
