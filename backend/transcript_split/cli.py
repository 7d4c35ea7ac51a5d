"""
Command Line Interface
======================
Split a transcript stored as JSON from the command line.

Usage:
    transcript-split --input transcript.json --mode sentence
    transcript-split --input transcript.json --mode character --max-characters 42 --output out.json
    transcript-split --list-modes
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import AppConfig, get_config, set_config, apply_environment_overrides
from .logging_config import get_split_logger
from .models import TranscriptSegment, SplitMode, SplitOptions
from .segmentation import TranscriptSplitter

logger = get_split_logger("cli", log_to_file=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transcript-split",
        description="Re-partition timestamped transcript segments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Split at sentence boundaries
    transcript-split --input transcript.json --mode sentence

    # Merge into batches of at most 20 seconds, ignoring speaker changes
    transcript-split --input transcript.json --mode time --max-duration 20 --no-preserve-speaker

    # Caption-sized chunks written to a file
    transcript-split --input transcript.json --mode character --max-characters 42 --output captions.json
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=str,
        help='JSON file with a list of segments or {"segments": [...]} ("-" for stdin)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Write the resulting segments to this file (default: stdout)'
    )

    parser.add_argument(
        '--mode', '-m',
        type=str,
        choices=[mode.value for mode in SplitMode],
        default=None,
        help='Split mode (default: from configuration)'
    )

    parser.add_argument(
        '--max-duration',
        type=float,
        default=None,
        help='Maximum batch duration in seconds (time/semantic)'
    )

    parser.add_argument(
        '--max-characters',
        type=int,
        default=None,
        help='Maximum batch size in characters (character)'
    )

    parser.add_argument(
        '--min-characters',
        type=int,
        default=None,
        help='Cut floor for character batching / split floor for sentence mode'
    )

    parser.add_argument(
        '--no-preserve-speaker',
        action='store_true',
        help='Allow batches to span speaker changes'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        metavar='FILE',
        help='JSON configuration file'
    )

    parser.add_argument(
        '--list-modes',
        action='store_true',
        help='List available split modes'
    )

    return parser


def load_segments(path: str) -> List[TranscriptSegment]:
    """
    Read segments from a JSON file.

    Raises:
        ValueError: If the file does not hold a list of segment objects
    """
    if path == '-':
        data = json.load(sys.stdin)
    else:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

    if isinstance(data, dict):
        data = data.get('segments')
    if not isinstance(data, list):
        raise ValueError("Input must be a list of segments or an object with a 'segments' list")

    return [TranscriptSegment.from_dict(item) for item in data]


def build_options(args: argparse.Namespace, defaults: SplitOptions) -> SplitOptions:
    """Overlay command line options on the configured defaults."""
    overrides = {
        'mode': args.mode,
        'maxDuration': args.max_duration,
        'maxCharacters': args.max_characters,
        'minCharacters': args.min_characters,
    }
    if args.no_preserve_speaker:
        overrides['preserveSpeaker'] = False
    return SplitOptions.from_dict(
        {k: v for k, v in overrides.items() if v is not None},
        defaults=defaults
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        set_config(AppConfig.load(args.config))
    config = apply_environment_overrides(get_config())

    splitter = TranscriptSplitter(config=config.splitting)

    if args.list_modes:
        for info in splitter.get_strategy_info():
            print(f"{info['mode']:<10} {info['description']}")
        return 0

    if not args.input:
        parser.error("--input is required to split a transcript")

    try:
        segments = load_segments(args.input)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read segments: {e}")
        return 1

    options = build_options(args, splitter.default_options)
    result = splitter.split(segments, options)

    payload = json.dumps([s.to_dict() for s in result], indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(payload + "\n")
        logger.info(f"Wrote {len(result)} segments to {args.output}")
    else:
        print(payload)

    return 0


if __name__ == '__main__':
    sys.exit(main())
