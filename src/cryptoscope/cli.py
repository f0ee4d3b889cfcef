"""
Command-Line Interface (CLI) for Cryptoscope
Primary interface for working through challenge files in a terminal
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .core.engine import CryptoscopeEngine
from .core.errors import CryptoscopeError
from .core.loader import ChallengeLoader, DECODERS
from .core.padding import pkcs7_pad
from .core.presets import PresetLibrary
from .core.raw_bytes import ByteBuffer
from .utils.report_generator import ReportGenerator


# Default input encoding per command (matches the usual challenge files)
DEFAULT_ENCODINGS = {
    'convert': 'hex',
    'xor': 'text',
    'hamming': 'text',
    'break-single': 'hex',
    'detect-single': 'hex',
    'break-repeating': 'base64',
    'detect-ecb': 'hex',
    'aes-ecb-decrypt': 'base64',
    'pad': 'text',
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation"""
    parser = argparse.ArgumentParser(
        prog='cryptoscope',
        description='Cryptoscope - Classical cipher cryptanalysis and byte encoding toolkit',
        epilog='For education and authorized testing only. MIT License.'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'Cryptoscope v{__version__}'
    )

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        'input',
        type=str,
        help='Input file (or literal data with --string)'
    )
    common.add_argument(
        '--string',
        action='store_true',
        help='Treat INPUT as literal data instead of a file path'
    )
    common.add_argument(
        '--encoding',
        choices=sorted(DECODERS),
        default=None,
        help='Input encoding (default depends on the command)'
    )
    common.add_argument(
        '--json',
        action='store_true',
        help='Output JSON only (machine-readable)'
    )
    common.add_argument(
        '--report',
        type=str,
        metavar='FILE',
        help='Write a Markdown report to FILE'
    )
    common.add_argument(
        '--preset',
        choices=PresetLibrary.list_presets(),
        default='default',
        help='Breaker preset (default: default)'
    )
    common.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging and tracebacks'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('convert', parents=[common],
                          help='Show input as hex, base64 and text')

    xor_parser = subparsers.add_parser('xor', parents=[common],
                                       help='Repeating-key XOR encrypt/decrypt')
    xor_parser.add_argument('--key', required=True, help='XOR key')
    xor_parser.add_argument('--key-encoding', choices=sorted(DECODERS), default='text',
                            help='Key encoding (default: text)')

    hamming_parser = subparsers.add_parser('hamming', parents=[common],
                                           help='Bit-level Hamming distance between two inputs')
    hamming_parser.add_argument('other', help='Second input (same kind as INPUT)')

    subparsers.add_parser('break-single', parents=[common],
                          help='Brute force a single-byte XOR key')
    subparsers.add_parser('detect-single', parents=[common],
                          help='Find the single-byte XOR line among many')
    subparsers.add_parser('break-repeating', parents=[common],
                          help='Recover a repeating XOR key')
    subparsers.add_parser('detect-ecb', parents=[common],
                          help='Rank lines by duplicate 16-byte blocks')

    aes_parser = subparsers.add_parser('aes-ecb-decrypt', parents=[common],
                                       help='Decrypt AES-128-ECB with a known key')
    aes_parser.add_argument('--key', required=True, help='16-byte key')
    aes_parser.add_argument('--key-encoding', choices=sorted(DECODERS), default='text',
                            help='Key encoding (default: text)')
    aes_parser.add_argument('--unpad', action='store_true', help='Strip PKCS#7 padding')

    pad_parser = subparsers.add_parser('pad', parents=[common], help='Apply PKCS#7 padding')
    pad_parser.add_argument('--block-size', type=int, default=16,
                            help='Block size in bytes (default: 16)')

    return parser


def main(argv=None):
    """
    Main CLI entry point

    Handles argument parsing and dispatches to the engine
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    encoding = args.encoding or DEFAULT_ENCODINGS[args.command]
    loader = ChallengeLoader(encoding)

    # Validate input file
    if not args.string and not Path(args.input).exists():
        print(f"[!] Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    try:
        engine = CryptoscopeEngine(preset=args.preset, verbose=not args.json)
        result = run_command(args, engine, loader)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print_summary(result)

        if args.report:
            report = ReportGenerator().generate_markdown(result, args.command)
            with open(args.report, 'w') as f:
                f.write(report)
            if not args.json:
                print(f"[+] Markdown report: {args.report}")

    except KeyboardInterrupt:
        print(f"\n\n[!] Interrupted by user", file=sys.stderr)
        sys.exit(130)

    except (CryptoscopeError, FileNotFoundError) as e:
        print(f"[!] Error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)


def run_command(args, engine: CryptoscopeEngine, loader: ChallengeLoader):
    """Load the input and run the selected operation"""
    name = 'argument' if args.string else Path(args.input).name

    def blob() -> ByteBuffer:
        if args.string:
            return loader.decode(args.input)
        return loader.load_blob(args.input)

    def lines():
        if args.string:
            return loader.parse_lines(args.input)
        return loader.load_lines(args.input)

    command = args.command

    if command == 'convert':
        return engine.convert(blob(), name)

    if command == 'xor':
        key = DECODERS[args.key_encoding](args.key)
        return engine.convert(blob().repeating_xor(key), name)

    if command == 'hamming':
        other = loader.decode(args.other) if args.string else loader.load_blob(args.other)
        buffer = blob()
        distance = buffer.hamming_distance(other)
        result = engine.convert(buffer, name)
        result.operation = 'hamming'
        result.encodings = {'hamming_distance': str(distance)}
        return result

    if command == 'break-single':
        return engine.break_single_byte(blob(), name)

    if command == 'detect-single':
        return engine.detect_single_byte(lines(), name)

    if command == 'break-repeating':
        return engine.break_repeating_key(blob(), name)

    if command == 'detect-ecb':
        return engine.detect_ecb(lines(), name)

    if command == 'aes-ecb-decrypt':
        key = DECODERS[args.key_encoding](args.key)
        return engine.decrypt_aes_ecb(blob(), key, unpad=args.unpad, input_name=name)

    if command == 'pad':
        return engine.convert(pkcs7_pad(blob(), args.block_size), name)

    raise ValueError(f"Unknown command: {command}")


def print_summary(result):
    """Print a short human-readable summary of a result"""
    print(f"\n[+] {result.operation} complete")

    best = result.best()
    if best is not None:
        print(f"    Key (hex): {best.key_hex()}")
        print(f"    Score: {best.score}")
        if best.source_index is not None:
            print(f"    Line: {best.source_index}")

    if result.block_scores:
        top = result.block_scores[0]
        print(f"    Most duplicate blocks: line {top.index} ({top.duplicate_blocks})")

    if result.encodings:
        for label, value in result.encodings.items():
            print(f"    {label}: {value}")
    elif result.output is not None:
        print("\n" + result.output.to_text())


if __name__ == '__main__':
    main()
