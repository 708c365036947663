"""dominant-color — dominant colour and transparency metadata for images.

Usage: dominant-color extract <image> [<image> ...] [options]

Backends live in dominant_color/backends/ and are listed in dominant_color.registry.
Run `dominant-color backends` to list them.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, dominant-color looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from dominant_color import registry
from dominant_color.core.env import ExtractionConfig, default_backend, load_env, log_level
from dominant_color.core.log import configure_logging
from dominant_color.core.report import format_json, format_text
from dominant_color.extract import extract_files


def _backend_doc(name: str) -> str:
    mod = importlib.import_module(f'dominant_color.backends.{name}')
    doc = (mod.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  dominant-color extract photo.jpg\n'
        '  dominant-color extract uploads/*.png --json\n'
        '  dominant-color extract logo.png --backend opencv\n'
        '  dominant-color extract big.jpg --max-samples 10000 --bucket-bits 5\n'
        '  dominant-color backends\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  DOMINANT_COLOR_MAX_SAMPLES, DOMINANT_COLOR_BUCKET_BITS,\n'
        '  DOMINANT_COLOR_ALPHA_THRESHOLD, DOMINANT_COLOR_BACKEND,\n'
        '  DOMINANT_COLOR_LOG_LEVEL\n'
    )
    parser = argparse.ArgumentParser(
        prog='dominant-color',
        description='Dominant colour and transparency metadata for images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('extract', help='Compute dominant colour and transparency for images')
    p.add_argument('images', nargs='+', help='Image files to analyse')
    p.add_argument(
        '-b',
        '--backend',
        default=None,
        choices=sorted(registry.all_backends()),
        help='Decoding backend (default: $DOMINANT_COLOR_BACKEND or pillow)',
    )
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-n', '--max-samples', type=int, default=None, metavar='N', help='Pixels sampled per image')
    p.add_argument('-k', '--bucket-bits', type=int, default=None, metavar='K', help='Bits kept per channel (1-8)')
    p.add_argument(
        '-a',
        '--alpha-threshold',
        type=int,
        default=None,
        metavar='A',
        help='Alpha below A counts as transparent (default 255)',
    )

    sub.add_parser('backends', help='List decoding backends')
    return parser


def _config(args: argparse.Namespace) -> ExtractionConfig:
    """Env settings, overridden by any flags given on the command line."""
    base = ExtractionConfig.from_env()
    return ExtractionConfig(
        max_samples=args.max_samples if args.max_samples is not None else base.max_samples,
        bucket_bits=args.bucket_bits if args.bucket_bits is not None else base.bucket_bits,
        alpha_threshold=args.alpha_threshold if args.alpha_threshold is not None else base.alpha_threshold,
    )


def _print_backends() -> None:
    print('Available backends:\n')
    for name in sorted(registry.all_backends()):
        print(f'  {name:<10} {_backend_doc(name)}')


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    configure_logging('DEBUG' if args.verbose else log_level())
    if env_path:
        print(f'dominant-color: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'backends':
        _print_backends()
        return 0

    try:
        config = _config(args)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 2

    backend = args.backend or default_backend()
    if backend not in registry.all_backends():
        print(f'Error: unknown backend {backend!r}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(registry.all_backends()))}', file=sys.stderr)
        return 2

    results = extract_files(args.images, backend=backend, config=config)
    print(format_json(results) if args.json else format_text(results))

    # Non-zero exit after output, so every image is still reported
    return 1 if any(not r.ok for r in results) else 0


if __name__ == '__main__':
    sys.exit(main())
