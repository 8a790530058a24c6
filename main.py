"""
TokenForge - Design System Token Generator
Main entry point - command line export
"""
import argparse
import json
import logging
import os
import sys
from dataclasses import replace

from app_config import APP_SUBTITLE, get_window_title
from logging_config import setup_logging
from version import __version__

from tokenforge import (
    TokenForgeError, InvalidParameter, ColorAdjustment, ExportFormat,
    COLOR_ROLES, default_state, generate_scale, regenerate_color_role,
    render, resolve_ratio, state_from_dict, update_typography, write_export,
)
from tokenforge.config import Config
from tokenforge.logger import app_logger

TYPOGRAPHY_KEYS = ('base_font_size_px', 'base_line_height', 'scale_ratio', 'base_unit_px')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='tokenforge',
        description=f'{get_window_title(__version__)} - {APP_SUBTITLE}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  python main.py                                  # Default tokens as design-system.css
  python main.py --format tailwind --stdout       # Print a Tailwind config
  python main.py --scale-ratio golden-ratio --print-scale
  python main.py --color primary=#0EA5E9 --luminance 10 --format scss
  python main.py --input design-system.json --format css --no-dark-mode
        """)

    parser.add_argument('--format', choices=[f.value for f in ExportFormat],
                        help='Export format (default: from config, normally css)')
    output = parser.add_mutually_exclusive_group()
    output.add_argument('--output', '-o', metavar='PATH',
                        help='File or directory to write (default: configured output directory)')
    output.add_argument('--stdout', action='store_true',
                        help='Print the export instead of writing a file')
    parser.add_argument('--input', '-i', metavar='JSON',
                        help='Start from a JSON export instead of the defaults')
    parser.add_argument('--config', metavar='PATH',
                        help='Settings file (default: config.json in the app data folder)')

    typography = parser.add_argument_group('typography')
    typography.add_argument('--base-font-size', type=float, metavar='PX')
    typography.add_argument('--scale-ratio', metavar='RATIO',
                            help="Number or preset name (e.g. 1.25, perfect-fourth)")
    typography.add_argument('--line-height', type=float, metavar='N')
    typography.add_argument('--base-unit', type=float, metavar='PX')
    typography.add_argument('--print-scale', action='store_true',
                            help='Print the computed type scale and exit')

    colors = parser.add_argument_group('colors')
    colors.add_argument('--color', action='append', default=[], metavar='ROLE=HEX',
                        help=f"Regenerate a role's shades ({', '.join(COLOR_ROLES)})")
    colors.add_argument('--contrast', type=int, default=0, metavar='N', help='-50..50')
    colors.add_argument('--saturation', type=int, default=0, metavar='N', help='-50..50')
    colors.add_argument('--luminance', type=int, default=0, metavar='N', help='-50..50')

    sections = parser.add_argument_group('sections')
    for name in ('typography', 'colors', 'spacing', 'components', 'dark-mode'):
        sections.add_argument(f'--no-{name}', action='store_true', help=f'Leave out {name}')
    parser.add_argument('--save-config', action='store_true',
                        help='Remember --format and section flags as the new defaults')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log debug output to the console')

    return parser


def _load_state(args, config):
    """Initial state: JSON input, or defaults with configured typography"""
    if args.input:
        with open(args.input, 'r', encoding='utf-8') as f:
            try:
                document = json.load(f)
            except ValueError as e:
                raise InvalidParameter(f"{args.input} is not valid JSON: {e}") from None
        return state_from_dict(document)

    state = default_state()
    overrides = {k: v for k, v in config.get('typography', {}).items() if k in TYPOGRAPHY_KEYS}
    if overrides:
        state = update_typography(state, replace(state.typography, **overrides))
    return state


def _apply_arguments(state, args):
    """Apply typography and colour flags to the state"""
    changes = {}
    if args.base_font_size is not None:
        changes['base_font_size_px'] = args.base_font_size
    if args.scale_ratio is not None:
        changes['scale_ratio'] = resolve_ratio(args.scale_ratio)
    if args.line_height is not None:
        changes['base_line_height'] = args.line_height
    if args.base_unit is not None:
        changes['base_unit_px'] = args.base_unit
    if changes:
        state = update_typography(state, replace(state.typography, **changes))

    adjust = ColorAdjustment(contrast=args.contrast, saturation=args.saturation,
                             luminance=args.luminance)
    for item in args.color:
        role, sep, hex_value = item.partition('=')
        if not sep:
            raise InvalidParameter(f"--color expects ROLE=HEX, got {item!r}")
        state = regenerate_color_role(state, role.strip(), hex_value.strip(), adjust)
    return state


def _export_options(args, config):
    options = config.get_export_options()
    return replace(
        options,
        include_typography=options.include_typography and not args.no_typography,
        include_colors=options.include_colors and not args.no_colors,
        include_spacing=options.include_spacing and not args.no_spacing,
        include_components=options.include_components and not args.no_components,
        include_dark_mode=options.include_dark_mode and not args.no_dark_mode,
    )


def print_scale(settings):
    """Print the type scale as a table"""
    print(f"{'Step':>4}  {'px':>8}  {'rem':>7}  {'leading':>7}  {'tracking':>8}  {'rhythm':>7}")
    for s in generate_scale(settings):
        print(f"{s.step:>4}  {s.px:>8}  {s.rem:>7}  {s.line_height:>7}  "
              f"{s.letter_spacing_em:>8}  {s.rhythm.single:>7}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = Config(args.config)
        state = _apply_arguments(_load_state(args, config), args)

        if args.print_scale:
            print_scale(state.typography)
            return 0

        fmt = ExportFormat.parse(args.format) if args.format else config.get_export_format()
        options = _export_options(args, config)

        if args.save_config:
            config.set('export_format', fmt.value)
            config.set_export_options(options)
            config.save()

        if args.stdout:
            text = render(state, fmt, options)
            sys.stdout.write(text if text.endswith("\n") else text + "\n")
            return 0

        target = args.output or config.get('output_directory') or os.getcwd()
        path = write_export(state, fmt, target, options)
        print(path)
        return 0

    except TokenForgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        app_logger.error(f"File error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
