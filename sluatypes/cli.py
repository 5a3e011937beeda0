from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from sluatypes.errors import SluaTypesError
from sluatypes.patch import load_patches
from sluatypes.pipeline import GenerateOptions, run_generate
from sluatypes.render import OutputKind, output_kind_names
from sluatypes.slua import RemapMode

logger = logging.getLogger("sluatypes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sluatypes",
        description="Generate SLua type definitions and docs from an LSL keywords file.",
    )
    parser.add_argument("input", type=Path, help="Keywords file (.xml, .yml or .yaml).")
    parser.add_argument(
        "output",
        nargs="?",
        default=OutputKind.SLUA_DEFS.value,
        help=f"Output kind (defaults to slua-defs). Known kinds: {', '.join(output_kind_names())}.",
    )
    parser.add_argument(
        "--loose",
        action="store_true",
        help="Widen number/boolean arguments to the shared numeric type.",
    )
    parser.add_argument("--lsl-overrides", type=Path, help="JSON patch list applied to the catalogue.")
    parser.add_argument("--slua-overrides", type=Path, help="JSON patch list applied to the type-system document.")
    parser.add_argument("--out", type=Path, help="Write output to this file instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = GenerateOptions(
            mode=RemapMode.LOOSE if args.loose else RemapMode.STRICT,
            catalogue_patches=load_patches(args.lsl_overrides) if args.lsl_overrides else (),
            document_patches=load_patches(args.slua_overrides) if args.slua_overrides else (),
        )
        logger.debug("Generating %s from %s (%s mode)", args.output, args.input, options.mode)
        result = run_generate(args.input, args.output, options)
        if result.output is None:
            return 0
        if args.out is not None:
            args.out.write_text(result.output, encoding="utf-8")
            logger.info("Wrote %s -> %s", result.kind, args.out)
        else:
            sys.stdout.write(result.output)
    except (SluaTypesError, OSError) as exc:
        print(f"Failed to generate: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
