"""
SpriteLab CLI

Commands:
1. serve    - Run the HTTP API
2. slice    - Slice a local sheet image into the 576x24 strip
3. generate - Generate a sheet from a prompt and slice it
"""

import argparse
import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from spritelab.sprites import CHARACTER_NAMES, build_atlas, get_detector, slice_sheet_detailed
from spritelab.sprites.detection import DETECTORS


def write_outputs(png: bytes, output: str, name: Optional[str]) -> None:
    """Write the strip PNG and, when named, its atlas JSON beside it."""
    png_path = Path(output)
    png_path.parent.mkdir(parents=True, exist_ok=True)
    png_path.write_bytes(png)
    print(f"Created sprite strip: {png_path}")

    if name:
        json_path = png_path.with_suffix(".json")
        with open(json_path, "w") as f:
            json.dump(build_atlas(name), f, indent=2)
        print(f"Created metadata: {json_path}")


def handle_serve(args) -> None:
    """Run the API server."""
    from spritelab.api.main import run_api

    run_api(host=args.host, port=args.port, reload=args.reload)


def handle_slice(args) -> None:
    """Slice a local sheet image."""
    input_path = Path(args.input)
    result = slice_sheet_detailed(input_path.read_bytes(), get_detector(args.detector))

    print(f"Detected {len(result.detected)} boxes, filled {result.filled_slots}/24 slots")
    for slot, box in enumerate(result.slots):
        if box is not None:
            print(f"  slot {slot:2d}: x={box.x} y={box.y} w={box.w} h={box.h}")

    write_outputs(result.png, args.output, args.name)


def handle_generate(args) -> None:
    """Generate a sheet from a prompt, then slice it."""
    from spritelab.api.services import SpriteService
    from spritelab.config import get_settings

    settings = replace(get_settings(), detector=args.detector)

    async def run() -> bytes:
        service = SpriteService(settings)
        try:
            png, _ = await service.generate_sheet(args.prompt, args.name)
            return png
        finally:
            await service.close()

    write_outputs(asyncio.run(run()), args.output, args.name)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="SpriteLab - turn prompts into sprite strips",
        prog="spritelab",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m spritelab serve --port 8000
  python -m spritelab slice ./sheet.png -o ./out/mort.png --name mort
  python -m spritelab slice ./sheet.png -o ./out/mort.png --detector grid
  python -m spritelab generate "a tiny green dinosaur" -o ./out/doux.png --name doux
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # Slice command
    slice_parser = subparsers.add_parser("slice", help="Slice a sheet image into a strip")
    slice_parser.add_argument("input", type=str, help="Input sheet image")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate and slice a sheet")
    gen_parser.add_argument("prompt", type=str, help="Character concept")

    for sub in (slice_parser, gen_parser):
        sub.add_argument("--output", "-o", type=str, required=True, help="Output PNG path")
        sub.add_argument("--name", choices=CHARACTER_NAMES, help="Character name (writes atlas JSON)")
        sub.add_argument(
            "--detector",
            choices=sorted(DETECTORS),
            default="projection",
            help="Cell detection strategy (default: projection)",
        )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "serve": handle_serve,
        "slice": handle_slice,
        "generate": handle_generate,
    }
    handlers[args.command](args)


if __name__ == "__main__":
    main()
