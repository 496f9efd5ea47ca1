# cli.py
"""
Command line interface for pixscale.

Upscales one image, or every JPEG in a directory, with the selected method.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_DEVICE, DEFAULT_JPEG_QUALITY, DEFAULT_LANCZOS_A, DEVICES, OUTPUT_SUFFIX
from .errors import PixscaleError
from .io.imread import imread
from .io.imwrite import imwrite
from .io.listdir import list_jpeg_files
from .transform.resize import resize
from .transform.schema import UpscaleJob, UpscaleMethod

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Initialize logging module.

    Set the logging level to INFO (DEBUG when verbose) and format each log entry as
    '%(asctime)s - %(levelname)s - %(message)s'.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be greater than zero")
    return number


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value!r} must be at least 1")
    return number


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixscale",
        description="Resample images with Bicubic, Lanczos or edge-directed interpolation on CPU or CUDA.",
    )
    parser.add_argument("input", type=Path, help="Image file, or a directory to process every JPEG in it")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (single input) or directory (directory input). Defaults to <name>_x<scale> next to the input",
    )
    parser.add_argument("-s", "--scale", type=positive_float, default=None, help="Uniform scale factor, e.g. 2.0")
    parser.add_argument("--scale-x", type=positive_float, default=None, help="Horizontal scale factor")
    parser.add_argument("--scale-y", type=positive_float, default=None, help="Vertical scale factor")
    parser.add_argument(
        "-m",
        "--method",
        choices=[method.value for method in UpscaleMethod],
        default=UpscaleMethod.LANCZOS.value,
        help="Interpolation method (default: lanczos)",
    )
    parser.add_argument(
        "-a", type=positive_int, default=DEFAULT_LANCZOS_A, help=f"Lanczos lobes (default: {DEFAULT_LANCZOS_A})"
    )
    parser.add_argument("--device", choices=DEVICES, default=DEFAULT_DEVICE, help="Execution device")
    parser.add_argument(
        "--linear-light", action="store_true", help="Resample in linear light instead of sRGB (3-channel images)"
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=int,
        choices=range(0, 101),
        metavar="[0-100]",
        default=DEFAULT_JPEG_QUALITY,
        help=f"JPEG quality (default: {DEFAULT_JPEG_QUALITY})",
    )
    parser.add_argument("--overwrite", action="store_true", help="Replace existing output files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Either ``--scale`` or both ``--scale-x`` and ``--scale-y`` must be given; the
    per-axis flags override ``--scale``.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    args.scale_x = args.scale_x or args.scale
    args.scale_y = args.scale_y or args.scale
    if args.scale_x is None or args.scale_y is None:
        parser.error("a scale is required: use --scale or both --scale-x and --scale-y")
    return args


def default_output_path(input_path: Path, scale: float, directory: Path | None = None) -> Path:
    name = f"{input_path.stem}{OUTPUT_SUFFIX.format(scale=scale)}{input_path.suffix}"
    return (directory or input_path.parent) / name


def make_job(args: argparse.Namespace, input_path: Path, output_path: Path) -> UpscaleJob:
    return UpscaleJob(
        input_path=input_path,
        output_path=output_path,
        scale_x=args.scale_x,
        scale_y=args.scale_y,
        method=args.method,
        a=args.a,
        device=args.device,
        linear_light=args.linear_light,
        quality=args.quality,
    )


def collect_jobs(args: argparse.Namespace) -> list[UpscaleJob]:
    """Pair every input image with its output path."""
    if args.input.is_dir():
        inputs = list_jpeg_files(args.input)
        if not inputs:
            raise FileNotFoundError(f"No JPEG files found in {args.input}")
        if args.output is not None:
            args.output.mkdir(parents=True, exist_ok=True)
        return [make_job(args, path, default_output_path(path, args.scale_x, args.output)) for path in inputs]

    output = args.output or default_output_path(args.input, args.scale_x)
    return [make_job(args, args.input, output)]


def process_image(job: UpscaleJob) -> None:
    buffer, width, height, channels = imread(str(job.input_path))
    logger.info(f"Image read: {job.input_path.name} {width}x{height} with {channels} channels")

    image = buffer.reshape(height, width, channels)
    resized = resize(
        image,
        fx=job.scale_x,
        fy=job.scale_y,
        method=job.method,
        a=job.a,
        device=job.device,
        linear_light=job.linear_light,
    )
    out_height, out_width, _ = resized.shape
    imwrite(str(job.output_path), resized.reshape(-1), out_width, out_height, channels, job.quality)
    logger.info(f"Upscaled image written to {job.output_path} ({out_width}x{out_height})")


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        jobs = collect_jobs(args)
    except (OSError, PixscaleError) as e:
        logger.error(f"Error accessing input: {e}")
        return 1

    failures = 0
    for job in jobs:
        if job.output_path.exists() and not args.overwrite:
            logger.error(f"{job.output_path} already exists, use --overwrite to replace it")
            failures += 1
            continue
        try:
            process_image(job)
        except (OSError, RuntimeError, PixscaleError) as e:
            logger.error(f"Error processing {job.input_path}: {e}")
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
