import os
import sys
import warnings

_VERBOSE_FLAGS = {"--verbose", "-v"}
_cli_verbose = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])
_env_log_level = os.environ.get("TF_CPP_MIN_LOG_LEVEL")
_suppress_messages = (not _cli_verbose) and _env_log_level != "0"

if _suppress_messages and _env_log_level is None:
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "3"

if _suppress_messages:
    warnings.filterwarnings(
        "ignore",
        message=r"Protobuf gencode version .* is exactly one major version older than the runtime version .*",
        category=UserWarning,
        module="google.protobuf",
    )

VERBOSE = _cli_verbose


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


import tensorflow as tf


def set_tf_log_level(verbose):
    """Match TensorFlow's Python logger to ``verbose``.

    The C++ log level is read from ``TF_CPP_MIN_LOG_LEVEL`` when
    TensorFlow is imported, so only the Python-side logger follows a
    ``main(["-v"])`` call made after import.
    """
    level = "INFO" if verbose else "ERROR"
    tf.get_logger().setLevel(level)
    for handler in tf.get_logger().handlers:
        handler.setLevel(level)


if _suppress_messages:
    set_tf_log_level(False)

from argparse import ArgumentParser

from mandelpolar import PipelineConfig, run

log("TensorFlow version: %s" % tf.__version__)

DEFAULTS = PipelineConfig()


def build_parser():
    parser = ArgumentParser(description='Render the Mandelbrot set and plot its boundary radius against angle.')

    parser.add_argument('--width', type=int,
                        dest='width', help='raster width in pixels',
                        metavar='WIDTH', default=DEFAULTS.width)

    parser.add_argument('--height', type=int,
                        dest='height', help='raster height in pixels',
                        metavar='HEIGHT', default=DEFAULTS.height)

    parser.add_argument('--max-iterations', type=int,
                        dest='max_iterations', help='iterations a point must survive to count as inside the set',
                        metavar='MAX_ITERATIONS', default=DEFAULTS.bailout_iterations)

    parser.add_argument('--bailout-radius', type=float,
                        dest='bailout_radius', help='magnitude beyond which a point has escaped',
                        metavar='BAILOUT_RADIUS', default=DEFAULTS.bailout_radius)

    parser.add_argument('--samples', type=int,
                        dest='samples', help='number of equally spaced angles in [0, 2*pi) to sample',
                        metavar='SAMPLES', default=DEFAULTS.sample_count)

    parser.add_argument('--output-set', type=str,
                        dest='output_set', help='file the rendered raster is written to',
                        metavar='PATH', default=DEFAULTS.raster_path)

    parser.add_argument('--output-plot', type=str,
                        dest='output_plot', help='file the radius plot is written to',
                        metavar='PATH', default=DEFAULTS.plot_path)

    parser.add_argument('--workers', type=int,
                        dest='workers', help='row rendering threads (default: executor default)',
                        metavar='WORKERS', default=DEFAULTS.max_workers)

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging, including TensorFlow diagnostics.')

    return parser


def config_from_args(opt, parser: ArgumentParser) -> PipelineConfig:
    try:
        return PipelineConfig(
            width=opt.width,
            height=opt.height,
            bailout_radius=opt.bailout_radius,
            bailout_iterations=opt.max_iterations,
            sample_count=opt.samples,
            raster_path=opt.output_set,
            plot_path=opt.output_plot,
            max_workers=opt.workers,
        )
    except ValueError as exc:
        parser.error(str(exc))


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)
    set_tf_log_level(VERBOSE or _env_log_level == "0")

    config = config_from_args(opt, parser)
    result = run(config, log=log)
    log("radius range [{0:.4f}, {1:.4f}] over {2} angles".format(
        float(result.samples.radii.min()), float(result.samples.radii.max()), len(result.samples)))


if __name__ == '__main__':
    main()
