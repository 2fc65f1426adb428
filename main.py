"""
CLI entry point for the GPU diagnostic.

Usage:
    python main.py
    python main.py -b tensorflow
    python main.py -c diagnostic.toml --environment
    python main.py --compute
"""
import argparse
import logging
import os

from src.domain.use_cases.check_compute import CheckCompute
from src.domain.use_cases.report_environment import ReportEnvironment
from src.domain.use_cases.run_diagnostic import RunDiagnostic
from src.infrastructure.backends import AVAILABLE_BACKENDS, create_backend
from src.infrastructure.configuration import DiagnosticConfiguration
from src.infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Check that a GPU-enabled tensor library is installed and working."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a TOML configuration file with a [diagnostic] table",
    )
    parser.add_argument(
        "-b",
        "--backend",
        choices=AVAILABLE_BACKENDS,
        help="Tensor library to check (default: torch)",
    )
    parser.add_argument(
        "-e",
        "--environment",
        action="store_true",
        help="Also print environment variables, build capabilities and device names",
    )
    parser.add_argument(
        "--compute",
        action="store_true",
        help="Also multiply a matrix on the GPU and copy the product back to check kernels run",
    )
    return parser.parse_args(argv)


def build_configuration(args: argparse.Namespace) -> DiagnosticConfiguration:
    """
    Build the configuration from an optional TOML file and command-line overrides.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.

    Returns
    -------
    DiagnosticConfiguration
        Defaults, overridden by the config file, overridden by flags.
    """
    if args.config is not None:
        config = DiagnosticConfiguration.load(args.config)
    else:
        config = DiagnosticConfiguration()

    if args.backend is not None:
        config.backend = args.backend
    if args.environment:
        config.report_environment = True
    if args.compute:
        config.check_compute = True
    return config


def main(argv=None):
    """
    Main entry point for the GPU diagnostic.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.
    """
    args = parse_args(argv)
    config = build_configuration(args)
    setup_logging(config.log_level)

    backend = create_backend(config.backend)
    RunDiagnostic(
        backend=backend,
        shape=config.shape,
        device_index=config.device_index,
    ).run()

    if config.report_environment:
        ReportEnvironment(backend=backend, environ=os.environ).run()

    if config.check_compute:
        CheckCompute(
            backend=backend,
            size=config.compute_size,
            device_index=config.device_index,
        ).run()

    logger.info("Diagnostic completed.")


if __name__ == "__main__":
    main()
