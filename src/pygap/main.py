"""
Command-line entry point for PyGap.

Usage:
    pygap --plots 10 --years 500
    pygap --plots 100 --years 300 --interval 10 --workers 4 --csv out.csv --quiet
"""
import argparse
import sys
from typing import List, Optional

from . import __version__
from .config_loader import get_config_loader
from .exceptions import GapError
from .logging_config import get_logger, setup_logging
from .output import DataExporter
from .simulation_engine import SimulationEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pygap',
        description='Individual-tree forest gap model (JABOWA-style succession ensemble).',
    )
    parser.add_argument('--plots', type=int, default=1, help='number of independent plots')
    parser.add_argument('--years', type=int, default=500, help='number of years to simulate')
    parser.add_argument('--seed', type=int, default=None,
                        help='master random seed (default: from parameters file)')
    parser.add_argument('--interval', type=int, default=1, help='output every N years')
    parser.add_argument('--workers', type=int, default=1, help='threads used to advance plots')
    parser.add_argument('--species-config', default=None, help='species catalog file')
    parser.add_argument('--params', default=None, help='simulation parameters file')
    parser.add_argument('--csv', default=None, help='also export the records to this CSV/JSON file')
    parser.add_argument('--quiet', action='store_true', help='do not print the output table')
    parser.add_argument('--log-level', default='WARNING',
                        help='logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a simulation from command-line arguments.

    Returns:
        Process exit code: 0 on success, 2 on configuration or simulation errors
    """
    args = build_parser().parse_args(argv)
    logger = get_logger(__name__)

    try:
        setup_logging(args.log_level)
        loader = get_config_loader()
        catalog = loader.load_catalog(args.species_config)
        params = loader.load_parameters(args.params)
        engine = SimulationEngine(args.plots, catalog, params,
                                  seed=args.seed, parallel_workers=args.workers)
        stream = None if args.quiet else sys.stdout
        df = engine.run(args.years, output_interval=args.interval, stream=stream)
        if args.csv:
            path = DataExporter().export(df, args.csv)
            logger.info(f"Wrote {len(df)} records to {path}")
    except (GapError, ValueError) as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
