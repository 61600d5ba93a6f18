import argparse
import logging
from typing import Optional, Sequence

from ralgeb import enable_verbose_logging, get_config, set_config
from ralgeb.demo import run

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tour of the ralgeb geometry and matrix helpers")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--trace-calls",
        action="store_true",
        help="Log every combinatorics and matrix call at DEBUG level",
    )
    parser.add_argument(
        "--strict-combinatorics",
        action="store_true",
        help="Reject permutations/combinations with r > n instead of returning 1",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.trace_calls:
        enable_verbose_logging()
    if args.strict_combinatorics:
        config = get_config()
        config.strict_combinatorics = True
        set_config(config)

    logger.info("Running demo")
    run()


if __name__ == "__main__":
    main()
