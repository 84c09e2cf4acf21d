#!/usr/bin/env python3
"""Demo: count through a few steps on a single status line.

"start" and "finish" are printed whether or not stdout is a terminal.
The status updates only show up on a terminal; redirect the output to a
file to see them disappear.

Usage:
    python -m termstatus
    python -m termstatus --total 30 --delay 0.1
    python -m termstatus > out.txt
"""

import argparse
import logging
import sys
import time

from termstatus.config import ConfigError, demo_settings, load_config
from termstatus.line import StatusLine
from termstatus.logging_config import open_event_log, setup_logging

logger = logging.getLogger(__name__)


def run(total, delay, line=None, out=None):
    """Drive a status line through total steps, sleeping delay between them."""
    out = out if out is not None else sys.stdout
    line = line if line is not None else StatusLine()

    print("start", file=out, flush=True)
    with line:
        for i in range(total):
            word = "even" if i % 2 == 0 else "odd"
            line.write_formatted("step %d (%s), %d left to do", i, word, total - i)
            if delay:
                time.sleep(delay)
    print("finish", file=out, flush=True)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Single status line demo.")
    parser.add_argument("--total", "-n", type=int, default=None,
                        help="Number of steps (default: 15)")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds to wait between steps (default: 0.3)")
    parser.add_argument("--config", default=None,
                        help="YAML config file (default: ~/.termstatus/config.yaml)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Show only warnings and errors")
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    config = load_config(path=args.config, required=args.config is not None, fallback={})

    try:
        settings = demo_settings(config)
        open_event_log(config)
    except ConfigError as e:
        logger.error("Invalid config: %s", e)
        return 1
    except OSError as e:
        logger.error("Cannot open event log: %s", e)
        return 1

    if args.total is not None:
        settings["total"] = args.total
    if args.delay is not None:
        settings["delay"] = args.delay

    if settings["total"] < 0:
        logger.error("total must not be negative (got %d)", settings["total"])
        return 1
    if settings["delay"] < 0:
        logger.error("delay must not be negative (got %g)", settings["delay"])
        return 1

    logger.debug("Running %d steps with %.2fs delay", settings["total"], settings["delay"])
    try:
        run(settings["total"], settings["delay"])
    except BrokenPipeError:
        logger.error("Output closed before the demo finished")
        return 1
    except OSError as e:
        logger.error("Error writing status line: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
