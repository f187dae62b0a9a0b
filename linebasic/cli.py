from __future__ import annotations

import argparse
import logging
from pathlib import Path

from linebasic.config import load_settings
from linebasic.errors import BasicError, ConfigError, ParseError
from linebasic.parser import load_program

log = logging.getLogger("linebasic")


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ConfigError as err:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        log.error("%s", err)
        return 1

    parser = argparse.ArgumentParser(prog="linebasic", description="Run a line-numbered BASIC program.")
    parser.add_argument("file", type=Path, help="BASIC source file")
    parser.add_argument("--no-dump", dest="dump", action="store_false", default=settings.dump,
                        help="do not print the parsed program and variables before running")
    parser.add_argument("--max-steps", type=int, default=settings.max_steps,
                        help="stop with an error after this many instructions")
    parser.add_argument("--strict-lines", action="store_true", default=settings.strict_lines,
                        help="reject a line number defined twice instead of keeping the last one")
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        interp = load_program(args.file, allow_redefinition=not args.strict_lines)
    except OSError as err:
        log.error("failed to open %s : %s", args.file, err)
        return 1
    except UnicodeDecodeError as err:
        log.error("failed to read %s : %s", args.file, err)
        return 1
    except ParseError as err:
        log.error("%s: %s", args.file, err)
        return 1

    try:
        if args.dump:
            interp.dump()
        interp.run(max_steps=args.max_steps)
    except BasicError as err:
        log.error("%s", err)
        return 1
    return 0
