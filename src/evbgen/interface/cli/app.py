from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, maps arguments to generation options, runs the
generator and converts failures into process exit codes.
"""

import json
import os
import sys
from typing import List, Optional

from evbgen.core.generator import build_project
from evbgen.core.writer import write_project
from evbgen.domain.errors import EvbGenError
from evbgen.domain.options import options_to_dict, resolve_options
from evbgen.infra.logging import LoggingConfig, configure_logging, get_logger
from evbgen.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional argument list. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 generation failure,
        2 missing input directory, 130 interrupted).
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=None))

    # 3. Options
    options, warnings = resolve_options(cli_args.args_to_options(args))
    for w in warnings:
        logger.warning(f"Option Constraint: {w}")

    if args.dump_options:
        print(json.dumps(options_to_dict(options), ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    if not os.path.isdir(args.path2pack):
        msg = f"Directory to pack does not exist: {args.path2pack}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Generation
    try:
        document = build_project(args.input_exe, args.output_exe, args.path2pack, options)
        if args.dry_run:
            sys.stdout.write(document)
            return 0
        target = write_project(args.project_name, document)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except EvbGenError as e:
        logger.debug("Generation failed.", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Project written: {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
