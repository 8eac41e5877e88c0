#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PeekLingo - Quick dictionary lookup

Entry point for the NiceGUI-based lookup application.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Make `peeklingo` importable when run as a script
sys.path.insert(0, str(Path(__file__).parent))

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# Third-party loggers that flood DEBUG output
NOISY_LOGGERS = (
    'uvicorn', 'uvicorn.error', 'uvicorn.access', 'starlette',
    'httpcore', 'httpx', 'engineio', 'socketio', 'asyncio', 'concurrent',
)


def get_log_file_path() -> Path:
    return Path.home() / ".peeklingo" / "logs" / "peeklingo.log"


def _create_file_handler(log_file_path: Path) -> Optional[logging.FileHandler]:
    """DEBUG-level handler writing to `log_file_path`, or None when the file is unusable."""
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
    except OSError as e:
        print(f"[WARNING] Cannot write log file {log_file_path}: {e}", file=sys.stderr)
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging():
    """Log INFO to stderr and DEBUG to ~/.peeklingo/logs/peeklingo.log.

    Returns:
        tuple: (console_handler, file_handler); file_handler is None when
        only console logging is available
    """
    log_file_path = get_log_file_path()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    file_handler = _create_file_handler(log_file_path)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in (console_handler, file_handler):
        if handler is not None:
            root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("PeekLingo starting...")
    logger.debug("sys.argv: %s", sys.argv)
    if file_handler is not None:
        logger.info("Log file: %s", log_file_path)
    else:
        logger.warning("File logging disabled - console only")

    return (console_handler, file_handler)


# Handlers stay referenced for the lifetime of the process
_log_handlers = None


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PeekLingo - quick dictionary lookup")
    parser.add_argument('--host', default=os.environ.get('PEEKLINGO_HOST', '127.0.0.1'))
    parser.add_argument('--port', type=int, default=int(os.environ.get('PEEKLINGO_PORT', '8765')))
    parser.add_argument('--native', action='store_true', help='Open in a native window (pywebview)')
    return parser.parse_args(argv)


def main(argv=None):
    """Set up logging, then start the NiceGUI server (imported only after logging is ready)."""
    import asyncio

    global _log_handlers
    _log_handlers = setup_logging()

    args = parse_args(argv)
    logger = logging.getLogger(__name__)

    from peeklingo.ui.app import run_app

    try:
        run_app(host=args.host, port=args.port, native=args.native)
    except (KeyboardInterrupt, asyncio.CancelledError) as e:
        logger.debug("Shutting down (%s)", type(e).__name__)
    except Exception as e:
        logger.exception("PeekLingo stopped with an error: %s", e)
        raise


if __name__ == '__main__':
    main()
