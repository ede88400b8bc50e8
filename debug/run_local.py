#!/usr/bin/env python3
"""
Local debug runner: starts the API under Hypercorn with plain-text logging
instead of JSON, so output stays readable in an IDE console.

Usage:
	python debug/run_local.py
	python debug/run_local.py --debug
"""
import sys
import os

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
	sys.path.insert(0, project_root)

import asyncio
import logging

is_debug_mode = os.getenv("PYTHONDEBUG", "").lower() in ("1", "true") or "--debug" in sys.argv

if is_debug_mode:
	# setup_logging() in main.py leaves this configuration alone when PYTHONDEBUG is set
	os.environ["PYTHONDEBUG"] = "1"
	root_logger = logging.getLogger()
	root_logger.setLevel(logging.INFO)
	root_logger.handlers.clear()

	stdout_handler = logging.StreamHandler(sys.stdout)
	stdout_handler.setLevel(logging.INFO)
	stdout_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
	root_logger.addHandler(stdout_handler)

	app_logger = logging.getLogger("app")
	app_logger.setLevel(logging.DEBUG)
	app_logger.propagate = True

logger = logging.getLogger(__name__)


def run_hypercorn():
	"""Run Hypercorn with reload enabled in the current process."""
	import hypercorn.asyncio
	from hypercorn.config import Config
	from app.config import settings
	from main import app

	config = Config()
	config.bind = [f"[::]:{settings.port}"]
	config.use_reload = True
	config.accesslog = "-"

	logger.info(f"Starting Hypercorn on port {settings.port}...")
	asyncio.run(hypercorn.asyncio.serve(app, config))


if __name__ == "__main__":
	try:
		run_hypercorn()
	except KeyboardInterrupt:
		logger.info("Received interrupt signal, shutting down")
