"""
Structured JSON logging configuration.
Outputs to stdout so the hosting platform can categorize log levels.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs logs as JSON, one object per line.
	"""

	def format(self, record: logging.LogRecord) -> str:
		"""Format log record as JSON."""
		log_data: Dict[str, Any] = {
			"timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
		}

		if record.exc_info:
			log_data["exception"] = self.formatException(record.exc_info)

		# Fields passed via logger.x(..., extra={"extra_fields": {...}})
		if hasattr(record, "extra_fields"):
			log_data.update(record.extra_fields)

		if record.module:
			log_data["module"] = record.module
		if record.funcName:
			log_data["function"] = record.funcName
		if record.lineno:
			log_data["line"] = record.lineno

		return json.dumps(log_data, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> None:
	"""
	Configure application-wide logging to use structured JSON output to stdout.

	Args:
		level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

	Note:
		If PYTHONDEBUG is set, this function only adjusts the level of the
		"app" loggers so a plain-text IDE configuration stays in place.
	"""
	log_level = getattr(logging, level.upper(), logging.INFO)

	is_debug_mode = os.getenv("PYTHONDEBUG", "").lower() in ("1", "true")
	if is_debug_mode:
		logging.getLogger("app").setLevel(log_level)
		return

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)
	root_logger.handlers.clear()

	# stdout, not stderr: stderr is treated as errors by most log collectors
	stdout_handler = logging.StreamHandler(sys.stdout)
	stdout_handler.setLevel(log_level)
	stdout_handler.setFormatter(JSONFormatter())
	root_logger.addHandler(stdout_handler)

	# Noisy libraries
	logging.getLogger("httpx").setLevel(logging.WARNING)
	logging.getLogger("httpcore").setLevel(logging.WARNING)
	logging.getLogger("hypercorn.access").setLevel(logging.WARNING)
