"""CLI console and logging helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep working
even when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from clidispatch.exceptions import MissingDependencyError

LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""``print``-compatible proxy over one lazily created Rich console."""

	def __init__(self) -> None:
		self._rich_console: Any = None

	def _load(self) -> Any:
		"""Return the shared Rich console, or ``None`` without Rich."""
		if self._rich_console is None:
			try:
				self._rich_console = get_rich_console()
			except MissingDependencyError:
				return None
		return self._rich_console

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = self._load()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def escape(self, text: object) -> str:
		"""Make *text* safe to embed in markup passed to :meth:`print`."""
		if self._load() is None:
			return str(text)
		from rich.markup import escape

		return escape(str(text))


console = _ConsoleProxy()


def configure_logging(debug: bool) -> logging.Logger:
	"""Attach a stderr handler to the ``clidispatch`` logger.

	DEBUG when *debug* is set, WARNING otherwise.  Rich's handler is used
	when Rich is installed.  Calling this twice does not add a second
	handler.
	"""
	logger = logging.getLogger("clidispatch")
	logger.setLevel(logging.DEBUG if debug else logging.WARNING)
	if logger.handlers:
		return logger

	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("[%(levelname)s] " + LOG_FORMAT))
	else:
		handler = RichHandler(console=get_rich_console(), show_time=False, show_path=False)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
	logger.addHandler(handler)
	return logger
