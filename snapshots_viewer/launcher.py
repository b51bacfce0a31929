#!/usr/bin/env python3
"""
Fire-and-forget process launching for external viewers.
"""

from __future__ import annotations

# Standard Library
import logging
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)

#============================================


class ProcessLauncher(Protocol):

	def launch_process(self, launch_path: str, arguments: list[str] | None = None):
		"""
		Start the executable with the given arguments.
		"""


#============================================


class SubprocessLauncher:
	"""
	Launch processes with subprocess.Popen without waiting on them.
	"""

	#============================================
	def __init__(self) -> None:
		self.failed_paths: list[str] = []

	#============================================
	def launch_process(
		self, launch_path: str, arguments: list[str] | None = None
	) -> subprocess.Popen | None:
		"""
		Start a detached process.

		Args:
			launch_path: Executable path.
			arguments: Ordered argument list.

		Returns:
			Popen handle, or None when the executable could not be started.
		"""
		command = [launch_path, *(arguments or [])]
		logger.info("Launching %s", " ".join(command))
		try:
			return subprocess.Popen(
				command,
				stdin=subprocess.DEVNULL,
				stdout=subprocess.DEVNULL,
				stderr=subprocess.DEVNULL,
				start_new_session=True,
			)
		except OSError as exc:
			logger.warning("Could not launch %s: %s", launch_path, exc)
			self.failed_paths.append(launch_path)
			return None
