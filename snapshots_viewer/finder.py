#!/usr/bin/env python3
"""
Locate installed macOS applications by bundle identifier.
"""

from __future__ import annotations

# Standard Library
import logging
import plistlib
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_DIRS = ("/Applications", "~/Applications")

#============================================


class ApplicationFinder(Protocol):

	def find_application(self, bundle_identifier: str) -> Path | None:
		"""
		Return the install location for the bundle, or None.
		"""


#============================================


def mdfind_bundle(bundle_identifier: str) -> Path | None:
	"""
	Ask Spotlight for an application bundle.

	Args:
		bundle_identifier: CFBundleIdentifier to match.

	Returns:
		First matching .app path or None.
	"""
	query = f"kMDItemCFBundleIdentifier == '{bundle_identifier}'"
	try:
		result = subprocess.run(
			["mdfind", query],
			capture_output=True,
			text=True,
			check=False,
		)
	except FileNotFoundError:
		return None
	if result.returncode != 0:
		return None
	for line in result.stdout.splitlines():
		line = line.strip()
		if line.endswith(".app"):
			return Path(line)
	return None


def read_bundle_identifier(app_path: Path) -> str | None:
	"""
	Read CFBundleIdentifier from an application bundle.

	Args:
		app_path: Path to a .app bundle.

	Returns:
		Bundle identifier or None.
	"""
	info_plist = app_path / "Contents" / "Info.plist"
	if not info_plist.is_file():
		return None
	try:
		with info_plist.open("rb") as handle:
			info = plistlib.load(handle)
	except (OSError, plistlib.InvalidFileException, ValueError):
		logger.info("Unreadable Info.plist at %s", info_plist)
		return None
	value = info.get("CFBundleIdentifier")
	if not value:
		return None
	return str(value)


#============================================


class OSXApplicationFinder:
	"""
	Application finder backed by Spotlight with a bundle scan fallback.
	"""

	#============================================
	def __init__(self, application_dirs: list[Path] | None = None) -> None:
		if application_dirs is None:
			application_dirs = [Path(p) for p in DEFAULT_APPLICATION_DIRS]
		self.application_dirs = [p.expanduser() for p in application_dirs]

	#============================================
	def find_application(self, bundle_identifier: str) -> Path | None:
		"""
		Find an installed application.

		Args:
			bundle_identifier: CFBundleIdentifier to match.

		Returns:
			Application path or None when not installed.
		"""
		found = mdfind_bundle(bundle_identifier)
		if found:
			logger.info("Spotlight found %s at %s", bundle_identifier, found)
			return found
		found = self._scan_bundles(bundle_identifier)
		if found:
			logger.info("Found %s at %s", bundle_identifier, found)
		else:
			logger.info("No application installed for %s", bundle_identifier)
		return found

	#============================================
	def _scan_bundles(self, bundle_identifier: str) -> Path | None:
		for folder in self.application_dirs:
			if not folder.is_dir():
				continue
			for app_path in sorted(folder.glob("*.app")):
				if read_bundle_identifier(app_path) == bundle_identifier:
					return app_path
		return None
