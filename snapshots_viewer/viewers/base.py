#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
import logging

# local repo modules
from ..finder import ApplicationFinder
from ..launcher import ProcessLauncher
from ..models import SnapshotTestResult

logger = logging.getLogger(__name__)

#============================================


class ViewerContractError(AssertionError):
	"""
	Raised when a viewer is asked to open a result it cannot view.
	"""


class ExternalViewer:
	"""
	Base interface for external snapshot viewers.
	"""

	name: str = "base"
	bundle_id: str = ""

	#============================================
	def can_view(self, result: SnapshotTestResult) -> bool:
		"""
		Determine if this viewer can visualize the result.

		Args:
			result: Snapshot test result.

		Returns:
			True if supported.
		"""
		return False

	#============================================
	def is_available(self, application_finder: ApplicationFinder) -> bool:
		"""
		Check whether the viewer application is installed.

		Args:
			application_finder: Finder used to look up bundle_id.

		Returns:
			True when the finder returns a non-empty location.
		"""
		location = application_finder.find_application(self.bundle_id)
		if location is None:
			return False
		return str(location) not in ("", ".")

	#============================================
	def view(self, result: SnapshotTestResult, launcher: ProcessLauncher) -> None:
		"""
		Open the result in the external tool.

		Args:
			result: Snapshot test result accepted by can_view.
			launcher: Process launcher used to start the tool.
		"""
		raise NotImplementedError

	#============================================
	def _require_viewable(self, result: SnapshotTestResult) -> None:
		if not self.can_view(result):
			raise ViewerContractError(
				f"{self.name} cannot view a {result.status} snapshot test result"
			)


class ViewerRegistry:
	"""
	Registry for external viewers, in priority order.
	"""

	#============================================
	def __init__(self) -> None:
		self._viewers: list[ExternalViewer] = []

	#============================================
	def register(self, viewer: ExternalViewer) -> None:
		"""
		Register a viewer.

		Args:
			viewer: Viewer instance.
		"""
		self._viewers.append(viewer)

	#============================================
	def viewers(self) -> list[ExternalViewer]:
		"""
		Return all viewers.

		Returns:
			List of viewers.
		"""
		return list(self._viewers)

	#============================================
	def by_name(self, name: str) -> ExternalViewer:
		"""
		Find a viewer by display name, ignoring case.

		Args:
			name: Viewer name.

		Returns:
			Viewer instance.
		"""
		wanted = name.strip().lower()
		for viewer in self._viewers:
			if viewer.name.lower() == wanted:
				return viewer
		raise LookupError(f"No viewer registered with name {name!r}")

	#============================================
	def for_result(
		self, result: SnapshotTestResult, application_finder: ApplicationFinder
	) -> ExternalViewer:
		"""
		Find the first installed viewer that can view the result.

		Args:
			result: Snapshot test result.
			application_finder: Finder used for availability checks.

		Returns:
			Viewer instance.
		"""
		for viewer in self._viewers:
			if not viewer.can_view(result):
				continue
			if viewer.is_available(application_finder):
				return viewer
			logger.info("%s can view the result but is not installed", viewer.name)
		raise LookupError(f"No installed viewer can open a {result.status} result")

	#============================================
	def open_result(
		self,
		result: SnapshotTestResult,
		application_finder: ApplicationFinder,
		launcher: ProcessLauncher,
		name: str | None = None,
	) -> ExternalViewer:
		"""
		Run can_view, is_available and view for one viewer.

		Args:
			result: Snapshot test result.
			application_finder: Finder used for availability checks.
			launcher: Process launcher handed to the viewer.
			name: Optional viewer name; first match when None.

		Returns:
			The viewer that was used.
		"""
		if name is None:
			viewer = self.for_result(result, application_finder)
		else:
			viewer = self.by_name(name)
			if not viewer.can_view(result):
				raise LookupError(f"{viewer.name} cannot open a {result.status} result")
			if not viewer.is_available(application_finder):
				raise LookupError(f"{viewer.name} is not installed")
		viewer.view(result, launcher)
		return viewer
