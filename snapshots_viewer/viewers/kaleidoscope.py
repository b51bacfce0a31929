#!/usr/bin/env python3
from __future__ import annotations

# local repo modules
from ..launcher import ProcessLauncher
from ..models import FailedSnapshotTestResult, SnapshotTestResult, viewable_result
from .base import ExternalViewer

#============================================


class KaleidoscopeViewer(ExternalViewer):
	"""
	Opens failed snapshots as a reference/failed pair in Kaleidoscope.
	"""

	name = "Kaleidoscope"
	bundle_id = "com.blackpixel.kaleidoscope"
	ksdiff_path = "/usr/local/bin/ksdiff"

	#============================================
	def __init__(self, ksdiff_path: str | None = None) -> None:
		if ksdiff_path:
			self.ksdiff_path = ksdiff_path

	#============================================
	def can_view(self, result: SnapshotTestResult) -> bool:
		return isinstance(result, FailedSnapshotTestResult)

	#============================================
	def view(self, result: SnapshotTestResult, launcher: ProcessLauncher) -> None:
		"""
		Launch ksdiff with the reference and failed images.

		Args:
			result: Failed snapshot test result.
			launcher: Process launcher used to start ksdiff.
		"""
		self._require_viewable(result)
		failed = viewable_result(result)
		launcher.launch_process(
			self.ksdiff_path,
			[failed.reference_image_path, failed.failed_image_path],
		)
