#!/usr/bin/env python3
from __future__ import annotations

# local repo modules
from ..launcher import ProcessLauncher
from ..models import SnapshotTestResult
from .base import ExternalViewer

#============================================


class XcodeViewer(ExternalViewer):
	"""
	Jumps to the snapshot test's source line in Xcode.
	"""

	name = "Xcode"
	bundle_id = "com.apple.dt.Xcode"
	xed_path = "/usr/bin/xed"

	#============================================
	def __init__(self, xed_path: str | None = None) -> None:
		if xed_path:
			self.xed_path = xed_path

	#============================================
	def can_view(self, result: SnapshotTestResult) -> bool:
		"""
		Any result pointing at a test source file can be opened.
		"""
		return bool(result.test_information.test_file_path)

	#============================================
	def view(self, result: SnapshotTestResult, launcher: ProcessLauncher) -> None:
		self._require_viewable(result)
		info = result.test_information
		launcher.launch_process(
			self.xed_path,
			["--line", str(info.test_line_number), info.test_file_path],
		)
