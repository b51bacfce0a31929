"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()

from snapshots_viewer.models import (  # noqa: E402
	Build,
	FailedSnapshotTestResult,
	RecordedSnapshotTestResult,
	SnapshotTestInformation,
)


class ProcessLauncherMock:
	"""
	Test-only launcher that records the last launch.
	"""

	def __init__(self) -> None:
		self.launched_process_path: str | None = None
		self.launched_process_arguments: list[str] | None = None
		self.launch_count = 0

	def launch_process(self, launch_path: str, arguments: list[str] | None = None) -> None:
		self.launched_process_path = launch_path
		self.launched_process_arguments = arguments
		self.launch_count += 1


class ApplicationFinderMock:
	"""
	Test-only finder returning a fixed location per bundle id.
	"""

	def __init__(self, locations: dict[str, Path] | None = None) -> None:
		self.locations = dict(locations or {})
		self.application_url: Path | None = None

	def find_application(self, bundle_identifier: str) -> Path | None:
		if bundle_identifier in self.locations:
			return self.locations[bundle_identifier]
		return self.application_url


def make_build() -> Build:
	return Build(
		date=datetime.now(),
		application_name="MyApp",
		reference_image_directories=(Path("foo/bar"),),
	)


def make_test_information() -> SnapshotTestInformation:
	return SnapshotTestInformation(
		test_class_name="ExampleTestClass",
		test_name="testName",
		test_file_path="testFilePath",
		test_line_number=1,
	)


def make_recorded_result() -> RecordedSnapshotTestResult:
	return RecordedSnapshotTestResult(
		test_information=make_test_information(),
		reference_image_path="foo/bar/referenceImage.png",
		build=make_build(),
	)


def make_failed_result() -> FailedSnapshotTestResult:
	return FailedSnapshotTestResult(
		test_information=make_test_information(),
		reference_image_path="foo/bar/referenceImage.png",
		diff_image_path="foo/bar/diffImage.png",
		failed_image_path="foo/bar/failedImage.png",
		build=make_build(),
	)
