#!/usr/bin/env python3
"""
Snapshot test result models handed to external viewers.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

#============================================


@dataclass(frozen=True, slots=True)
class SnapshotTestInformation:
	"""
	Identifies the test that produced a snapshot result.

	Attributes:
		test_class_name: Test case class name.
		test_name: Test method name.
		test_file_path: Source file of the test.
		test_line_number: Line of the failing assertion.
	"""
	test_class_name: str
	test_name: str
	test_file_path: str
	test_line_number: int


@dataclass(frozen=True, slots=True)
class Build:
	"""
	Application build the snapshot tests ran against.

	Attributes:
		date: Build timestamp.
		application_name: Name of the application under test.
		reference_image_directories: Folders holding reference images.
	"""
	date: datetime
	application_name: str
	reference_image_directories: tuple[Path, ...] = field(default_factory=tuple)


#============================================


@dataclass(frozen=True, slots=True)
class RecordedSnapshotTestResult:
	"""
	A snapshot that was recorded as the new reference image.
	"""
	test_information: SnapshotTestInformation
	reference_image_path: str
	build: Build

	@property
	def status(self) -> str:
		return "recorded"


@dataclass(frozen=True, slots=True)
class FailedSnapshotTestResult:
	"""
	A snapshot that did not match its reference image.
	"""
	test_information: SnapshotTestInformation
	reference_image_path: str
	diff_image_path: str
	failed_image_path: str
	build: Build

	@property
	def status(self) -> str:
		return "failed"


SnapshotTestResult = RecordedSnapshotTestResult | FailedSnapshotTestResult


#============================================


def viewable_result(result: SnapshotTestResult) -> FailedSnapshotTestResult | None:
	"""
	Narrow a result to the failed variant.

	Args:
		result: Any snapshot test result.

	Returns:
		The failed result, or None when the result has no failure images.
	"""
	if isinstance(result, FailedSnapshotTestResult):
		return result
	return None
