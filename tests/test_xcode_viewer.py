#!/usr/bin/env python3
"""
Tests for the Xcode viewer.
"""

from dataclasses import replace

import pytest

from snapshots_viewer.viewers import ViewerContractError, XcodeViewer
from conftest import ProcessLauncherMock, make_failed_result, make_recorded_result


def test_xcode_constants():
	assert XcodeViewer.name == "Xcode"
	assert XcodeViewer.bundle_id == "com.apple.dt.Xcode"


def test_can_view_any_result_with_test_file():
	viewer = XcodeViewer()
	assert viewer.can_view(make_recorded_result())
	assert viewer.can_view(make_failed_result())


def test_view_opens_test_file_at_line():
	launcher = ProcessLauncherMock()
	XcodeViewer().view(make_recorded_result(), launcher)
	assert launcher.launched_process_path == "/usr/bin/xed"
	assert launcher.launched_process_arguments == ["--line", "1", "testFilePath"]


def test_view_without_test_file_raises():
	result = make_failed_result()
	info = replace(result.test_information, test_file_path="")
	result = replace(result, test_information=info)
	viewer = XcodeViewer()
	assert viewer.can_view(result) is False
	with pytest.raises(ViewerContractError):
		viewer.view(result, ProcessLauncherMock())
