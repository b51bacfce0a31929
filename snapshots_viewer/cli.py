#!/usr/bin/env python3
"""
Command line interface for snapshots-viewer.
"""

# Standard Library
import argparse
import logging
from datetime import datetime
from pathlib import Path
import sys

# local repo modules
from .config import AppConfig, load_user_config
from .finder import OSXApplicationFinder
from .launcher import SubprocessLauncher
from .models import (
	Build,
	FailedSnapshotTestResult,
	RecordedSnapshotTestResult,
	SnapshotTestInformation,
	SnapshotTestResult,
)
from .viewers import ViewerRegistry, build_registry

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Open a snapshot test result in an external viewer."
	)
	parser.add_argument(
		"-r",
		"--reference",
		dest="reference",
		required=True,
		help="Reference image path (required).",
	)
	parser.add_argument(
		"-f",
		"--failed",
		dest="failed",
		help="Failed image path; marks the result as failed.",
	)
	parser.add_argument(
		"--diff",
		dest="diff",
		default="",
		help="Diff image path for a failed result.",
	)
	parser.add_argument("--test-class", dest="test_class", default="")
	parser.add_argument("--test-name", dest="test_name", default="")
	parser.add_argument("--test-file", dest="test_file", default="")
	parser.add_argument("--line", dest="line", type=int, default=0)
	parser.add_argument(
		"--app-name",
		dest="app_name",
		default="",
		help="Application name of the build under test.",
	)
	parser.add_argument(
		"-w",
		"--viewer",
		dest="viewer",
		help="Viewer name to use (default: first installed viewer).",
	)
	parser.add_argument(
		"-l",
		"--list",
		dest="list_viewers",
		action="store_true",
		help="List viewers and whether they can open the result.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML config file.",
	)
	parser.add_argument(
		"-n",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		help="Print the command instead of launching it.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	parser.set_defaults(dry_run=False)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args and file.
	"""
	config = AppConfig()
	if args.config_path:
		config.config_path = Path(args.config_path).expanduser()
		config.apply_user_config(load_user_config(config.config_path))
	if args.dry_run:
		config.dry_run = True
	config.verbose = args.verbose
	return config


#============================================


def build_result(args: argparse.Namespace) -> SnapshotTestResult:
	"""
	Build a snapshot test result from CLI paths.

	Args:
		args: Parsed arguments.

	Returns:
		Failed result when a failed image is given, else recorded.
	"""
	info = SnapshotTestInformation(
		test_class_name=args.test_class,
		test_name=args.test_name,
		test_file_path=args.test_file,
		test_line_number=args.line,
	)
	reference = args.reference
	build = Build(
		date=datetime.now(),
		application_name=args.app_name,
		reference_image_directories=(Path(reference).parent,),
	)
	if args.failed:
		return FailedSnapshotTestResult(
			test_information=info,
			reference_image_path=reference,
			diff_image_path=args.diff,
			failed_image_path=args.failed,
			build=build,
		)
	return RecordedSnapshotTestResult(
		test_information=info,
		reference_image_path=reference,
		build=build,
	)


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


class DryRunLauncher:
	"""
	Launcher that prints the command instead of starting it.
	"""

	def __init__(self) -> None:
		self.commands: list[list[str]] = []

	def launch_process(self, launch_path: str, arguments: list[str] | None = None) -> None:
		command = [launch_path, *(arguments or [])]
		self.commands.append(command)
		print(f"{_color('[DRY RUN]', '33')} {' '.join(command)}")


#============================================


def list_viewers(
	registry: ViewerRegistry, result: SnapshotTestResult, finder: OSXApplicationFinder
) -> None:
	"""
	Print each viewer with its view and install status.
	"""
	for viewer in registry.viewers():
		can_view = "yes" if viewer.can_view(result) else "no"
		installed = "yes" if viewer.is_available(finder) else "no"
		print(
			f"{_color('[INFO]', '34')} {viewer.name} ({viewer.bundle_id}) "
			f"can_view={can_view} installed={installed}"
		)


#============================================


def open_with_preference(
	registry: ViewerRegistry,
	result: SnapshotTestResult,
	finder: OSXApplicationFinder,
	launcher,
	config: AppConfig,
	viewer_name: str | None,
):
	"""
	Open the result, trying the configured preferred viewer first.

	Returns:
		The viewer that was used.
	"""
	if viewer_name:
		return registry.open_result(result, finder, launcher, name=viewer_name)
	if config.preferred_viewer:
		try:
			return registry.open_result(
				result, finder, launcher, name=config.preferred_viewer
			)
		except LookupError as exc:
			logging.warning("Preferred viewer unusable (%s); trying others", exc)
	return registry.open_result(result, finder, launcher)


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	try:
		config = build_config(args)
	except ValueError as exc:
		print(f"{_color('[ERROR]', '31')} {exc}")
		return 2
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	result = build_result(args)
	registry = build_registry(config)
	finder = OSXApplicationFinder(config.normalized_application_dirs())
	if args.list_viewers:
		list_viewers(registry, result, finder)
		return 0
	launcher = DryRunLauncher() if config.dry_run else SubprocessLauncher()
	try:
		viewer = open_with_preference(
			registry, result, finder, launcher, config, args.viewer
		)
	except LookupError as exc:
		print(f"{_color('[ERROR]', '31')} {exc}")
		return 1
	if config.dry_run:
		return 0
	if launcher.failed_paths:
		print(
			f"{_color('[ERROR]', '31')} {viewer.name} could not start "
			f"{', '.join(launcher.failed_paths)}"
		)
		return 1
	print(f"{_color('[LAUNCH]', '32')} Opened {result.status} result in {viewer.name}")
	return 0


#============================================


if __name__ == "__main__":
	sys.exit(main())
