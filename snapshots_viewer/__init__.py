"""
snapshots_viewer
================

Open snapshot test results in external diff tools on macOS.
"""

__all__ = [
	"config",
	"finder",
	"launcher",
	"models",
	"viewers",
]
