#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
import json

# PIP3 modules
import yaml

# local repo modules
from .finder import DEFAULT_APPLICATION_DIRS

#============================================


def _default_application_dirs() -> list[Path]:
	return [Path(p) for p in DEFAULT_APPLICATION_DIRS]


#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime configuration settings.

	Attributes:
		ksdiff_path: Kaleidoscope command line tool.
		xed_path: Xcode command line opener.
		application_dirs: Folders scanned when Spotlight finds nothing.
		preferred_viewer: Viewer name tried before the registry order.
		dry_run: Only print the command that would run.
		verbose: INFO level logging.
		config_path: Optional user config path.
	"""
	ksdiff_path: str = "/usr/local/bin/ksdiff"
	xed_path: str = "/usr/bin/xed"
	application_dirs: list[Path] = field(default_factory=_default_application_dirs)
	preferred_viewer: str | None = None
	dry_run: bool = False
	verbose: bool = False
	config_path: Path | None = None

	#============================================
	def normalized_application_dirs(self) -> list[Path]:
		"""
		Normalize application folders.

		Returns:
			List of expanded Path objects.
		"""
		return [folder.expanduser() for folder in self.application_dirs]

	#============================================
	def apply_user_config(self, user_cfg: dict) -> None:
		"""
		Merge values loaded from a config file.

		Args:
			user_cfg: Dictionary from load_user_config.
		"""
		if user_cfg.get("ksdiff_path"):
			self.ksdiff_path = str(user_cfg["ksdiff_path"])
		if user_cfg.get("xed_path"):
			self.xed_path = str(user_cfg["xed_path"])
		if user_cfg.get("application_dirs"):
			self.application_dirs = [Path(p) for p in user_cfg["application_dirs"]]
		if user_cfg.get("preferred_viewer"):
			self.preferred_viewer = str(user_cfg["preferred_viewer"])
		if "dry_run" in user_cfg:
			self.dry_run = bool(user_cfg.get("dry_run"))


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"}:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = yaml.safe_load(handle)
	else:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = json.load(handle)
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ValueError(f"Config {config_path} must hold a mapping at the top level")
	return loaded
