#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from typing import TYPE_CHECKING

from .base import ExternalViewer, ViewerContractError, ViewerRegistry
from .kaleidoscope import KaleidoscopeViewer
from .xcode import XcodeViewer

if TYPE_CHECKING:
	from ..config import AppConfig

__all__ = [
	"ExternalViewer",
	"KaleidoscopeViewer",
	"ViewerContractError",
	"ViewerRegistry",
	"XcodeViewer",
	"build_registry",
]


def build_registry(config: AppConfig | None = None) -> ViewerRegistry:
	"""
	Build default viewer registry.

	Args:
		config: Optional config with tool path overrides.

	Returns:
		ViewerRegistry with registered viewers.
	"""
	ksdiff_path = config.ksdiff_path if config else None
	xed_path = config.xed_path if config else None
	registry = ViewerRegistry()
	registry.register(KaleidoscopeViewer(ksdiff_path=ksdiff_path))
	registry.register(XcodeViewer(xed_path=xed_path))
	return registry
