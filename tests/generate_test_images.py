#!/usr/bin/env python3
"""
Generate small, deterministic snapshot images (reference, failed, diff).
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageChops, ImageDraw


def _write_snapshot(path: Path, accent: tuple[int, int, int]) -> Image.Image:
	image = Image.new("RGB", (32, 32), color=(255, 255, 255))
	draw = ImageDraw.Draw(image)
	draw.rectangle((8, 8, 23, 23), fill=accent)
	image.save(path)
	return image


def generate_snapshot_images(output_dir: Path) -> dict[str, Path]:
	"""
	Write a reference/failed pair and the diff between them.
	"""
	output_dir.mkdir(parents=True, exist_ok=True)
	paths = {
		"reference": output_dir / "referenceImage.png",
		"failed": output_dir / "failedImage.png",
		"diff": output_dir / "diffImage.png",
	}
	reference = _write_snapshot(paths["reference"], (220, 50, 50))
	failed = _write_snapshot(paths["failed"], (50, 200, 80))
	ImageChops.difference(reference, failed).save(paths["diff"])
	return paths


def main() -> None:
	generate_snapshot_images(Path("tests/test_files"))


if __name__ == "__main__":
	main()
