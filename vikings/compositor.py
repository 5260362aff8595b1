"""Viking image compositing with Pillow.

Layers are stacked at the origin in AssetSpecification.layers() order on a
transparent canvas sized to the largest part, then resized to a fixed square
and written to {output_dir}/viking_{number}.png.

The composite is written to a temporary file in the output directory and
moved into place with os.replace, so the canonical path only ever holds a
complete image. Concurrent writers for the same number: last replace wins.
"""

import logging
import os
import tempfile
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import CompositeError, MissingAssetError
from .specification import AssetSpecification, image_file_name

logger = logging.getLogger(__name__)

IMAGE_SIZE = (1024, 1024)


def output_path(output_dir: Path, number: int) -> Path:
    return output_dir / image_file_name(number)


def missing_assets(spec: AssetSpecification) -> list[Path]:
    return [path for _, path in spec.layers() if not path.is_file()]


def _mosaic(paths: list[Path]) -> Image.Image:
    parts = []
    for path in paths:
        with Image.open(path) as img:
            parts.append(img.convert("RGBA"))
    width = max(p.width for p in parts)
    height = max(p.height for p in parts)
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    for part in parts:
        canvas.alpha_composite(part, (0, 0))
    return canvas


def compose_image(spec: AssetSpecification, output_dir: Path) -> Path:
    """Composite the Viking's parts and write the PNG. Returns the output path.

    Raises MissingAssetError (no file written) if any part is absent, and
    CompositeError if Pillow cannot read or write an image.
    """
    missing = missing_assets(spec)
    if missing:
        raise MissingAssetError(missing, number=spec.number)

    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_path(output_dir, spec.number)
    layer_paths = [path for _, path in spec.layers()]
    logger.debug("composing viking=%d layers=%d", spec.number, len(layer_paths))

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.stem}-", suffix=".png", dir=output_dir)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            image = _mosaic(layer_paths).resize(IMAGE_SIZE, Image.Resampling.LANCZOS)
            image.save(fh, format="PNG")
        os.replace(tmp_path, target)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        tmp_path.unlink(missing_ok=True)
        raise CompositeError(f"Compositing failed: {e}", number=spec.number, path=target) from e
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("composed viking=%d path=%s", spec.number, target)
    return target
