"""GIF assembly from a folder of rendered frames."""

import logging
from pathlib import Path

from PIL import Image

from ..errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_GIF_SIZE = (1500, 1500)
DEFAULT_FRAME_DELAY_MS = 250


def assemble_gif(
    frames_dir: Path,
    output: Path,
    size: tuple[int, int] = DEFAULT_GIF_SIZE,
    delay_ms: int = DEFAULT_FRAME_DELAY_MS,
) -> int:
    """Assemble every PNG in ``frames_dir`` into one animated GIF.

    Frames are taken in sorted file-name order and resized to ``size``.
    The GIF plays once.

    Args:
        frames_dir: Directory holding ``*.png`` frames
        output: Path of the GIF to write
        size: Output dimensions (width, height)
        delay_ms: Delay between frames in milliseconds

    Returns:
        Number of frames written

    Raises:
        ConfigError: If the directory is missing or holds no PNG frames
    """
    frames_dir = Path(frames_dir)
    if not frames_dir.is_dir():
        raise ConfigError(f"Frames directory '{frames_dir}' does not exist")

    paths = sorted(frames_dir.glob("*.png"))
    if not paths:
        raise ConfigError(f"No PNG frames found in '{frames_dir}'")

    frames = []
    for path in paths:
        with Image.open(path) as img:
            frames.append(img.convert("RGB").resize(size))

    logger.info(f"[GIF] writing {len(frames)} frames to {output}")
    frames[0].save(
        output,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=delay_ms,
    )
    return len(frames)
