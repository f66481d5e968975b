"""Reading rectangular patches of raw RGB565 images stored on disk."""

from dataclasses import dataclass
from os import PathLike
from typing import List, Tuple, Union


@dataclass(frozen=True)
class LcdImage:
    """A raw image of big-endian RGB565 pixels, stored row by row."""

    file_name: Union[str, PathLike]
    ncols: int
    nrows: int

    def read_patch(self, icol: int, irow: int, width: int, height: int) -> List[List[int]]:
        """Return ``height`` rows of ``width`` pixels starting at column ``icol``, row ``irow``.

        Raises FileNotFoundError when the image file is missing and OSError
        when the file ends before the patch does.
        """
        rows: List[List[int]] = []
        with open(self.file_name, "rb") as file:
            for row in range(height):
                file.seek((irow + row) * 2 * self.ncols + icol * 2)
                data = file.read(2 * width)
                if len(data) != 2 * width:
                    raise OSError(
                        f"short read from {self.file_name!s} at row {irow + row}"
                    )
                rows.append(
                    [int.from_bytes(data[i : i + 2], "big") for i in range(0, len(data), 2)]
                )
        return rows


def rgb565_to_rgb(pixel: int) -> Tuple[int, int, int]:
    """Expand a 16-bit RGB565 pixel into an 8-bit-per-channel RGB triple."""
    red = (pixel >> 11) & 0x1F
    green = (pixel >> 5) & 0x3F
    blue = pixel & 0x1F
    return (red << 3) | (red >> 2), (green << 2) | (green >> 4), (blue << 3) | (blue >> 2)