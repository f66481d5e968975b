"""Restaurant records, block-cached record storage and distance computation."""

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, List, Optional, Union

from .geo import lat_to_y, lon_to_x

RECORD_SIZE = 64
BLOCK_SIZE = 512
RECORDS_PER_BLOCK = BLOCK_SIZE // RECORD_SIZE
NUM_RESTAURANTS = 1066
NAME_SIZE = 55

_RECORD = struct.Struct(f"<iiB{NAME_SIZE}s")


@dataclass(frozen=True)
class Restaurant:
    """One restaurant: position in 1e-5 degrees, rating 0..10 and name."""

    lat: int
    lon: int
    rating: int
    name: str

    @classmethod
    def from_bytes(cls, data: bytes) -> "Restaurant":
        """Decode a 64-byte record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a restaurant record is {RECORD_SIZE} bytes, got {len(data)}")
        lat, lon, rating, raw_name = _RECORD.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("latin-1")
        return cls(lat, lon, rating, name)

    def to_bytes(self) -> bytes:
        """Encode as a 64-byte record."""
        raw_name = self.name.encode("latin-1")
        if len(raw_name) > NAME_SIZE:
            raise ValueError(f"name longer than {NAME_SIZE} bytes")
        if not 0 <= self.rating <= 0xFF:
            raise ValueError("rating must fit in one byte")
        return _RECORD.pack(self.lat, self.lon, self.rating, raw_name)


@dataclass
class RestDist:
    """A restaurant index paired with its distance from a point."""

    index: int
    dist: int


class RestaurantStore:
    """Reads restaurant records from a file in 512-byte blocks, caching the last block."""

    def __init__(
        self,
        path: Union[str, PathLike],
        start_block: int = 0,
        count: Optional[int] = None,
    ) -> None:
        self._file = open(path, "rb")
        self._start_block = start_block
        if count is None:
            self._file.seek(0, 2)
            available = self._file.tell() - start_block * BLOCK_SIZE
            count = max(available, 0) // RECORD_SIZE
        self._count = count
        self._cached_block: Optional[int] = None
        self._cache: List[Restaurant] = []

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Restaurant]:
        return (self.get(i) for i in range(self._count))

    def __enter__(self) -> "RestaurantStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _load_block(self, block: int) -> None:
        self._file.seek((self._start_block + block) * BLOCK_SIZE)
        data = self._file.read(BLOCK_SIZE)
        whole = len(data) - len(data) % RECORD_SIZE
        self._cache = [
            Restaurant.from_bytes(data[off : off + RECORD_SIZE])
            for off in range(0, whole, RECORD_SIZE)
        ]
        self._cached_block = block

    def get(self, index: int) -> Restaurant:
        """Return the restaurant with the given index."""
        if not 0 <= index < self._count:
            raise IndexError(f"restaurant index {index} out of range")
        block, slot = divmod(index, RECORDS_PER_BLOCK)
        if self._cached_block != block:
            self._load_block(block)
        if slot >= len(self._cache):
            raise OSError(f"record {index} missing from storage")
        return self._cache[slot]

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()


def star_rating(rating: int) -> int:
    """Convert a 0..10 rating into a 1..5 star rating."""
    return max((rating + 1) // 2, 1)


def distances(store, map_x: int, map_y: int, min_rating: int) -> List[RestDist]:
    """Manhattan distances from a map point to every restaurant rated at least ``min_rating`` stars."""
    result = []
    for index in range(len(store)):
        rest = store.get(index)
        if star_rating(rest.rating) >= min_rating:
            dist = abs(map_x - lon_to_x(rest.lon)) + abs(map_y - lat_to_y(rest.lat))
            result.append(RestDist(index, dist & 0xFFFF))
    return result