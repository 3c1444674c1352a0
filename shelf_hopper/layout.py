import logging
import operator
from collections import namedtuple


logger = logging.getLogger(__name__)


class ShelfPosition(namedtuple("ShelfPosition", ["level", "start", "end"])):
    """A horizontal shelf at an integer level spanning the grid interval [start, end]."""

    __slots__ = ()

    def __new__(cls, level, start, end):
        # operator.index rejects floats instead of truncating them.
        level, start, end = operator.index(level), operator.index(start), operator.index(end)
        if level < 0:
            raise ValueError(f"shelf level must be >= 0, got {level}")
        if start >= end:
            raise ValueError(f"shelf start must be < end, got start={start} end={end}")
        return super().__new__(cls, level, start, end)

    @property
    def span_sum(self):
        # Twice the midpoint; vertical moves compare these sums directly.
        return self.start + self.end

    def overlaps(self, other):
        return self.level == other.level and self.start < other.end and other.start < self.end


class ShelfLayout:
    """
    Read-only catalog of shelves plus the grid parameters the renderer needs.

    Shelves keep the order they were given in; "layout order" everywhere in
    the package means this order.
    """

    def __init__(self, level_count, width, shelves):
        level_count, width = operator.index(level_count), operator.index(width)
        if level_count <= 0:
            raise ValueError(f"level_count must be > 0, got {level_count}")
        if width <= 0:
            raise ValueError(f"width must be > 0, got {width}")

        shelves = tuple(s if isinstance(s, ShelfPosition) else ShelfPosition(*s) for s in shelves)
        if not shelves:
            raise ValueError("a layout needs at least one shelf")

        seen = set()
        for shelf in shelves:
            if shelf.level >= level_count:
                raise ValueError(f"{shelf} is above the top level {level_count - 1}")
            if shelf in seen:
                raise ValueError(f"duplicate shelf {shelf}")
            seen.add(shelf)

        self._level_count = level_count
        self._width = width
        self._shelves = shelves
        self._members = frozenset(seen)
        self._by_level = {}
        for shelf in shelves:
            self._by_level.setdefault(shelf.level, []).append(shelf)
        self._by_level = {level: tuple(row) for level, row in self._by_level.items()}

        for row in self._by_level.values():
            for i, a in enumerate(row):
                for b in row[i + 1:]:
                    if a.overlaps(b):
                        logger.warning("Overlapping shelves on level %d: %s and %s", a.level, a, b)

    @classmethod
    def from_config(cls, config):
        """
        Build a layout from a plain mapping:
        {"level_count": 6, "width": 32, "shelves": [[0, -8, 8], {"level": 1, "start": 3, "end": 7}]}
        """
        try:
            level_count = config["level_count"]
            width = config["width"]
            raw_shelves = config["shelves"]
        except KeyError as exc:
            raise ValueError(f"layout config is missing {exc.args[0]!r}") from exc

        shelves = []
        for entry in raw_shelves:
            if isinstance(entry, dict):
                shelves.append(ShelfPosition(entry["level"], entry["start"], entry["end"]))
            else:
                shelves.append(ShelfPosition(*entry))
        return cls(level_count, width, shelves)

    @property
    def level_count(self):
        return self._level_count

    @property
    def width(self):
        return self._width

    @property
    def shelves(self):
        return self._shelves

    @property
    def top_level(self):
        return self._level_count - 1

    @property
    def initial_shelf(self):
        return self._shelves[0]

    def shelves_at_level(self, level):
        return self._by_level.get(level, ())

    def levels(self):
        return sorted(self._by_level)

    def __contains__(self, shelf):
        return shelf in self._members

    def __iter__(self):
        return iter(self._shelves)

    def __len__(self):
        return len(self._shelves)

    def __repr__(self):
        return f"ShelfLayout(level_count={self._level_count}, width={self._width}, shelves={len(self._shelves)})"


DEFAULT_LAYOUT = ShelfLayout(
    level_count=6,
    width=32,
    shelves=[
        ShelfPosition(0, -8, 8),
        ShelfPosition(1, -12, 1),
        ShelfPosition(1, 3, 7),
        ShelfPosition(2, -3, 9),
        ShelfPosition(3, -7, 3),
        ShelfPosition(3, 5, 9),
        ShelfPosition(4, 1, 4),
        ShelfPosition(5, -7, -3),
        ShelfPosition(5, -1, 2),
        ShelfPosition(5, 5, 8),
    ],
)
