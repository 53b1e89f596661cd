# In-memory open-addressing hash table for integer keys.
# Uses linear probing over parallel slot arrays and mmh3 for hashing.

import struct
from typing import Iterator, Optional

import mmh3

MIN_SLOTS_POWER = 3
DEFAULT_LOAD_FACTOR = 0.75

# keys are hashed over their signed 64-bit little-endian encoding
KEY_STRUCT = struct.Struct("<q")

FLAG_EMPTY = 0
FLAG_OCCUPIED = 1


def hash_key(key: int, seed: int = 0) -> int:
    """Unsigned 32-bit murmur3 hash of an integer key."""
    try:
        kb = KEY_STRUCT.pack(key)
    except struct.error:
        raise ValueError(f"key out of signed 64-bit range: {key!r}") from None
    return mmh3.hash(kb, seed=seed, signed=False)


class IntHashTable:
    def __init__(
        self,
        num_slots_power: int = MIN_SLOTS_POWER,
        max_load_factor: float = DEFAULT_LOAD_FACTOR,
        seed: int = 0,
    ):
        """
        num_slots_power: start with 2**num_slots_power slots (must be >= 3)
        max_load_factor: grow once occupied/slots would exceed this
        seed: murmur3 seed
        """
        if num_slots_power < MIN_SLOTS_POWER:
            raise ValueError(f"num_slots_power must be >= {MIN_SLOTS_POWER}")
        if not (0 < max_load_factor < 1):
            raise ValueError("max_load_factor must be between 0 and 1")

        self.max_load_factor = max_load_factor
        self.seed = seed
        self._allocate(1 << num_slots_power)
        self.resize_count = 0

    def _allocate(self, num_slots: int) -> None:
        self.num_slots = num_slots
        self.capacity_mask = num_slots - 1
        self._flags = bytearray(num_slots)
        self._keys: list[Optional[int]] = [None] * num_slots
        self._values: list[Optional[int]] = [None] * num_slots
        self._count = 0

    @property
    def load_factor(self) -> float:
        return self._count / self.num_slots

    def _find_slot(self, key: int) -> int:
        """Return the slot holding key, or the empty slot where it belongs."""
        start = idx = hash_key(key, self.seed) & self.capacity_mask
        while True:
            if self._flags[idx] == FLAG_EMPTY or self._keys[idx] == key:
                return idx
            idx = (idx + 1) & self.capacity_mask
            if idx == start:
                raise RuntimeError("Hash table is full; need resize")

    def _grow(self) -> None:
        old_flags, old_keys, old_values = self._flags, self._keys, self._values
        self._allocate(self.num_slots * 2)
        for flag, key, value in zip(old_flags, old_keys, old_values):
            if flag == FLAG_OCCUPIED:
                idx = self._find_slot(key)
                self._flags[idx] = FLAG_OCCUPIED
                self._keys[idx] = key
                self._values[idx] = value
                self._count += 1
        self.resize_count += 1

    def _insert_slot(self, key: int) -> int:
        """Find the slot for key, growing first if a new key would overload."""
        idx = self._find_slot(key)
        if self._flags[idx] == FLAG_EMPTY:
            if (self._count + 1) / self.num_slots > self.max_load_factor:
                self._grow()
                idx = self._find_slot(key)
            self._flags[idx] = FLAG_OCCUPIED
            self._keys[idx] = key
            self._values[idx] = 0
            self._count += 1
        return idx

    def contains(self, key: int) -> bool:
        idx = self._find_slot(key)
        return self._flags[idx] == FLAG_OCCUPIED

    def add(self, key: int) -> bool:
        """
        Insert key. Return True if inserted, False if already present.
        """
        before = self._count
        self._insert_slot(key)
        return self._count > before

    def get(self, key: int, default: Optional[int] = None) -> Optional[int]:
        idx = self._find_slot(key)
        if self._flags[idx] == FLAG_OCCUPIED:
            return self._values[idx]
        return default

    def put(self, key: int, value: int) -> None:
        idx = self._insert_slot(key)
        self._values[idx] = value

    def increment(self, key: int, amount: int = 1) -> int:
        """Add amount to the value stored under key (absent keys start at 0)."""
        idx = self._insert_slot(key)
        self._values[idx] += amount
        return self._values[idx]

    def __getitem__(self, key: int) -> int:
        idx = self._find_slot(key)
        if self._flags[idx] != FLAG_OCCUPIED:
            raise KeyError(key)
        return self._values[idx]

    def values(self) -> Iterator[int]:
        for flag, value in zip(self._flags, self._values):
            if flag == FLAG_OCCUPIED:
                yield value

    def keys(self) -> Iterator[int]:
        for flag, key in zip(self._flags, self._keys):
            if flag == FLAG_OCCUPIED:
                yield key

    def items(self) -> Iterator[tuple[int, int]]:
        for flag, key, value in zip(self._flags, self._keys, self._values):
            if flag == FLAG_OCCUPIED:
                yield key, value

    def to_dict(self) -> dict[int, int]:
        return dict(self.items())

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[int]:
        return self.keys()

    def __len__(self) -> int:
        return self._count
