"""Accounting memory pool: tracks allocations per user against a fixed budget."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

DEFAULT_TOTAL_BYTES = 4 * 1024 * 1024
DEFAULT_MAX_BLOCKS = 32 * 1024
DEFAULT_MAX_USERS = 256
USER_NAME_MAX_LEN = 16
DEFAULT_USER_NAME = "default"
DEFAULT_TRACKER_ENTRIES = 1024


class PoolError(Exception):
    """Raised when the pool cannot satisfy a request."""


@dataclass
class PoolUser:
    """A named consumer of pool memory."""

    name: str = ""
    enabled: bool = False


@dataclass(frozen=True)
class PoolStats:
    """Snapshot of pool usage; rates are in permille of the pool total."""

    total: int
    used: int
    used_rate: int
    residue: int
    residue_rate: int
    block_count: int
    malloc_count: int
    free_count: int
    user_used: dict[int, int] = field(default_factory=dict)
    user_used_rate: dict[int, int] = field(default_factory=dict)
    malloc_failed: dict[int, int] = field(default_factory=dict)


@dataclass
class _Block:
    handle: bytearray
    size: int
    user_id: int


class MemoryPool:
    """Hands out byte buffers while keeping per-user usage statistics."""

    def __init__(
        self,
        total_bytes: int = DEFAULT_TOTAL_BYTES,
        max_blocks: int = DEFAULT_MAX_BLOCKS,
        max_users: int = DEFAULT_MAX_USERS,
    ) -> None:
        if total_bytes <= 0 or max_blocks <= 0 or max_users <= 0:
            raise ValueError("pool limits must be positive")
        self.total_bytes = total_bytes
        self.max_blocks = max_blocks
        self.max_users = max_users
        self._blocks: dict[int, _Block] = {}
        self._users = [PoolUser() for _ in range(max_users)]
        self._malloc_failed = [0] * max_users
        self.malloc_count = 0
        self.free_count = 0
        self._users[self.default_user_id] = PoolUser(DEFAULT_USER_NAME, True)

    @property
    def default_user_id(self) -> int:
        return self.max_users - 1

    @property
    def users(self) -> list[PoolUser]:
        """Copies of the user table, indexed by user id."""
        return [PoolUser(u.name, u.enabled) for u in self._users]

    @property
    def used_bytes(self) -> int:
        return sum(block.size for block in self._blocks.values())

    def apply_user_id(self, name: str | None) -> int:
        """Register a user and return its id; falls back to the default user."""
        if name is None:
            self._users[self.default_user_id].enabled = True
            return self.default_user_id
        for user_id, user in enumerate(self._users):
            if not user.enabled:
                user.enabled = True
                user.name = name[:USER_NAME_MAX_LEN]
                return user_id
        return self.default_user_id

    def _allocate(self, user_id: int, size: int) -> bytearray:
        if size < 0:
            raise PoolError(f"invalid size {size}")
        if self.used_bytes + size >= self.total_bytes:
            raise PoolError("pool exhausted")
        if not 0 <= user_id < self.max_users:
            raise PoolError(f"invalid user id {user_id}")
        if len(self._blocks) >= self.max_blocks:
            raise PoolError("no free block slot")
        handle = bytearray(size)
        self._blocks[id(handle)] = _Block(handle, size, user_id)
        self.malloc_count += 1
        return handle

    def malloc(self, size: int) -> bytearray:
        """Allocate a buffer on behalf of the default user."""
        return self._allocate(self.default_user_id, size)

    def user_malloc(self, user_id: int, size: int) -> bytearray:
        """Allocate a buffer for a user, counting failures against that user."""
        try:
            return self._allocate(user_id, size)
        except PoolError:
            if 0 <= user_id < self.max_users:
                self._malloc_failed[user_id] += 1
            raise

    def free(self, handle: bytearray | None) -> None:
        """Release a buffer; unknown handles are ignored."""
        if handle is None:
            return
        block = self._blocks.get(id(handle))
        if block is None or block.handle is not handle:
            return
        del self._blocks[id(handle)]
        self.free_count += 1

    def free_by_user(self, user_id: int) -> None:
        """Disable a user and release every buffer it holds."""
        if not 0 <= user_id < self.max_users:
            raise PoolError(f"invalid user id {user_id}")
        self._users[user_id].enabled = False
        self._blocks = {
            key: block for key, block in self._blocks.items() if block.user_id != user_id
        }

    def statistic(self) -> PoolStats:
        used = self.used_bytes
        residue = self.total_bytes - used
        user_used: dict[int, int] = {}
        for block in self._blocks.values():
            if self._users[block.user_id].enabled:
                user_used[block.user_id] = user_used.get(block.user_id, 0) + block.size
        return PoolStats(
            total=self.total_bytes,
            used=used,
            used_rate=used * 1000 // self.total_bytes,
            residue=residue,
            residue_rate=residue * 1000 // self.total_bytes,
            block_count=len(self._blocks),
            malloc_count=self.malloc_count,
            free_count=self.free_count,
            user_used=user_used,
            user_used_rate={
                uid: size * 1000 // self.total_bytes for uid, size in user_used.items()
            },
            malloc_failed={
                uid: count for uid, count in enumerate(self._malloc_failed) if count
            },
        )

    def show(self) -> str:
        """Print a usage report and return it."""
        stat = self.statistic()
        lines = [
            "====================pool show===================",
            f"pool total={stat.total} bytes",
            f"pool used={stat.used} bytes",
            f"pool used rate={stat.used_rate} permille",
            f"pool residue={stat.residue} bytes",
            f"pool residue rate={stat.residue_rate} permille",
            f"block slots:{self.max_blocks}",
            f"blocks allocated:{stat.block_count}",
            f"malloc count:{stat.malloc_count}",
            f"free count:{stat.free_count}",
        ]
        for user_id, user in enumerate(self._users):
            if user.enabled:
                lines.append(
                    f"user{user_id}\t[{user.name}]\t\tused:{stat.user_used.get(user_id, 0)} bytes"
                    f"\trate:{stat.user_used_rate.get(user_id, 0)} permille"
                    f"\tmalloc failures:{stat.malloc_failed.get(user_id, 0)}"
                )
        lines.append("====================== end =====================")
        text = "\n".join(lines) + "\n"
        sys.stdout.write(text)
        return text


class AllocationTracker:
    """Counts allocations and remembers the size of each live buffer."""

    def __init__(self, max_entries: int = DEFAULT_TRACKER_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self.malloc_count = 0
        self.free_count = 0
        self.overflow = False
        self._entries: dict[int, tuple[bytearray, int]] = {}

    def malloc(self, size: int) -> bytearray:
        if size < 0:
            raise ValueError(f"invalid size {size}")
        handle = bytearray(size)
        self.malloc_count += 1
        if len(self._entries) < self.max_entries:
            self._entries[id(handle)] = (handle, size)
        else:
            self.overflow = True
        return handle

    def free(self, handle: bytearray | None) -> None:
        self.free_count += 1
        if handle is None:
            return
        entry = self._entries.get(id(handle))
        if entry is not None and entry[0] is handle:
            del self._entries[id(handle)]
            self.overflow = False

    def malloc_size(self) -> int:
        """Total bytes held by tracked, unreleased buffers."""
        return sum(size for _, size in self._entries.values())

    def show(self) -> str:
        """Print a short report and return it."""
        text = (
            "==================pool stat================\n"
            f"mallocCnt={self.malloc_count}\n"
            f"freeCnt={self.free_count}\n"
            f"mallocSize={self.malloc_size()} byte\n"
            f"KEY_VALUE_MAX_SIZE:{self.max_entries}\n"
            f"keyValueOverFlow={int(self.overflow)}\n\n"
            "==================== end ==================\n"
        )
        sys.stdout.write(text)
        return text