# cwmpcore

Small, dependency-free building blocks for a CWMP (TR-069) toolkit.

## Modules

- `cwmpcore.pool`: `MemoryPool` hands out `bytearray` buffers against a
  fixed byte budget and a fixed number of block slots. It keeps per-user
  accounting. `apply_user_id(name)` registers a user. `malloc` and
  `user_malloc` allocate buffers, and `free` and `free_by_user` release them.
  `statistic()` returns a `PoolStats` snapshot, with rates in permille, and
  `show()` prints a report and returns it. A failed allocation raises
  `PoolError`. `AllocationTracker` is a lighter bookkeeper: it counts
  allocations and frees, and `malloc_size()` reports the bytes still held.
- `cwmpcore.strpro` provides four functions:
  - `clean_space(text)` strips leading and trailing spaces.
  - `clean_by_ch(text, ch)` strips any single character from both ends.
  - `hex2str(data, out_len)` turns bytes into lowercase hex text.
  - `str2hex(text, hex_len)` turns lowercase hex text back into bytes.

  A length that is too small, odd-length text or a non-hex character raises
  `ValueError`.
- `cwmpcore.netitf` holds thin IPv4 TCP helpers: `bind(ipv4, port)` returns
  a bound socket, `listen(sock)` uses a backlog of 5,
  `accept(sock)` returns `(conn, ipv4, port)`, and `connect(sock, ipv4, port)`
  connects the socket.
- `cwmpcore.fixedlist`: `FixedList(size)` has numbered slots. A new item
  takes the first free slot. Items are addressed by their position among the
  occupied slots, through `find_by_num`, `remove_by_num` and `replace`.
  `append` raises `ListFullError` when every slot is taken.
- `cwmpcore.stack`: `BoundedStack(size)` holds at most `size - 1` items.
  It offers `push`, `pop`, `top`, `is_empty` and `is_full`. Failures raise
  `StackFullError` or `StackEmptyError`.
- `cwmpcore.keyvalue`: `KeyValueStore(size)` keeps at most `size` pairs
  with unique keys, each stored as a `KeyValueItem`.
  - Keys are compared by their bytes. A text key stands for its UTF-8 bytes
    followed by a NUL byte.
  - `set` checks capacity before it checks for the key. Once the store is
    full it raises `KeyValueFullError`, even for a key that is already
    present.
  - `get` raises `KeyError` for a missing key or a key stored without a
    value. `show()` prints every pair.
- `cwmpcore.ringqueue`: `RingQueue(size)` is a FIFO that holds at most
  `size - 1` items. It offers `put`, `get`, `peek`, `is_full`, `is_empty`
  and `clear`. Iterating goes from head to tail without removing items.
  Failures raise `QueueFullError` or `QueueEmptyError`.

## Installation

    pip install .

## Examples

    from cwmpcore.keyvalue import KeyValueStore
    from cwmpcore.ringqueue import RingQueue
    from cwmpcore.strpro import hex2str, str2hex
    from cwmpcore.pool import MemoryPool

    store = KeyValueStore(100)
    store.set("userName", "along")
    assert store.get("userName") == "along"

    q = RingQueue(4)          # holds at most 3 items
    q.put(1)
    q.put(5)
    assert q.get() == 1

    text = hex2str(b"\x12\x34", 5)
    assert text == "1234"
    assert str2hex(text, 2) == b"\x12\x34"

    pool = MemoryPool(4 * 1024 * 1024, 32 * 1024, 256)
    uid = pool.apply_user_id("main")
    block = pool.user_malloc(uid, 1024)
    pool.free(block)
    stats = pool.statistic()

## What the package does not do

- It has no logging facility. Reports from `MemoryPool.show`,
  `AllocationTracker.show` and `KeyValueStore.show` go to standard output
  only.
- It has no linked list and no hash table. The only keyed container is
  `KeyValueStore`, which does a linear search.
- It provides no command-line program and no protocol session handling.

## Running the tests

    pip install .[test]
    pytest