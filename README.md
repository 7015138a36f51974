# xvtools

Pure-Python models and small tools for a RISC-V teaching operating system.

## What is inside

- `xvtools.riscv`: the system parameters (`NPROC`, `NOFILE`, `FSSIZE`, `MAXPATH`, ...), register bit constants, the Sv39 page constants (`PGSIZE`, `PTE_V`, `PTE_R`, `PTE_W`, `PTE_X`, `PTE_U`, `PTE_COW`, `MAXVA`) and the helpers `pg_round_up`, `pg_round_down`, `px`, `pa_to_pte`, `pte_to_pa`, `pte_flags` and `make_satp`.
- `xvtools.elf`: the dataclasses `ElfHeader` and `ProgramHeader`, each with `from_bytes` and `to_bytes` for the little-endian layout, and `program_headers(image)`, a generator over the program headers of a whole image. Short input, a bad magic number or an out-of-range field raises `ElfFormatError`.
- `xvtools.fmt`: `format(fmt, *args)` and `fprintf(stream, fmt, *args)` for a small printf dialect: `%d` (signed 32-bit), `%l` (unsigned 64-bit decimal), `%x` (32-bit upper-case hex), `%p` (`0x` and 16 hex digits), `%s` (`None` prints `(null)`), `%c` and `%%`. Unknown conversions are echoed as written.
- `xvtools.umalloc`: `Heap(limit)`, a first-fit free-list allocator in 16-byte units. `sbrk(nunits)` grows the break and raises `MemoryError` past the limit; `malloc(nbytes)` returns a block address; `free(address)` returns it and raises `ValueError` for an address that was not allocated; `free_blocks()` lists the free blocks in address order.
- `xvtools.prng`: the Park–Miller generator as the function `do_rand(ctx)` and the class `ParkMiller(seed=1)`, with `next()` and iteration.
- `xvtools.shell`: `tokenize(line)` and `parse_command(line)`. Parsing builds a tree of `ExecCmd`, `RedirCmd` (with a `RedirMode`), `PipeCmd`, `ListCmd` and `BackCmd`; bad input raises `ShellSyntaxError`, whose `leftovers` holds any unparsed text.
- `xvtools.grep`: `match(pattern, text)` for patterns made of `^ . * $` and literal characters, `grep(pattern, stream)`, which yields the matching newline-terminated lines, and the `xv-grep` command.
- `xvtools.wc`: `count(stream)`, which returns a `Counts` of lines, words and characters, and the `xv-wc` command.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Commands

```
xv-grep 'ma.*ine' notes.txt     # print lines matching a ^ . * $ pattern
xv-wc notes.txt                 # lines, words and characters per file
```

Both read standard input when no file is named.

## Library use

```python
from xvtools.shell import parse_command, BackCmd, PipeCmd
from xvtools.fmt import format
from xvtools.umalloc import Heap

cmd = parse_command("cat < in | grep x > out &")
assert isinstance(cmd, BackCmd) and isinstance(cmd.cmd, PipeCmd)

assert format("%d %x %p", -5, 255, 4096) == "-5 FF 0x0000000000001000"

heap = Heap(1 << 20)
block = heap.malloc(100)
heap.free(block)
```

## What it does not do

The package does not simulate physical memory or page tables, does not build file-system images, and offers no `ls`, `cat`, `echo`, `ln`, `mkdir`, `rm` or `kill` commands. The shell module parses command lines but does not run them.

## Tests

```
pytest
```