# fogos

Small Unix-style tools and the data formats of a small teaching
operating system, as plain Python:

- command-line tools: `cat`, `echo`, `wc`, `grep`, `ln`, `mkdir`, `rm`, `ls`
  (`fogos.textutils`, `fogos.grep`, `fogos.fileutils`, `fogos.ls`)
- a shell command-line tokenizer and parser producing a tree of commands
  (`fogos.sh`)
- a tiny `printf` that understands `%d`, `%l`, `%x`, `%p`, `%s`, `%c`
  and `%%` (`fogos.printf`)
- string and line-reading helpers `atoi`, `strcmp`, `fgets` and
  `getline` (`fogos.ulib`)
- a first-fit free-list memory allocator working on a simulated heap
  (`fogos.umalloc`)
- the Park–Miller random number generator (`fogos.rand`)
- binary layouts for ELF headers, virtio descriptors and rings, file
  `stat` records, system limits and open flags, and RISC-V Sv39
  page-table and memory-layout helpers
  (`fogos.elf`, `fogos.virtio`, `fogos.params`, `fogos.riscv`)

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is installed as a console script:

```
fogos-cat FILE...          # copy files (or standard input) to standard output
fogos-echo WORD...         # print the words separated by spaces
fogos-wc FILE...           # print line, word and byte counts
fogos-grep PATTERN FILE... # print lines matching a simple pattern
fogos-ln OLD NEW           # make a hard link
fogos-mkdir DIR...         # create directories, stopping at the first failure
fogos-rm PATH...           # remove files or empty directories, stopping at the first failure
fogos-ls [FLAG] [PATH...]  # list a directory or describe a file
```

`fogos-grep` supports only the operators `^`, `.`, `*` and `$`. It
examines newline-terminated lines only; a last line without a newline is
not matched.

`fogos-ls` takes at most one flag; with none it lists names, directories
in blue. A directory listing shows `.` and `..` followed by the entries
in sorted order.

| flag    | shows                                    |
|---------|------------------------------------------|
| `-l`    | type, inode number and size              |
| `-sz`   | size, coloured by size range             |
| `-t`    | type, coloured by type                   |
| `-i`    | inode number                             |
| `-c`    | names in columns (directories only)      |
| `-fun`  | names in colours chosen by inode number  |
| `-rand` | names in random colours                  |
| `-h`    | the help page                            |

An unknown flag prints `Invalid Flag` followed by the help page.

## Library use

Matching text the way `grep` does:

```python
from fogos.grep import match

match("^ab*c$", "abbbc")   # True
match("x.z", "0xyz1")      # True
```

Parsing a shell command line into a command tree:

```python
from fogos.sh import parse_command, tokenize

tree = parse_command("cat < in.txt | grep foo > out.txt; echo done &")
tokens = tokenize("ls -l >> log")
```

The tree is built from `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and
`BackCmd`; malformed input, or more than nine words in one command,
raises `ShellSyntaxError`.

Formatting with the small `printf`:

```python
from fogos.printf import format_string

format_string("%s has %d items at %p\n", "list", 3, 0x1000)
```

`fprintf(stream, fmt, *args)` and `printf(fmt, *args)` write the same
text to a stream or to standard output.

Allocating from a simulated heap:

```python
from fogos.umalloc import Heap

heap = Heap(limit=1 << 20)
addr = heap.malloc(100)
heap.free(addr)
print(heap.free_blocks())
```

Addresses are offsets into the simulated heap, not real memory. When the
heap cannot grow within its limit, `malloc` raises `MemoryError`.

Drawing pseudo-random numbers:

```python
from fogos.rand import ParkMiller

gen = ParkMiller(seed=1)
gen.rand()
```

Reading an ELF file's program headers:

```python
from pathlib import Path

from fogos.elf import parse_elf_header, program_headers

data = Path("program").read_bytes()
header = parse_elf_header(data)
for ph in program_headers(data, header):
    if ph.is_loadable():
        print(hex(ph.vaddr), ph.memsz)
```

A malformed header raises `ElfFormatError`.

## What it does not do

- `fogos.sh` only parses command lines; there is no shell that runs the
  resulting commands.
- The `fogos.elf`, `fogos.virtio`, `fogos.riscv` and `fogos.params`
  modules describe data layouts and addresses; there is no kernel,
  emulator or disk driver that uses them.