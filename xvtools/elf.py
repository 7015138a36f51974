"""ELF executable file and program header records."""

import struct
from dataclasses import dataclass
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" read little endian

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4


class ElfFormatError(ValueError):
    """Raised when bytes do not form a valid ELF structure."""


@dataclass
class ElfHeader:
    """The ELF file header."""

    magic: int = ELF_MAGIC
    ident: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<I12sHHIQQQIHHHHHH")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        """Decode a header from the start of data."""
        if len(data) < cls.SIZE:
            raise ElfFormatError(f"ELF header needs {cls.SIZE} bytes, got {len(data)}")
        fields = cls._STRUCT.unpack_from(bytes(data[: cls.SIZE]))
        header = cls(*fields)
        if header.magic != ELF_MAGIC:
            raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
        return header

    def to_bytes(self):
        """Encode the header in little-endian wire form."""
        if len(self.ident) != 12:
            raise ElfFormatError("ELF identification must be 12 bytes")
        try:
            return self._STRUCT.pack(
                self.magic, bytes(self.ident), self.type, self.machine,
                self.version, self.entry, self.phoff, self.shoff, self.flags,
                self.ehsize, self.phentsize, self.phnum, self.shentsize,
                self.shnum, self.shstrndx,
            )
        except struct.error as exc:
            raise ElfFormatError(str(exc)) from exc


@dataclass
class ProgramHeader:
    """An ELF program section header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIQQQQQQ")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data):
        """Decode a program header from the start of data."""
        if len(data) < cls.SIZE:
            raise ElfFormatError(f"program header needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*cls._STRUCT.unpack_from(bytes(data[: cls.SIZE])))

    def to_bytes(self):
        """Encode the program header in little-endian wire form."""
        try:
            return self._STRUCT.pack(
                self.type, self.flags, self.off, self.vaddr,
                self.paddr, self.filesz, self.memsz, self.align,
            )
        except struct.error as exc:
            raise ElfFormatError(str(exc)) from exc


def program_headers(image):
    """Yield the program headers of a whole ELF image."""
    data = memoryview(bytes(image))
    header = ElfHeader.from_bytes(data)
    end = header.phoff + header.phnum * ProgramHeader.SIZE
    if end > len(data):
        raise ElfFormatError("program header table runs past end of image")
    for index in range(header.phnum):
        start = header.phoff + index * ProgramHeader.SIZE
        yield ProgramHeader.from_bytes(data[start:start + ProgramHeader.SIZE])