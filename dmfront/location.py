"""
Source locations.

Every type and var in the object tree remembers where it was declared.
Builtins use a reserved file id that never names a real source file.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileId:
    """Index of a file in the compile's file list."""
    index: int

    BUILTINS_INDEX = 0

    @classmethod
    def builtins(cls) -> 'FileId':
        """The reserved file id for language builtins."""
        return cls(cls.BUILTINS_INDEX)

    @property
    def is_builtins(self) -> bool:
        return self.index == self.BUILTINS_INDEX

    def __str__(self):
        if self.is_builtins:
            return "<builtins>"
        return f"<file {self.index}>"


@dataclass(frozen=True)
class Location:
    """A file/line/column triple."""
    file: FileId
    line: int
    column: int

    @classmethod
    def builtins(cls) -> 'Location':
        """Location stamped on everything registered by the builtin bootstrap."""
        return cls(FileId.builtins(), 1, 1)

    @property
    def is_builtins(self) -> bool:
        return self.file.is_builtins

    def __str__(self):
        return f"{self.file}:{self.line}:{self.column}"
