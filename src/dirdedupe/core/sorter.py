"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure ordering logic for the file catalog.
The position of a file in this order decides whether it is kept or treated as a duplicate:
within every group of identical files, the first one in the order survives.
"""
from typing import Iterable, List
from dirdedupe.core.models import FileDescriptor, SortKey, SortDirection


class Sorter:
    """
    Orders the whole catalog once before the engine starts.
    Sorting criteria:
    - NAME: base name of the file (ordinal string comparison)
    - MODIFIED_TIME: last modification timestamp, in integer nanoseconds
    Ties keep enumeration order. DESCENDING reverses the ascending result as a whole.
    """

    @staticmethod
    def sort_files(
            files: Iterable[FileDescriptor],
            sort_key: SortKey,
            sort_direction: SortDirection = SortDirection.ASCENDING
    ) -> List[FileDescriptor]:
        if sort_key == SortKey.NAME:
            key_func = lambda f: f.name
        elif sort_key == SortKey.MODIFIED_TIME:
            key_func = lambda f: f.modified_time_ns
        else:
            raise ValueError(f"Unsupported sort key: {sort_key!r}")

        ordered = sorted(files, key=key_func)
        if sort_direction == SortDirection.DESCENDING:
            ordered.reverse()
        return ordered
