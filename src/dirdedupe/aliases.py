from dirdedupe.core.models import SortKey, SortDirection

SORT_KEY_ALIASES = {
    "name": SortKey.NAME,
    "modifiedtime": SortKey.MODIFIED_TIME,
    "modified-time": SortKey.MODIFIED_TIME,
    "mtime": SortKey.MODIFIED_TIME,
}

SORT_KEY_CHOICES = [key.value for key in SortKey]

SORT_KEY_HELP_TEXT = (
    "Property to sort by when determining the file copy to keep:\n"
    "  Name          : base file name\n"
    "  ModifiedTime  : last modification time\n"
)

SORT_DIRECTION_ALIASES = {
    "ascending": SortDirection.ASCENDING,
    "asc": SortDirection.ASCENDING,
    "descending": SortDirection.DESCENDING,
    "desc": SortDirection.DESCENDING,
}

SORT_DIRECTION_CHOICES = [direction.value for direction in SortDirection]

SORT_DIRECTION_HELP_TEXT = (
    "Sort direction when determining the file copy to keep.\n"
    "The first file in the sorted list is kept:\n"
    "  Ascending   : oldest / alphabetically first copy survives\n"
    "  Descending  : newest / alphabetically last copy survives\n"
)

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

EPILOG_TEXT = """
Examples:
  Dry run - report duplicates in Downloads, keep the oldest copy
  %(prog)s ~/Downloads --sort-by ModifiedTime --sort-direction Ascending

  Scan subdirectories too and print file timestamps
  %(prog)s ~/Downloads -r -v --sort-by ModifiedTime --sort-direction Ascending

  Delete duplicates, keep the copy whose name sorts last
  %(prog)s ~/Downloads -r --sort-by Name --sort-direction Descending --force

  Same as above but move duplicates to the system trash
  %(prog)s ~/Downloads -r --sort-by Name --sort-direction Descending --force --trash
"""


def parse_alias(value: str, aliases: dict):
    """Case-insensitive lookup of a CLI choice; returns None when unknown."""
    return aliases.get(value.strip().lower())
