"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
from datetime import datetime, timezone


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string using decimal units (e.g., 512 B, 1.5 KB, 2.1 MB).
        The value is rounded to two decimals and trailing zeros are dropped.
        """
        if size_bytes < 0:
            raise ValueError(f"Negative size not allowed: {size_bytes}")

        units = ["B", "KB", "MB", "GB", "TB"]
        value = float(size_bytes)
        unit_index = 0
        while unit_index + 1 < len(units) and value >= 1000:
            value /= 1000
            unit_index += 1

        text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
        return f"{text} {units[unit_index]}"

    @staticmethod
    def timestamp_to_iso(timestamp: float) -> str:
        """
        Convert a POSIX timestamp to an ISO-8601 string in UTC.
        """
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()
