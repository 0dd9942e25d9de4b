"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size conversions for --trim-max input and report output (binary units).
"""
import re

_SIZE_PATTERN = re.compile(r"^(-?)(\d+(?:\.\d*)?|\.\d+)\s*([KMGTP]?)(B?)$")

_UNIT_EXPONENTS = {"": 0, "K": 1, "M": 2, "G": 3, "T": 4, "P": 5}

_UNIT_NAMES = ["B", "KB", "MB", "GB", "TB", "PB"]


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in _UNIT_NAMES:
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Parse '4KB', '1.5M', '2048', '1g' into a byte count.
        Raises ValueError for negative sizes or invalid formats.
        """
        normalized = size_str.strip().upper()
        match = _SIZE_PATTERN.match(normalized)
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 4KB, 1.5MB, 2048, 1K, 1G, etc."
            )

        sign, number, prefix, _ = match.groups()
        if sign:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return int(float(number) * 1024 ** _UNIT_EXPONENTS[prefix])

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
