"""Display units for byte counts."""

from enum import Enum

from humanfriendly import format_size


class DataSizeUnit(str, Enum):
    """Unit used when displaying sizes to the user.

    Fixed units divide by powers of 1024. ``AUTO`` picks the most readable
    binary unit for each value.

    Example:
        >>> DataSizeUnit.MB.display_total_size(3 * 1024 * 1024)
        '3.00 MB'
        >>> DataSizeUnit.B.display_total_size(512)
        '512 B'
        >>> DataSizeUnit.parse("kb")
        <DataSizeUnit.KB: 'KB'>
    """

    B = "B"
    KB = "KB"
    MB = "MB"
    GB = "GB"
    TB = "TB"
    AUTO = "AUTO"

    @property
    def divisor(self) -> int:
        """Number of bytes in one of this unit (1 for ``B`` and ``AUTO``)."""
        exponents = {"B": 0, "KB": 1, "MB": 2, "GB": 3, "TB": 4, "AUTO": 0}
        return int(1024 ** exponents[self.value])

    def display_total_size(self, size: int) -> str:
        """Format a byte count in this unit.

        Args:
            size: Number of bytes.

        Returns:
            The formatted size, e.g. ``'1.50 KB'``.
        """
        if self is DataSizeUnit.AUTO:
            return str(format_size(size, binary=True))
        if self is DataSizeUnit.B:
            return f"{size} B"
        return f"{size / self.divisor:.2f} {self.value}"

    @classmethod
    def parse(cls, text: str) -> "DataSizeUnit":
        """Look up a unit by name, ignoring case.

        Raises:
            ValueError: If the name is not a known unit.
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            choices = ", ".join(unit.value for unit in cls)
            raise ValueError(f"Invalid display unit '{text}'. Valid units: {choices}")
