"""Configuration classes for ptvnet components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatConfig:
    """Tokens of the section-structured network file format."""

    # Separator between fields in a data row and between header columns
    field_separator: str = ";"

    # Prefix of a section header line, e.g. "$NODE:NO;XCOORD;YCOORD"
    section_prefix: str = "$"

    # Separator between the section name and its column list
    header_separator: str = ":"

    # Lines starting with this prefix are comments
    comment_prefix: str = "*"

    def is_comment(self, line: str) -> bool:
        """Return True if ``line`` is a comment line."""
        return line.startswith(self.comment_prefix)

    def is_section_header(self, line: str) -> bool:
        """Return True if ``line`` opens a new section."""
        return line.startswith(self.section_prefix)


# Global configuration instance
FORMAT_CONFIG = FormatConfig()
