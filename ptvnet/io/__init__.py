"""Reading of section-structured network files."""

from ptvnet.io.reader import FormatError, read_network, read_network_file

__all__ = ["FormatError", "read_network", "read_network_file"]
