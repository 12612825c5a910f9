"""Igor Text (ITX) writer.

This subpackage provides the ITX serializer along with the numeric
formatting and sink adapters it is built on.
"""

from igortext.format.itx.numeric import format_number
from igortext.format.itx.sink import SinkWriteError
from igortext.format.itx.writer import save_itx, serialize_to, serialize_to_string

__all__ = [
    "format_number",
    "SinkWriteError",
    "save_itx",
    "serialize_to",
    "serialize_to_string",
]
