"""Keywords and defaults of the Igor Text format."""

ITX_HEADER = "IGOR"
WAVES_KEYWORD = "WAVES/D"
BEGIN_KEYWORD = "BEGIN"
END_KEYWORD = "END"
COMMAND_PREFIX = "X"

NEWLINE = "\n"

# Spellings Igor accepts for non-finite values in a data block
NAN_TEXT = "NaN"
INF_TEXT = "INF"

DEFAULT_ENCODING = "utf-8"

# Sample lines joined into one write when streaming to a sink
DEFAULT_CHUNK_SIZE = 4096

ITX_SUFFIX = ".itx"
