"""Hard operational limits for keys, values, configuration and indexing.

Lengths are measured in UTF-8 bytes.
"""

# Keys / namespaces
MAX_KEY_LEN = 512
MIN_KEY_LEN = 1
MAX_KEY_SEGMENT_LEN = 128
MIN_KEY_SEGMENT_LEN = 1
MAX_SEGMENT_COUNT = 32
MAX_NAMESPACE_LEN = 384
MIN_NAMESPACE_LEN = 1

# Project / config
MAX_PROJECT_NAME_LEN = 128
MIN_PROJECT_NAME_LEN = 1
MAX_STORE_PATH_LEN = 4096
MAX_CONFIG_FILE_LEN = 64 * 1024
MAX_STORE_FILE_NAME_LEN = 255
MAX_VERSION_FIELD_LEN = 16

# Values / storage
MAX_VALUE_LEN = 512 * 1024
MIN_VALUE_LEN = 0
MAX_STORE_LINE_LEN = 1024 * 1024
MAX_ENTRY_COUNT = 1_000_000

# Map tuning
DEFAULT_MAP_CAPACITY = 64
MIN_MAP_CAPACITY = 16
MAX_LOAD_FACTOR = 0.70

# Indexing
INDEX_MAX_FILE_BYTES = 2_500 * 1024
INDEX_CHUNK_LINE_TARGET = 40
INDEX_CHUNK_BYTE_TARGET = 3_500
INDEX_MAX_TEXT_CHUNK_LEN = 256 * 1024
INDEX_METADATA_SUMMARY_MAX_LEN = 64 * 1024
INDEX_MAX_POSTINGS_PER_TOKEN = 256
INDEX_MAX_POSTING_LIST_LEN = 512 * 1024
INDEX_MAX_ASSET_SCAN_COUNT = 250_000
INDEX_MAX_PATH_LEN = 2048
INDEX_MAX_IMAGE_DIMENSION = 50_000

# Retrieval / query
DEFAULT_QUERY_TOP_K = 8
INDEX_MAX_TOP_K = 64
INDEX_MIN_TOKEN_BUDGET = 128
DEFAULT_QUERY_TOKEN_BUDGET = 4_000
INDEX_MAX_TOKEN_BUDGET = 64_000

# Tokenization
INDEX_MIN_TOKEN_LEN = 2
INDEX_MAX_TOKEN_LEN = 40


def within_range(length: int, minimum: int, maximum: int) -> bool:
    """Return True if ``length`` lies in the inclusive range [minimum, maximum]."""
    return minimum <= length <= maximum