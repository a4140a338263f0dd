# Validation (1000-1999)
MISSING_FIELD = 1001
INVALID_ENUM_VALUE = 1002
URL_UNREACHABLE = 1003
URL_FORMAT_ERROR = 1004
NOTHING_TO_CHANGE = 1005

# Not Found (2000-2999)
SPONSOR_NOT_FOUND = 2001
SPONSORS_NOT_FOUND = 2002

# Conflict (3000-3999)
SPONSOR_ALREADY_EXISTS = 3001

# External Service (5000-5999)
URL_PROBE_FAILED = 5001

# Configuration (7000-7999)
DB_CONNECTION_FAILED = 7001

# Internal (8000-8999)
SPONSOR_SAVE_FAILED = 8001
