# Repeated plain keys (?a=1&a=2) become array parameters, like keys ending in "[]".
GROUP_REPEATED_KEYS = True

# Requests with more query parameters than this are rejected with a 400.
MAX_QUERY_PARAMS = 256

# Include the traceback in error responses.
DEVELOPER_MODE = False
