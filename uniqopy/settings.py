# ----------------------------
# Static settings
# ----------------------------

APP_NAME = "uniqopy"
VERSION = "0.1.0"

# 10MB read buffer for hashing
CHUNK_SIZE = 10 * 1024 * 1024

# NOTE: local time, not UTC
TIMESTAMP_FORMAT = "%Y-%m-%d-%H:%M:%S"

USAGE = """
usage: uniqopy <file>

Create a copy of a file incorporating its MD5 hash and the current
local timestamp into the new file's name. The file's extension will
be retained.

Examples:
    example -> example.2022-02-02-22:22:22.d41d8cd98f00b204e9800998ecf8427e
    example.txt -> example.2022-02-02-22:22:22.d41d8cd98f00b204e9800998ecf8427e.txt
"""
