"""Grammar constants for DID URLs."""

import re

DID_SCHEME = "did:"

METHOD_SEP = ":"
PARAM_SEP = ";"
PARAM_ASSIGN = "="
PATH_SEP = "/"
QUERY_START = "?"
QUERY_SEP = "&"
QUERY_ASSIGN = "="
FRAGMENT_START = "#"

METHOD_CHARS = re.compile(r"[a-z0-9]*")

# runs of plain idchars; percent-escapes are consumed separately
ID_CHARS = re.compile(r"[a-zA-Z0-9._\-]*")
PCT_ENCODED = re.compile(r"%[0-9a-fA-F]{2}")

PATH_SEGMENT = re.compile(r"[^/?#]*")
QUERY_TEXT = re.compile(r"[^#]*")
