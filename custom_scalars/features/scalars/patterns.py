"""Regular expressions behind the built-in regex scalars.

All patterns are anchored and are applied with `fullmatch`.
"""

import re

# RFC 822-ish address: dotted or quoted local part, dotted domain with a
# final label of at least two characters.
EMAIL_PATTERN = re.compile(
    r"^(([^<>()\[\]\.,;:\s@\"]+(\.[^<>()\[\]\.,;:\s@\"]+)*)|(\".+\"))"
    r"@(([^<>()\[\]\.,;:\s@\"]+\.)+[^<>()\[\]\.,;:\s@\"]{2,})$",
    re.IGNORECASE,
)

# http, https and ftp URLs. Numeric hosts in loopback, private, link-local,
# multicast and reserved ranges are rejected; hostnames need an alphabetic TLD.
URL_PATTERN = re.compile(
    r"^(?:(?:https?|ftp)://)"
    # user:pass
    r"(?:\S+(?::\S*)?@)?"
    r"(?:"
    r"(?!(?:10|127)(?:\.[0-9]{1,3}){3})"
    r"(?!(?:169\.254|192\.168)(?:\.[0-9]{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2[0-9]|3[0-1])(?:\.[0-9]{1,3}){2})"
    r"(?:[1-9][0-9]?|1[0-9][0-9]|2[01][0-9]|22[0-3])"
    r"(?:\.(?:1?[0-9]{1,2}|2[0-4][0-9]|25[0-5])){2}"
    r"(?:\.(?:[1-9][0-9]?|1[0-9][0-9]|2[0-4][0-9]|25[0-4]))"
    r"|"
    r"(?:(?:[a-z\u00a1-\U0010ffff0-9]-*)*[a-z\u00a1-\U0010ffff0-9]+)"
    r"(?:\.(?:[a-z\u00a1-\U0010ffff0-9]-*)*[a-z\u00a1-\U0010ffff0-9]+)*"
    r"(?:\.(?:[a-z\u00a1-\U0010ffff]{2,}))"
    r"\.?"
    r")"
    # port
    r"(?::[0-9]{2,5})?"
    r"(?:[/?#]\S*)?$",
    re.IGNORECASE,
)

# YYYY, YYYY-MM, YYYY-MM-DD, then optionally THH:MM[:SS[.fraction]] and a
# Z or +-HH[[:]MM] offset.
DATETIME_PATTERN = re.compile(
    r"^[0-9]{4}"
    r"(?:-(?:0[1-9]|1[0-2])"
    r"(?:-(?:0[1-9]|[12][0-9]|3[01])"
    r"(?:T(?:[01][0-9]|2[0-3]):[0-5][0-9]"
    r"(?::[0-5][0-9](?:\.[0-9]+)?)?"
    r"(?:Z|[+-](?:[01][0-9]|2[0-3])(?::?[0-5][0-9])?)?"
    r")?)?)?$"
)

# RFC 4122 textual form, versions 1-5.
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
