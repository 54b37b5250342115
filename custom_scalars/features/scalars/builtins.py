"""Built-in regex scalars.

LimitedString and Password are parameterized; build them with
`ScalarFactory.limited_string` and `ScalarFactory.password`.
"""

from .models import ScalarDefinition
from .patterns import DATETIME_PATTERN, EMAIL_PATTERN, URL_PATTERN, UUID_PATTERN
from .schemas import RegexScalarOptions
from .service import ScalarFactory

# Regex scalars never consume family counters
_factory = ScalarFactory()

EMAIL = _factory.build_regex_scalar(
    RegexScalarOptions(
        name="Email",
        pattern=EMAIL_PATTERN,
        description="The Email scalar type represents E-Mail addresses compliant to RFC 822.",
        error="Not a valid Email address",
    )
)

URL = _factory.build_regex_scalar(
    RegexScalarOptions(
        name="URL",
        pattern=URL_PATTERN,
        description="The URL scalar type represents URL addresses.",
        error="Not a valid URL",
    )
)

DATETIME = _factory.build_regex_scalar(
    RegexScalarOptions(
        name="DateTime",
        pattern=DATETIME_PATTERN,
        description="The DateTime scalar type represents date time strings complying to ISO-8601.",
        error="Not a valid DateTime",
    )
)

UUID = _factory.build_regex_scalar(
    RegexScalarOptions(
        name="UUID",
        pattern=UUID_PATTERN,
        description="The UUID scalar type represents a UUID (versions 1 to 5) in its textual form.",
        error="Not a valid UUID",
    )
)

BUILTIN_SCALARS: dict[str, ScalarDefinition] = {
    scalar.name: scalar for scalar in (EMAIL, URL, DATETIME, UUID)
}
