"""Location input: positional argument first, interactive prompt second."""

import logging
import sys
from collections.abc import Callable

from weathercli.errors import EmptyInputError

logger = logging.getLogger(__name__)

PROMPT = "Enter Location: "
ACCEPTED_FORMS = (
    "Enter city name, IP address, Latitude/Longitude (decimal degree), "
    "US Zipcode, UK Postcode, Canada Postalcode."
)


def prompt_stdin(text: str) -> str:
    if sys.stdin is None or sys.stdin.closed:
        raise EOFError("stdin is not available")
    return input(text)


def resolve_location(
    argument: str | None = None,
    prompt: Callable[[str], str] = prompt_stdin,
) -> str:
    """Return a trimmed, non-empty location query.

    The query itself is opaque here; WeatherAPI decides whether it matches
    anything. End of input on the prompt counts as empty input so a
    non-interactive run without an argument fails instead of blocking.
    """
    if argument is not None and argument.strip():
        return argument.strip()

    try:
        line = prompt(PROMPT)
    except EOFError:
        logger.debug("No location argument and stdin is exhausted")
        line = ""

    query = (line or "").strip()
    if not query:
        raise EmptyInputError(f"No location provided. {ACCEPTED_FORMS}")
    return query
