"""Parser configuration.

CookieConfig is a frozen dataclass — immutable after creation, passed
explicitly to the parser and to CookieCollection.
"""

from dataclasses import dataclass

from crumb._internal.types import Clock
from crumb.http.dates import utc_now


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Cookie parsing configuration. Immutable after creation.

    Override the clock to make ``Max-Age`` resolution deterministic::

        config = CookieConfig(clock=lambda: datetime(2021, 6, 9, tzinfo=UTC))
    """

    # Time source for Max-Age -> absolute expiry
    clock: Clock = utc_now

    # Path given to Set-Cookie headers without a Path attribute
    default_path: str = "/"


DEFAULT_CONFIG = CookieConfig()
