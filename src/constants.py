"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    USAGE_ERROR = 2
    NO_PACKAGES = 3


class CheckStatus(Enum):
    """Outcome of checking a single package for a newer upstream release.

    Args:
        Enum (string): Check outcomes.
    """

    NEW_VERSION = "new_version"
    SUSPICIOUS = "suspicious"
    UP_TO_DATE = "up_to_date"
    UNPARSEABLE = "unparseable"
    CANCELLED = "cancelled"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    ABS_ROOT = "/var/abs"
    RECIPE_FILE = "PKGBUILD"
    TESTING_REPOS = ["testing", "community-testing"]

    VERSION_DELIMITERS = (".", "_", "-")
    SOURCE_URL_SCHEMES = ("http", "https", "ftp")

    # Appended to the current version to build a URL that should never exist.
    INVALID_VERSION_SUFFIX = "102.2"

    # Hosts that report wrong content types for binary payloads.
    TRANSPORT_ONLY_HOSTS = ["ladspa.org", "download.videolan.org", "launchpad.net"]
    # Hosts answering 304 for deleted artifacts when asked with a future If-Modified-Since.
    CONDITIONAL_GET_DOMAINS = ["googlecode.com"]

    ARCHIVE_TYPE_ALLOW = [".gz", "application/octet-stream"]
    APPLICATION_TYPE_DENY = ["xml", "html", "xhtml+xml", "json"]

    DEFAULT_THREADS = 12
    REQUEST_TIMEOUT = 30  # Timeout in seconds for every probe request
    EXTRACTOR_TIMEOUT = 30  # Timeout in seconds for one recipe extraction
    USER_AGENT = "pkgprobe/0.1"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "PKGPROBE_LOG_LEVEL"
    REPORT_FORMAT = "%(message)s"
