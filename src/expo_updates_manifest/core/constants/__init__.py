"""Constants module for the Expo Updates manifest server.

This module collects the protocol constants and HTTP status messages used
throughout the application and tests.
"""

from .http_status_constants import *  # noqa: F403
from .manifest_constants import *  # noqa: F403
