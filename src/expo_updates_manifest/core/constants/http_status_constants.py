"""HTTP status codes used by the manifest server."""

# Non-standard status returned by the manifest route for every failure so
# clients can tell it apart from the generic 5xx codes used elsewhere.
HTTP_520_MANIFEST_ERROR = 520
