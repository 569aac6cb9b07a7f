"""Protocol constants for Expo Updates manifests."""

MANIFEST_ROUTE_PATH = "/update-manifest-experimental"

PLATFORM_QUERY_PARAM = "platform"
PLATFORM_HEADER = "expo-platform"
HOST_HEADER = "host"

EXPO_PROTOCOL_VERSION = "0"
EXPO_SFV_VERSION = "0"
MANIFEST_CACHE_CONTROL = "private, max-age=0"
JSON_CONTENT_TYPE = "application/json"
LAUNCH_ASSET_CONTENT_TYPE = "application/javascript"

ASSETS_PATH_SEGMENT = "assets/"

# Extensions stripped from the entry point to form the launch asset key
SCRIPT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs")

SERVE_MANIFEST_EVENT = "Serve Expo Updates Manifest"
ERROR_LOG_TAG = "expo"

DEFAULT_DEVELOPER_TOOL = "expo-cli"
