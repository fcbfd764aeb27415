# Every package in the repository is built for this architecture
ARCHITECTURE = "iphoneos-arm"
COMMERCIAL_TAG = "cydia::commercial"

# Sileo featured banner view, fixed by the client
FEATURED_CLASS = "FeaturedBannersView"
FEATURED_ITEM_SIZE = "{263, 148}"
FEATURED_ITEM_CORNER_RADIUS = 10

# Fixed asset names served from the assets directory root
CYDIA_ICON = "CydiaIcon.png"
FOOTER_ICON = "footerIcon.png"
ICONS_SUBDIR = "icons"
ICON_NAME_PATTERN = r"^[A-Za-z0-9._-]+$"

DEFAULT_ASSETS_DIR = "assets"
DEFAULT_POOL_SIZE = 5
DEFAULT_LOG_LEVEL = "INFO"
