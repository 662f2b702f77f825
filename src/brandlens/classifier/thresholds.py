"""Size thresholds, signal weights and pattern lists used by the classifier."""

# Size thresholds (pixels)
MIN_LOGO_SIZE = 40             # Minimum dimension for logos
MAX_LOGO_SIZE = 400            # Maximum dimension for logos (larger = brand image)
MIN_BRAND_IMAGE_SIZE = 200     # Minimum dimension for brand images
MIN_HERO_SIZE = 600            # Minimum dimension for hero images

MAX_ICON_AREA = 22_500         # 150x150

MAX_LOGO_AREA = 160_000        # 400x400

MIN_HERO_AREA = 360_000        # 600x600
MIN_HERO_WIDTH = 800           # Wide banner format

MAX_SMALL_SQUARE_SIZE = 100    # Square images below this side look like icons
MAX_PLATFORM_BADGE_SIZE = 300  # Vendor CDN images above this are brand content
MAX_PARTNER_BADGE_SIZE = 120

MONOCHROME_COLOR_THRESHOLD = 3

# Logo confidence weights
LOGO_WEIGHT_FILENAME = 0.5
LOGO_WEIGHT_ALT = 0.5
LOGO_WEIGHT_PATH = 0.3
LOGO_WEIGHT_BRAND_MATCH = 0.2      # multiplied by the brand match score
LOGO_WEIGHT_HEADER = 0.3
LOGO_WEIGHT_SIZE_RANGE = 0.1
LOGO_WEIGHT_KEYWORD = 0.15
LOGO_WEIGHT_SVG = 0.1
LOGO_PENALTY_OVERSIZED = 0.3

LOGO_MIN_CONFIDENCE = 0.3
LOGO_OVERRIDES_ICON_CONFIDENCE = 0.5

# Weights are compared after rounding so 0.2 + 0.1 lands on 0.3
CONFIDENCE_PRECISION = 4

# Fixed confidences per rule outcome
SOCIAL_ICON_CONFIDENCE = 0.9
PLATFORM_LOGO_CONFIDENCE = 0.8
PARTNER_LOGO_CONFIDENCE = 0.8
ICON_CONFIDENCE = 0.7
OVERSIZED_LOGO_HERO_CONFIDENCE = 0.7
OVERSIZED_LOGO_BRAND_CONFIDENCE = 0.6
HERO_CONFIDENCE = 0.7
TEAM_CONFIDENCE = 0.7
PRODUCT_CONFIDENCE = 0.6
BRAND_IMAGE_CONFIDENCE = 0.5
OTHER_CONFIDENCE = 0.4

# Display priority
ROLE_BASE_PRIORITY = {
    "logo": 1000,
    "hero": 800,
    "team": 700,
    "product": 600,
    "brand_image": 500,
    "background": 200,
    "other": 100,
}
AREA_PRIORITY_DIVISOR = 10_000
MAX_AREA_PRIORITY_BONUS = 50
HEADER_PRIORITY_BONUS = 100
ABOVE_FOLD_PRIORITY_BONUS = 50

# Known icon pack paths
ICON_PACK_PATTERNS = [
    "/icons/", "/icon/", "/assets/icons", "/img/icons", "/images/icons",
    "/iconpack/", "/icon-pack/", "/ui-icons/", "/ui/icons",
    "/fontawesome", "/feather", "/heroicons", "/lucide", "/bootstrap-icons",
    "/material-icons", "/ionicons", "/tabler-icons", "/phosphor-icons",
]

# Filenames/alt text of generic UI icons
GENERIC_ICON_PATTERNS = [
    "envelope", "mail", "email", "globe", "world", "phone", "call", "contact",
    "arrow", "chevron", "caret", "hamburger", "menu", "search", "magnify",
    "user", "person", "avatar", "profile", "account", "settings", "cog", "gear",
    "home", "house", "star", "heart", "like", "share", "download", "upload",
    "play", "pause", "stop", "next", "prev", "forward", "back", "close", "x-mark",
    "check", "checkmark", "tick", "cross", "plus", "minus", "add", "remove",
    "cart", "shopping", "bag", "basket", "lock", "unlock", "key", "shield",
    "bell", "notification", "alert", "warning", "info", "help", "question",
    "calendar", "clock", "time", "date", "location", "map", "pin", "marker",
    "link", "chain", "external", "new-window", "copy", "clipboard", "edit", "pencil",
    "trash", "delete", "bin", "folder", "file", "document", "pdf",
    "camera", "video", "mic", "microphone", "speaker", "volume", "mute",
    "wifi", "signal", "battery", "power", "refresh", "sync", "loading", "spinner",
]

SOCIAL_PLATFORM_PATTERNS = [
    "facebook", "instagram", "linkedin", "x-logo", "twitter", "tiktok",
    "youtube", "pinterest", "snapchat", "whatsapp", "telegram", "discord",
    "social-icon", "social_icon", "socialicon", "social-media",
]

# Site builders and hosting platforms
PLATFORM_VENDOR_PATTERNS = [
    "squarespace", "wix", "godaddy", "canva", "shopify", "wordpress",
    "webflow", "weebly", "duda", "jimdo",
]

# A vendor name only marks a badge when one of these appears too
LOGOISH_PATTERNS = [
    "logo", "logotype", "brandmark", "mark", "badge", "icon",
    "favicon", "powered-by", "powered_by", "footer-logo", "header-logo",
]

PARTNER_SECTION_PATTERNS = [
    "partner", "association", "member", "vendor", "powered-by", "powered_by",
    "badge", "sponsor", "brokers", "advisors", "custodian", "certified",
    "affiliate", "featured-in", "as-seen-on",
]

LOGO_KEYWORD_PATTERNS = [
    "brand", "brandmark", "logotype", "wordmark", "symbol", "sig", "signature",
]

TEAM_PATTERNS = [
    "team", "staff", "member", "founder", "ceo", "director", "employee", "people",
]

PRODUCT_PATTERNS = ["product", "service", "feature", "offering"]
