# orgimage/srcset/constants.py
# Responsibility: Static tables shared by the classifier, selector and builder.

from types import MappingProxyType

# -------------------------------
# Link classes
# -------------------------------
DEFAULT_IMAGE_CLASS = "tile"
HIGH_DENSITY_CLASS = "high-density"

# Tested in this order; the first class a link carries decides its size tier.
SIZE_CLASSES = (
    ("min", "Min"),
    ("mid", "Mid"),
    ("max", "Max"),
)

# -------------------------------
# Size keys
# -------------------------------
# Density-major, ascending size within each density group.
SIZE_NAMES = ("lowMin", "lowMid", "lowMax", "highMin", "highMid", "highMax")

# Size-major: larger first, high density before low at equal size.
DEFAULT_LINK_PREFERENCE = ("highMax", "lowMax", "highMid", "lowMid", "highMin", "lowMin")

# -------------------------------
# Media types
# -------------------------------
PREFERRED_MEDIA_TYPE = "image/jpeg"

# -------------------------------
# Breakpoints (pixel widths per usage context)
# -------------------------------
FALLBACK_CONTEXT = "narrow"

SRCSET_BREAKPOINTS = MappingProxyType({
    "tile": MappingProxyType({
        "lowMin": 145, "lowMid": 220, "lowMax": 540,
        "highMin": 290, "highMid": 440, "highMax": 1080,
    }),
    "narrow": MappingProxyType({
        "lowMin": 320, "lowMid": 375, "lowMax": 767,
        "highMin": 640, "highMid": 750, "highMax": 1534,
    }),
})

# -------------------------------
# Cache busting
# -------------------------------
CACHE_BUST_PARAM = "timestamp"
