# orgimage/srcset/builder.py
# Responsibility: Turns one media type's size map into an ordered `srcset` string.

import time
from typing import Mapping, Optional

from orgimage.srcset.constants import (
    CACHE_BUST_PARAM,
    FALLBACK_CONTEXT,
    SIZE_NAMES,
    SRCSET_BREAKPOINTS,
)
from orgimage.srcset.types import SizeMap


def _now_millis() -> int:
    return int(time.time() * 1000)


class SrcsetBuilder:
    """
    Builds `<url> <width>w` descriptor lists using the breakpoint table of a
    usage context ('tile', 'narrow').
    """

    @staticmethod
    def build(sizes: SizeMap, context: Optional[str], cache_bust: bool = False) -> str:
        """
        Creates a srcset string from a size map.

        Descriptors follow the canonical size order (lowMin .. highMax).
        Sizes missing from the map are left out.

        Args:
            sizes (SizeMap): sizeKey -> url for a single media type.
            context (Optional[str]): Usage context selecting the breakpoint table.
                Unknown or missing contexts use the 'narrow' table.
            cache_bust (bool): Append a `timestamp` query parameter to every URL.

        Returns:
            str: Comma-separated descriptors, or "" when nothing applies.
        """
        breakpoints = SrcsetBuilder.get_breakpoints(context)

        descriptors = []
        for size_name in SIZE_NAMES:
            url = sizes.get(size_name)
            if not url:
                continue

            if cache_bust:
                # Sampled per descriptor, not once per call
                url = SrcsetBuilder.append_cache_buster(url, _now_millis())

            descriptors.append(f"{url} {breakpoints[size_name]}w")

        return ", ".join(descriptors)

    @staticmethod
    def get_breakpoints(context: Optional[str]) -> Mapping[str, int]:
        """Returns the breakpoint table for a context, falling back to 'narrow'."""
        return SRCSET_BREAKPOINTS.get(context or "", SRCSET_BREAKPOINTS[FALLBACK_CONTEXT])

    @staticmethod
    def append_cache_buster(url: str, timestamp: int) -> str:
        """
        Appends `timestamp=<millis>` using '&' if the URL already has a
        non-empty query string, '?' otherwise.
        """
        parts = url.split("?")
        separator = "&" if len(parts) > 1 and parts[1] else "?"
        return f"{url}{separator}{CACHE_BUST_PARAM}={timestamp}"
