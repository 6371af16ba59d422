# orgimage/srcset/selector.py
# Responsibility: Chooses one media type's links, and one link, when a single answer is needed.

from typing import Optional

from orgimage.srcset.constants import DEFAULT_LINK_PREFERENCE, PREFERRED_MEDIA_TYPE
from orgimage.srcset.types import LinksByType, SizeMap


class BestTypeSelector:
    """
    Encapsulates the fixed preference policy for flattening LinksByType.
    Other media types are only offered through picture sources.
    """

    @staticmethod
    def select_best(links_by_type: LinksByType) -> Optional[SizeMap]:
        """
        Picks the JPEG size map if present, otherwise the first media type seen.

        Args:
            links_by_type (LinksByType): Output of LinkClassifier.classify.

        Returns:
            Optional[SizeMap]: The chosen size map, or None if there are no types.
        """
        preferred = links_by_type.get(PREFERRED_MEDIA_TYPE)
        if preferred:
            return preferred

        return next(iter(links_by_type.values()), None)

    @staticmethod
    def select_default_link(sizes: Optional[SizeMap]) -> Optional[str]:
        """
        Picks the largest available URL, preferring high density at equal size.
        """
        if not sizes:
            return None

        for size_name in DEFAULT_LINK_PREFERENCE:
            url = sizes.get(size_name)
            if url:
                return url
        return None
