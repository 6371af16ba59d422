# orgimage/srcset/classifier.py
# Responsibility: Groups image links by media type and (density, size) key.

from typing import Iterable, Optional

from orgimage.srcset.constants import HIGH_DENSITY_CLASS, SIZE_CLASSES
from orgimage.srcset.types import ClassifiedLink, LinksByType


class LinkClassifier:
    """
    Partitions a flat collection of classified links into
    mediaType -> (sizeKey -> url).
    """

    @staticmethod
    def classify(links: Iterable[ClassifiedLink]) -> LinksByType:
        """
        Classifies links in the order given.

        Args:
            links (Iterable[ClassifiedLink]): Image links visible under one image class.

        Returns:
            LinksByType: Size maps keyed by media type. Later links overwrite
            earlier ones that resolve to the same (mediaType, sizeKey).
        """
        sizes_by_type: LinksByType = {}

        for link in links:
            size_key = LinkClassifier.size_key(link)
            # No size tier means no breakpoint to map it to
            if size_key is None:
                continue

            sizes = sizes_by_type.setdefault(link.media_type, {})
            sizes[size_key] = link.url

        return sizes_by_type

    @staticmethod
    def size_key(link: ClassifiedLink) -> Optional[str]:
        """
        Returns the link's size key (e.g. 'highMid'), or None when it carries
        none of the size classes.
        """
        size = next(
            (suffix for name, suffix in SIZE_CLASSES if link.has_class(name)),
            None
        )
        if size is None:
            return None

        density = "high" if link.has_class(HIGH_DENSITY_CLASS) else "low"
        return density + size
