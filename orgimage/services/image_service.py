# orgimage/services/image_service.py
# Responsibility: Entry points that turn a Siren image entity into srcsets and a default link
# (Classifier -> Selector -> Builder).

from functools import lru_cache
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from orgimage.siren.entity import SirenEntity
from orgimage.srcset.builder import SrcsetBuilder
from orgimage.srcset.classifier import LinkClassifier
from orgimage.srcset.constants import DEFAULT_IMAGE_CLASS
from orgimage.srcset.selector import BestTypeSelector
from orgimage.srcset.types import ImageEntity, LinksByType, PictureSource, SizeMap


class ImageSrcsetService:
    """
    Derives `<img srcset>` and `<picture><source>` values from an
    organization image entity.

    Every entry point returns None for a missing image or a linked
    (unhydrated) one, and never raises on odd link data.
    """

    def get_picture_srcsets(
        self,
        image: Optional[ImageEntity],
        image_class: Optional[str] = None,
        force_image_refresh: bool = False
    ) -> Optional[List[PictureSource]]:
        """
        Creates one srcset per media type, for use as <source>s in a <picture>.

        Args:
            image (ImageEntity): Hydrated organization image entity.
            image_class (str): Class used to find the image links. Defaults to 'tile'.
            force_image_refresh (bool): Add a cache-busting timestamp to every URL.

        Returns:
            Optional[List[PictureSource]]: `type` and `srcset` pairs, in the
            order media types appear on the entity.
        """
        if not self._is_hydrated(image):
            return None

        links_by_type = self._get_image_links(image, image_class)
        return [
            PictureSource(
                type=media_type,
                srcset=SrcsetBuilder.build(sizes, image_class, force_image_refresh)
            )
            for media_type, sizes in links_by_type.items()
        ]

    def get_image_srcset(
        self,
        image: Optional[ImageEntity],
        image_class: Optional[str] = None,
        force_image_refresh: bool = False
    ) -> Optional[str]:
        """
        Creates a single srcset for an <img> tag from the best media type.

        Args:
            image (ImageEntity): Hydrated organization image entity.
            image_class (str): Class used to find the image links. Defaults to 'tile'.
            force_image_refresh (bool): Add a cache-busting timestamp to every URL.

        Returns:
            Optional[str]: The srcset, "" if no link could be classified.
        """
        if not self._is_hydrated(image):
            return None

        sizes = self._get_best_image_links(image, image_class)
        return SrcsetBuilder.build(sizes or {}, image_class, force_image_refresh)

    def get_default_image_link(
        self,
        image: Optional[ImageEntity],
        image_class: Optional[str] = None
    ) -> Optional[str]:
        """
        Returns the URL of the largest variant of the best media type.
        """
        if not self._is_hydrated(image):
            return None

        sizes = self._get_best_image_links(image, image_class)
        return BestTypeSelector.select_default_link(sizes)

    def load_image(self, payload: Any) -> Optional[SirenEntity]:
        """
        Builds a SirenEntity from raw JSON.
        Returns None instead of raising when the payload is not a JSON object
        or not a valid entity. Individual broken links are dropped by the model.
        """
        if payload is None:
            return None

        if not isinstance(payload, Mapping):
            print(f"[Siren] Ignoring image entity of type {type(payload).__name__}")
            return None

        try:
            return SirenEntity.model_validate(payload)
        except ValidationError as e:
            print(f"[Siren] Ignoring malformed image entity: {e.error_count()} validation error(s)")
            return None

    @staticmethod
    def _is_hydrated(image: Optional[ImageEntity]) -> bool:
        return image is not None and not getattr(image, "href", None)

    @staticmethod
    def _get_image_links(image: ImageEntity, image_class: Optional[str]) -> LinksByType:
        links = image.get_links_by_class(image_class or DEFAULT_IMAGE_CLASS)
        return LinkClassifier.classify(links)

    def _get_best_image_links(self, image: ImageEntity, image_class: Optional[str]) -> Optional[SizeMap]:
        return BestTypeSelector.select_best(self._get_image_links(image, image_class))


@lru_cache()
def get_image_service() -> ImageSrcsetService:
    """Dependency injection provider for ImageSrcsetService."""
    return ImageSrcsetService()
