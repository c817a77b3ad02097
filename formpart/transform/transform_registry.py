#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import BinaryIO, Callable, Dict, Optional

from formpart.transform.macbinary import MacBinaryDecoder
from formpart.utils import get_logger

logger = get_logger(__name__)

# Takes the destination sink and returns a writable that filters into it
OutputTransform = Callable[[BinaryIO], BinaryIO]


class TransformRegistry:
    """
    Registry mapping content types to the output transform applied between a
    segment reader and its destination sink. Uses singleton pattern so that
    transforms registered once apply to every segment.

    Content types are matched case-insensitively. Content types without a
    registered transform are copied unchanged.
    """

    # For singleton instantiation
    _instance: Optional["TransformRegistry"] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        """
        Get the default singleton instance of TransformRegistry.

        Returns:
            TransformRegistry: The default singleton instance
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initializes the content type map with the built-in transforms.
        """
        # Only initialize once
        if self._initialized:
            return

        self._transform_map: Dict[str, OutputTransform] = {}
        for content_type in MacBinaryDecoder.content_types:
            self.register(content_type, MacBinaryDecoder)

        self._initialized = True

    @staticmethod
    def _normalize(content_type: Optional[str]) -> Optional[str]:
        if content_type is None:
            return None
        return content_type.strip().lower()

    def register(self, content_type: str, transform: OutputTransform) -> None:
        """
        Register (or replace) the transform for a content type.

        Args:
            content_type (str): Content type token, e.g. "application/x-macbinary"
            transform (OutputTransform): Callable wrapping a sink in a filtering writable

        Raises:
            ValueError: If content type is empty
        """
        key = self._normalize(content_type)
        if not key:
            raise ValueError("Content type must be a non-empty string")
        self._transform_map[key] = transform
        logger.debug("Registered output transform for content type '%s'", key)

    def unregister(self, content_type: str) -> Optional[OutputTransform]:
        """
        Remove the transform for a content type.

        Returns:
            Optional[OutputTransform]: The removed transform, None if none was registered
        """
        return self._transform_map.pop(self._normalize(content_type), None)

    def get_transform(self, content_type: Optional[str]) -> Optional[OutputTransform]:
        """
        Returns the transform registered for a content type.

        Args:
            content_type (str): Declared content type of a segment

        Returns:
            Optional[OutputTransform]: Registered transform, None for identity
        """
        return self._transform_map.get(self._normalize(content_type))

    def wrap(self, content_type: Optional[str], sink: BinaryIO) -> BinaryIO:
        """
        Wrap a sink in the transform registered for a content type.

        Returns:
            BinaryIO: The wrapping writable, or the sink itself when no transform applies
        """
        transform = self.get_transform(content_type)
        if transform is None:
            return sink
        return transform(sink)
