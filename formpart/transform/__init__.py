from formpart.transform.macbinary import MacBinaryDecoder
from formpart.transform.transform_registry import OutputTransform, TransformRegistry
