"""
Base Model Components and Mixins

CloudWatch Logs responses use camelCase keys (``nextForwardToken``,
``ingestionTime``, ``logStreamName``) while the wrapper exposes snake_case
attributes. Every model declares the wire name as a pydantic alias, and
CloudWatchMixin provides the single conversion path in both directions:

```python
page = LogPage.from_api_item(client.get_log_events(...))
item = event.to_api_item()   # {'timestamp': ..., 'message': ..., 'ingestionTime': ...}
```

The same wire format is used by the on-disk content cache, so a cached
stream is byte-compatible with what GetLogEvents returned.

## Components

- CloudWatchMixin: alias-aware parsing of API items with error mapping
- WIRE_MODEL_CONFIG: shared ConfigDict (immutable, populate by name or alias)
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


WIRE_MODEL_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
)


class CloudWatchMixin(BaseModel):
    """
    Mixin providing conversion between CloudWatch Logs API items and models.

    Features:
    - Parse raw boto3 response dictionaries (from_api_item)
    - Serialize back to the camelCase wire format (to_api_item)
    - Unknown response keys are ignored so new API fields do not break parsing
    - Malformed items surface as TransportError, since they come from upstream
    """

    def to_api_item(self) -> Dict[str, Any]:
        """
        Convert model to a CloudWatch Logs shaped dictionary.

        Returns:
            Dictionary keyed by the API's camelCase field names, None values dropped
        """
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]):
        """
        Create model instance from a CloudWatch Logs API item.

        Args:
            item: Response dictionary (or a sub-dictionary of one) from boto3

        Returns:
            Model instance

        Raises:
            TransportError: If the item does not match the expected shape
        """
        try:
            return cls.model_validate(item)
        except PydanticValidationError as e:
            logger.error(f"Failed to convert CloudWatch Logs item to {cls.__name__}: {e}")
            from ..exceptions import TransportError
            raise TransportError(
                f"Malformed CloudWatch Logs response for {cls.__name__}: {e}",
                e,
                {'model': cls.__name__}
            ) from e
