from .base_publisher import BasePublisher
from .json_publisher import JsonPublisher
from .publisher_factory import PublisherFactory

__all__ = ['BasePublisher', 'JsonPublisher', 'PublisherFactory']
