from typing import Any, Dict, List

from .base_publisher import BasePublisher
from .json_publisher import JsonPublisher


# Registry of available publishers: (id, name, factory_function)
_PUBLISHER_REGISTRY = [
    (JsonPublisher.get_id(), JsonPublisher.get_name(), lambda: JsonPublisher()),
]


class PublisherFactory:
    @staticmethod
    def from_id(publisher_id: str) -> BasePublisher:
        for pid, _, factory in _PUBLISHER_REGISTRY:
            if pid == publisher_id:
                return factory()
        raise ValueError(f"Unsupported template: {publisher_id}")

    @staticmethod
    def get_available_publishers() -> List[Dict[str, Any]]:
        return [{'id': pid, 'name': name} for pid, name, _ in _PUBLISHER_REGISTRY]
