"""
Publisher that writes each resolved DocFile as a JSON document.
"""

import json
from pathlib import Path
from typing import List

from .. import logger
from ..symbols import DocFile
from .base_publisher import BasePublisher


class JsonPublisher(BasePublisher):
    @staticmethod
    def get_id() -> str:
        return 'json'

    @staticmethod
    def get_name() -> str:
        return 'JSON documents'

    @staticmethod
    def output_name(index: int, doc_file: DocFile) -> str:
        # Numbered so files with the same basename in different directories don't collide
        return f"{index}_{Path(doc_file.path).stem}.json"

    def publish(self, files: List[DocFile], directory: Path) -> List[Path]:
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        written: List[Path] = []
        index_entries = []
        for index, doc_file in enumerate(files, start=1):
            out_path = directory / self.output_name(index, doc_file)
            with open(out_path, 'w', encoding='utf-8') as f:
                json.dump(doc_file.to_dict(), f, indent=2)
            written.append(out_path)
            index_entries.append({
                'path': doc_file.path,
                'output': out_path.name,
                'overview': doc_file.overview.description,
                'symbol_count': len(doc_file.symbols),
            })

        index_path = directory / 'index.json'
        with open(index_path, 'w', encoding='utf-8') as f:
            json.dump({'files': index_entries}, f, indent=2)
        written.append(index_path)

        logger.info(f"Wrote {len(files)} documents to {directory}")
        return written
