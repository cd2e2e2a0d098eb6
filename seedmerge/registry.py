import json
import logging
from typing import Any, Dict, List

from .config import Config
from .errors import InputError, ShapeError, WriteError
from .storage import FileStorage

logger = logging.getLogger(__name__)

def _load_json(path: str, storage: FileStorage) -> Any:
    try:
        raw = storage.read(path)
    except FileNotFoundError as e:
        raise InputError(path, "file not found") from e
    except OSError as e:
        raise InputError(path, f"cannot read file: {e}") from e

    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise InputError(path, f"not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise InputError(path, f"invalid JSON: {e}") from e

def parse_seed(data: Any, path: str = "<seed>") -> List[Dict[str, Any]]:
    """Check that ``data`` is a JSON array of objects and return it."""
    if not isinstance(data, list):
        raise ShapeError(path, "seed must be a JSON array")
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ShapeError(path, f"seed entry {index} is not an object")
    return data

def parse_registry(data: Any, path: str = "<registry>") -> Dict[str, Any]:
    """Check the fields the merge touches and return the document."""
    if not isinstance(data, dict):
        raise ShapeError(path, "registry must be a JSON object")
    servers = data.get("servers")
    if not isinstance(servers, list):
        raise ShapeError(path, "registry is missing a 'servers' array")
    if not isinstance(data.get("metadata"), dict):
        raise ShapeError(path, "registry is missing a 'metadata' object")
    for index, entry in enumerate(servers):
        if not isinstance(entry, dict) or not isinstance(entry.get("server"), dict):
            raise ShapeError(path, f"servers[{index}] has no 'server' object")
    return data

def load_seed(path: str, storage: FileStorage) -> List[Dict[str, Any]]:
    seed = parse_seed(_load_json(path, storage), path)
    logger.debug(f"Loaded {len(seed)} seed entries from {path}")
    return seed

def load_registry(path: str, storage: FileStorage) -> Dict[str, Any]:
    registry = parse_registry(_load_json(path, storage), path)
    logger.debug(f"Loaded registry with {len(registry['servers'])} servers from {path}")
    return registry

def serialize_registry(document: Dict[str, Any], indent: int = None) -> bytes:
    if indent is None:
        indent = Config.JSON_INDENT
    return json.dumps(document, indent=indent, ensure_ascii=False).encode("utf-8")

def save_registry(path: str, document: Dict[str, Any], storage: FileStorage) -> None:
    data = serialize_registry(document)
    try:
        storage.write(path, data)
    except OSError as e:
        raise WriteError(path, f"cannot write file: {e}") from e
    logger.debug(f"Wrote {len(data)} bytes to {path}")
