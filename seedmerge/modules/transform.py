"""Conversion of flat seed entries into registry records."""
import copy
from typing import Any, Dict

from ..config import Config

STATUS_ACTIVE = "active"

def transform(seed_record: Dict[str, Any], now: str, namespace: str = None) -> Dict[str, Any]:
    """
    Convert one seed entry into a registry record.

    ``packages`` moves from the top level to ``server.packages``; every other
    field is copied unchanged. The input is never mutated.

    Args:
        seed_record: Flat seed entry
        now: ISO-8601 timestamp used for both publishedAt and updatedAt
        namespace: Key of the metadata envelope (default: Config.META_NAMESPACE)

    Returns:
        New registry record with ``server`` and ``_meta`` keys
    """
    if namespace is None:
        namespace = Config.META_NAMESPACE

    server = {k: copy.deepcopy(v) for k, v in seed_record.items() if k != "packages"}
    # Absent packages stay absent rather than becoming null
    if "packages" in seed_record:
        server["packages"] = copy.deepcopy(seed_record["packages"])

    return {
        "server": server,
        "_meta": {
            namespace: {
                "status": STATUS_ACTIVE,
                "publishedAt": now,
                "updatedAt": now,
                "isLatest": True,
            }
        },
    }
