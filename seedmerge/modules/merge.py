"""Idempotent merge of seed entries into a registry document."""
import logging
from typing import Any, Dict, Iterable

from ..clock import Clock, format_timestamp
from ..registry import load_registry, load_seed, save_registry
from ..storage import FileStorage
from .models import EntryOutcome, MergeAction, MergeResult
from .transform import transform

logger = logging.getLogger(__name__)

def _is_key(name: Any) -> bool:
    # Object and array names never match any other name
    return not isinstance(name, (dict, list))

def merge(seed_records: Iterable[Dict[str, Any]], document: Dict[str, Any], now: str) -> MergeResult:
    """
    Add every seed entry whose name is not yet registered.

    Names added during the pass count as registered, so when the seed holds
    several entries with the same name only the first one is added.

    The input document is left untouched; the result carries a shallow copy
    with new ``servers`` and ``metadata`` containers.

    Args:
        seed_records: Seed entries in input order
        document: Parsed registry document
        now: ISO-8601 timestamp stamped on new records

    Returns:
        MergeResult with the updated document and added/skipped counts
    """
    servers = list(document["servers"])
    known_names = {
        entry["server"].get("name") for entry in servers
        if _is_key(entry["server"].get("name"))
    }
    result = MergeResult(document={})

    for seed_record in seed_records:
        name = seed_record.get("name")
        version = seed_record.get("version")

        if _is_key(name) and name in known_names:
            logger.debug(f"Skipping {name}: already registered")
            result.skipped += 1
            result.outcomes.append(EntryOutcome(name, version, MergeAction.SKIPPED))
            continue

        servers.append(transform(seed_record, now))
        if _is_key(name):
            known_names.add(name)
        logger.debug(f"Added {name} (v{version})")
        result.added += 1
        result.outcomes.append(EntryOutcome(name, version, MergeAction.ADDED))

    updated = dict(document)
    updated["servers"] = servers
    updated["metadata"] = dict(document["metadata"])
    updated["metadata"]["count"] = len(servers)
    result.document = updated
    return result

def run_merge(
    seed_path: str,
    registry_path: str,
    storage: FileStorage,
    clock: Clock,
    dry_run: bool = False
) -> MergeResult:
    """
    Load both files, merge, and write the registry back.

    Nothing is written unless loading and merging both succeed.

    Raises:
        InputError: If either file is missing, unreadable or malformed
        WriteError: If the registry cannot be written
    """
    seed = load_seed(seed_path, storage)
    registry = load_registry(registry_path, storage)

    result = merge(seed, registry, format_timestamp(clock.now()))
    logger.info(
        f"Merged {seed_path} into {registry_path}: "
        f"{result.added} added, {result.skipped} skipped, {result.total} total"
    )

    if dry_run:
        logger.info("Dry run: registry not written")
    else:
        save_registry(registry_path, result.document, storage)
    return result
