# app/db/seed_indexes.py
"""
Idempotent index seeding for the fun-facts collection.

- Matching by KEYS: if an index with the same keys exists, keep it when options match.
- If options differ (unique), drop & recreate.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING
from pymongo.operations import IndexModel

from app.core.settings import get_settings
from app.db.mongodb import get_collection

KeySpec = List[Tuple[str, int]]


def _normalize_key_from_mongo(key_doc: Dict[str, Any]) -> KeySpec:
    return [(k, int(v)) for k, v in key_doc.items()]


async def _find_existing_by_keys(coll, keys: KeySpec) -> Optional[Dict[str, Any]]:
    async for ix in coll.list_indexes():
        if "key" in ix and _normalize_key_from_mongo(ix["key"]) == keys:
            return ix
    return None


async def ensure_index(coll, keys: KeySpec, *, name: Optional[str] = None, unique: bool = False) -> None:
    existing = await _find_existing_by_keys(coll, keys)
    if existing and bool(existing.get("unique", False)) == unique:
        return
    if existing:
        await coll.drop_index(existing["name"])
    opts: Dict[str, Any] = {"unique": unique}
    if name:
        opts["name"] = name
    await coll.create_indexes([IndexModel(keys, **opts)])


async def ensure_indexes(coll=None) -> None:
    # ---------- fun facts : un seul document par code d'état ----------
    coll = coll if coll is not None else get_collection(get_settings().funfacts_collection)
    await ensure_index(coll, [("stateCode", ASCENDING)], name="uniq_state_code", unique=True)
