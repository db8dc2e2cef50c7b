"""
Static seed datasets.

One JSON file per collection, each an ordered list of records. Files are
read once per process; callers always receive their own deep copy.
"""

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog

logger = structlog.get_logger(__name__)

SEED_DIR = Path(__file__).parent

COLLECTIONS = ("skills", "users", "matches", "sessions", "transactions")


@lru_cache(maxsize=None)
def _read_seed_file(path: Path) -> tuple:
    with path.open(encoding="utf-8") as fh:
        records = json.load(fh)
    logger.debug("Loaded seed dataset", path=str(path), count=len(records))
    return tuple(records)


def load_seed(
    collection: str, seed_dir: Optional[Union[str, Path]] = None
) -> List[Dict[str, Any]]:
    """
    Load the seed records for a collection.

    Records are returned as raw mappings. Repositories parse them through
    their entity models, so a malformed record fails at construction and
    fields the model does not declare are silently dropped.

    Args:
        collection: One of COLLECTIONS
        seed_dir: Directory holding ``<collection>.json`` (default: this package)

    Returns:
        A fresh deep copy of the records in file order
    """
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown seed collection: {collection}")

    path = Path(seed_dir or SEED_DIR).resolve() / f"{collection}.json"
    return copy.deepcopy(list(_read_seed_file(path)))
