"""Content hashes for change detection between Streamlit reruns."""

import hashlib
import json
from typing import Any, Dict

import polars as pl


def compute_dataframe_hash(df: pl.DataFrame) -> str:
    """
    Hash the full contents of a (small) DataFrame.

    Meant for clustered frames, whose size is bounded by the number of
    occupied grid cells, so every row takes part in the digest. Schema and
    row order are included.

    Args:
        df: Polars DataFrame to hash

    Returns:
        SHA256 hash string
    """
    digest = hashlib.sha256()
    digest.update(str(df.schema).encode())
    digest.update(str(df.height).encode())
    if df.height > 0:
        digest.update(df.hash_rows(seed=0).to_numpy().tobytes())
    return digest.hexdigest()


def compute_config_hash(config: Dict[str, Any]) -> str:
    """Hash a JSON-compatible config dict (non-JSON values are stringified)."""
    config_str = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(config_str.encode()).hexdigest()
