from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


def encode_path(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    return str(path)


def decode_path(data: Optional[str]) -> Optional[Path]:
    if data is None:
        return None
    return Path(data)


def encode_entries(entries: Mapping[str, Sequence[str]]) -> Dict[str, List[str]]:
    return {library: list(markup) for library, markup in entries.items()}


def decode_entries(data: Any) -> Dict[str, Tuple[str, ...]]:
    if data is None:
        return {}
    return {library: tuple(markup) for library, markup in data.items()}


def resolve_path(path: Optional[Path], base_dir: Optional[Path]) -> Optional[Path]:
    """Return ``path`` anchored at ``base_dir`` when it is relative."""
    if path is None or base_dir is None or path.is_absolute():
        return path
    return base_dir / path
