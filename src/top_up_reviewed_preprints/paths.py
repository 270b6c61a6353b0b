"""Cache file locations."""

from dataclasses import dataclass
from pathlib import Path

CACHE_NAME = "reviewed-preprints"


@dataclass(frozen=True)
class CachePaths:
    root: Path
    list_file: Path
    new_list_file: Path
    detail_dir: Path

    def detail_file(self, msid: str) -> Path:
        return self.detail_dir / f"{msid}.json"


def get_cache_paths(cache_dir: str | Path = ".cached") -> CachePaths:
    root = Path(cache_dir).expanduser()
    return CachePaths(
        root=root,
        list_file=root / f"{CACHE_NAME}.json",
        new_list_file=root / f"{CACHE_NAME}-new.json",
        detail_dir=root / CACHE_NAME,
    )
