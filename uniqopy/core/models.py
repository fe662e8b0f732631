from dataclasses import dataclass
from pathlib import Path


@dataclass
class CopyPlan:
    """
    Everything needed to perform one copy, computed before touching disk.
    """
    source: Path
    fingerprint: str
    timestamp: str
    destination_name: str
    dest_dir: Path

    @property
    def destination(self) -> Path:
        return self.dest_dir / self.destination_name


@dataclass
class CopyResult:
    source: Path
    destination: Path
    bytes_copied: int
