"""Scan several INI files and report syntax errors with file and line."""

import sys
from pathlib import Path

from inistream import IniSyntaxError, KeyValueEvent, scan

for name in sys.argv[1:]:
    path = Path(name)
    with path.open(encoding="utf-8") as f:
        try:
            keys = sum(isinstance(e, KeyValueEvent) for e in scan(f, source_file=str(path)))
        except IniSyntaxError as e:
            print(f"error: {e}")
            continue
    print(f"{path}: {keys} keys")
