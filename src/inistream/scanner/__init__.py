"""Line scanner for inistream.

The scanner reads input one physical line at a time, classifies each line,
and yields events. Only the pending key group survives between lines.

Architecture:
scanner/
├── __init__.py      # Re-exports Scanner, LineKind
├── core.py          # Scanner class (state machine + flush protocol)
├── classify.py      # LineKind, classify_line, normalize_whitespace
├── lines.py         # iter_lines: line-splitting primitive
└── pending.py       # Empty | Accumulating pending-key state

Usage:
    >>> from inistream.scanner import Scanner
    >>> for event in Scanner("a = 1\\n  2").scan():
    ...     print(event.key, event.values)
    a ('1', '2')

"""

from inistream.scanner.classify import LineKind
from inistream.scanner.core import Scanner

__all__ = ["LineKind", "Scanner"]
