"""Stable backend boundary for hosts (renderer, remote-play transport, advice service).

This layer only speaks JSON-friendly structures:
- state snapshots
- move encode/decode (the opaque records a transport carries)
- apply/undo producing diffs suitable for animation
"""

from .facade import DamaApi, diff
from .serde import move_to_dict, dict_to_move, snapshot

__all__ = ["DamaApi", "diff", "move_to_dict", "dict_to_move", "snapshot"]
