"""Post-processors.

Post-processors reorganize the content of an event before it is analyzed.
Available post-processors:
- `merge_lists`: moves objects between named lists
"""

from .base import PostBase
from .manager import PostManager
from .merge import ListMergingProcessor
