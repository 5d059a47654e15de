# blocks.py
# Typed block classes. A class wraps one BlockInstance record for rendering.

import json

from .registry import register


class BlockBase:
    blockname = None
    title = "Block"

    def __init__(self):
        self.instance = None
        self.page = None
        self.config = {}

    def load_instance(self, instance, page):
        """Attach the database record and the page it is shown on."""
        self.instance = instance
        self.page = page
        self.config = json.loads(instance.configdata) if instance.configdata else {}

    def get_title(self):
        return self.config.get("title") or self.title


@register("multiblock")
class MultiblockBlock(BlockBase):
    title = "Multiblock"

    def children(self):
        if self.instance is None:
            return []
        return list(self.instance.children())


@register("html")
class HtmlBlock(BlockBase):
    title = "Text"

    def get_content(self):
        return self.config.get("text", "")
