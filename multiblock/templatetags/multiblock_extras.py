# multiblock/templatetags/multiblock_extras.py
from django import template

from multiblock.registry import get_block_class

register = template.Library()


@register.filter
def block_title(block):
    """
    Display name for a BlockInstance record.
    Uses the configured title of its block type, or the raw blockname when
    the type is not registered.
    """
    block_class = get_block_class(block.blockname)
    if block_class is None:
        return block.blockname
    instance = block_class()
    instance.load_instance(block, None)
    return instance.get_title()


@register.filter
def region_label(region):
    """'side-pre' -> 'Side pre'"""
    if not region:
        return ""
    return str(region).replace("-", " ").replace("_", " ").capitalize()
