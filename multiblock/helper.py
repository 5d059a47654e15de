# helper.py
# Supporting infrastructure for multiblock editing: page bootstrap,
# ancestor lookup and splitting a child block back out of its container.

import logging

from django.conf import settings
from django.db import transaction
from django.utils.timezone import now

from .exceptions import IntegrityFault, NotFoundError
from .models import CONTEXT_BLOCK, BlockInstance, BlockPosition, Context
from .registry import get_block_class

logger = logging.getLogger(__name__)

# Display policy a split child takes over from the multiblock it leaves.
INHERITED_FIELDS = (
    'showinsubcontexts',
    'requiredbytheme',
    'pagetypepattern',
    'subpagepattern',
    'defaultregion',
    'defaultweight',
)


def _block_context(blockid):
    try:
        return Context.objects.get_for_instance(CONTEXT_BLOCK, blockid)
    except Context.DoesNotExist as exc:
        raise NotFoundError(f"No block context for block id {blockid}") from exc


def bootstrap_page(blockid, page):
    """
    Load the block record and its typed instance, then point `page` at the
    block's context, URL and the configured layout.

    Returns (record, instance); instance is None for unregistered block types.
    """
    blockctx = _block_context(blockid)
    try:
        block = BlockInstance.objects.get(pk=blockid)
    except BlockInstance.DoesNotExist as exc:
        raise NotFoundError(f"Block instance {blockid} does not exist") from exc

    blockinstance = None
    block_class = get_block_class(block.blockname)
    if block_class is not None:
        blockinstance = block_class()
        blockinstance.load_instance(block, page)
    else:
        logger.warning("No block class registered for '%s' (block %s)", block.blockname, blockid)

    page.set_context(blockctx)
    page.set_url(blockctx.get_url())
    page.set_pagelayout(getattr(settings, 'MULTIBLOCK_PAGE_LAYOUT', 'admin'))

    return block, blockinstance


def find_nearest_nonblock_ancestor(blockid):
    """
    Find the closest ancestor of a block's context that is not a block context.

    A dashboard hangs off a user context, which holds the multiblock's context,
    which in turn holds the child blocks. Given a child block id this walks up
    from the child until it leaves block contexts behind.
    """
    context = _block_context(blockid)

    for contextid in reversed(context.ancestor_ids):
        try:
            parentcontext = Context.objects.get(pk=contextid)
        except Context.DoesNotExist as exc:
            raise NotFoundError(
                f"Context {contextid} on the path of block {blockid} does not exist"
            ) from exc
        if parentcontext.contextlevel != CONTEXT_BLOCK:
            return parentcontext

    logger.error("Block %s has no non-block ancestor (path %s)", blockid, context.path)
    raise IntegrityFault(f"Could not find parent non-block ancestor for block id {blockid}")


@transaction.atomic
def split_block(parent, childid):
    """
    Move a subblock out of the multiblock `parent` and into the context
    the multiblock itself lives in.

    parent:  the multiblock's BlockInstance.
    childid: id of the subblock; it must currently sit inside `parent`.
    """
    container = _block_context(parent.id)
    try:
        subblock = BlockInstance.objects.get(pk=childid, parentcontext=container)
    except BlockInstance.DoesNotExist as exc:
        raise NotFoundError(f"Block {childid} is not inside multiblock {parent.id}") from exc

    parentcontext = find_nearest_nonblock_ancestor(childid)

    for field in INHERITED_FIELDS:
        setattr(subblock, field, getattr(parent, field))

    subblock.parentcontext = parentcontext
    subblock.timemodified = now()
    subblock.save()

    # Mirror the multiblock's own position override, if it has one.
    parentposition = BlockPosition.objects.filter(
        context=parentcontext,
        blockinstance=parent,
    ).first()
    if parentposition:
        parentposition.pk = None
        parentposition.blockinstance_id = subblock.id
        parentposition.save(force_insert=True)

    childcontext = _block_context(childid)
    childcontext.update_moved(parentcontext)

    logger.info(
        "Split block %s out of multiblock %s into context %s",
        childid, parent.id, parentcontext.id,
    )
