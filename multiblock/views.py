import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import JSONParser, FormParser

from . import helper
from .blocks import MultiblockBlock
from .exceptions import IntegrityFault, NotFoundError
from .models import BlockInstance, Context
from .page import Page

logger = logging.getLogger(__name__)


@login_required
def manage_multiblock(request, blockid):
    """List the subblocks of a multiblock with a 'move out' action for each."""
    page = Page(request)
    try:
        block, blockinstance = helper.bootstrap_page(blockid, page)
    except NotFoundError:
        raise Http404("Block not found.")

    if not isinstance(blockinstance, MultiblockBlock):
        raise Http404("This block is not a multiblock.")

    context = {
        **page.as_template_context(),
        "block": block,
        "blockinstance": blockinstance,
        "children": blockinstance.children(),
    }
    return render(request, "multiblock/manage.html", context)


@login_required
@require_POST
def split_block_view(request, blockid, childid):
    parent = get_object_or_404(BlockInstance, pk=blockid)

    try:
        helper.split_block(parent, childid)
    except NotFoundError:
        raise Http404("Block not found in this multiblock.")
    except IntegrityFault as e:
        logger.error("Split of block %s from %s failed: %s", childid, blockid, e)
        messages.error(request, "This block could not be moved: its page could not be found.")
        return redirect("multiblock:manage", blockid=blockid)

    messages.success(request, "Block moved out of the multiblock.")
    return redirect("multiblock:manage", blockid=blockid)


# ---------------------------------------
# DRF endpoints: return JSON (for AJAX)
# ---------------------------------------
@api_view(["POST"])
@parser_classes([JSONParser, FormParser])
def split_block_api(request, blockid):
    try:
        childid = int(request.data.get("childid"))
    except (TypeError, ValueError):
        return JsonResponse({"status": "error", "message": "childid must be an integer"}, status=400)

    parent = BlockInstance.objects.filter(pk=blockid).first()
    if parent is None:
        return JsonResponse({"status": "error", "message": f"Block {blockid} not found"}, status=404)

    try:
        helper.split_block(parent, childid)
    except NotFoundError as e:
        return JsonResponse({"status": "error", "message": str(e)}, status=404)
    except IntegrityFault as e:
        return JsonResponse({"status": "error", "message": str(e)}, status=409)

    child = BlockInstance.objects.get(pk=childid)
    return JsonResponse({
        "status": "success",
        "blockid": child.id,
        "parentcontextid": child.parentcontext_id,
    })


@api_view(["GET"])
def context_blocks(request, contextid):
    """Blocks placed directly on a context, with their effective region/weight."""
    context = get_object_or_404(Context, pk=contextid)

    blocks = []
    for block in context.block_instances.all():
        region, weight = block.effective_position(context)
        blocks.append({
            "id": block.id,
            "blockname": block.blockname,
            "region": region,
            "weight": weight,
            "timemodified": block.timemodified.isoformat(),
        })
    blocks.sort(key=lambda b: (b["region"], b["weight"], b["id"]))

    return JsonResponse({"contextid": context.id, "path": context.path_ids, "blocks": blocks})
