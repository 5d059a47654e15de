import json

import pytest

from multiblock.models import (
    CONTEXT_SYSTEM, CONTEXT_USER, BlockInstance, BlockPosition, Context,
)


@pytest.fixture
def system_context(db):
    return Context.objects.create_context(CONTEXT_SYSTEM, 0)


@pytest.fixture
def user_context(system_context):
    """A user's dashboard hangs off their user context."""
    return Context.objects.create_context(CONTEXT_USER, 42, parent=system_context)


@pytest.fixture
def multiblock(user_context):
    return BlockInstance.objects.add_block(
        "multiblock",
        user_context,
        showinsubcontexts=True,
        requiredbytheme=True,
        pagetypepattern="my-index",
        subpagepattern="7",
        defaultregion="content",
        defaultweight=3,
    )


@pytest.fixture
def child_a(multiblock):
    return BlockInstance.objects.add_block(
        "html",
        multiblock.context,
        defaultregion="side-pre",
        defaultweight=0,
        configdata=json.dumps({"title": "Welcome", "text": "<p>Hello</p>"}),
    )


@pytest.fixture
def child_b(multiblock):
    return BlockInstance.objects.add_block("html", multiblock.context, defaultweight=1)


@pytest.fixture
def grandchild(child_a):
    """A block nested inside child_a's own context."""
    return BlockInstance.objects.add_block("html", child_a.context)


@pytest.fixture
def multiblock_position(multiblock, user_context):
    return BlockPosition.objects.create(
        blockinstance=multiblock,
        context=user_context,
        pagetype="my-index",
        subpage="7",
        visible=True,
        region="side-post",
        weight=-2,
    )


@pytest.fixture
def logged_in_client(client, django_user_model):
    user = django_user_model.objects.create_user(username="editor", password="pass1234")
    client.force_login(user)
    return client
