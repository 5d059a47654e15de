import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from multiblock.exceptions import IntegrityFault
from multiblock.models import BlockInstance

pytestmark = pytest.mark.django_db


class TestManageMultiblock:

    def test_lists_children(self, logged_in_client, multiblock, child_a, child_b):
        resp = logged_in_client.get(reverse("multiblock:manage", args=[multiblock.id]))

        assert resp.status_code == 200
        assert list(resp.context["children"]) == list(multiblock.children())
        assert resp.context["page_layout"] == "admin"
        assert resp.context["page_context"] == multiblock.context
        content = resp.content.decode()
        assert "Welcome" in content
        assert reverse("multiblock:split_block", args=[multiblock.id, child_a.id]) in content

    def test_empty_multiblock(self, logged_in_client, multiblock):
        resp = logged_in_client.get(reverse("multiblock:manage", args=[multiblock.id]))
        assert resp.status_code == 200
        assert "no blocks yet" in resp.content.decode()

    def test_not_a_multiblock(self, logged_in_client, child_a):
        resp = logged_in_client.get(reverse("multiblock:manage", args=[child_a.id]))
        assert resp.status_code == 404

    def test_unknown_block(self, logged_in_client):
        resp = logged_in_client.get(reverse("multiblock:manage", args=[999]))
        assert resp.status_code == 404

    def test_requires_login(self, client, multiblock):
        resp = client.get(reverse("multiblock:manage", args=[multiblock.id]))
        assert resp.status_code == 302


class TestSplitBlockView:

    def test_moves_child_and_redirects(self, logged_in_client, user_context, multiblock, child_a):
        url = reverse("multiblock:split_block", args=[multiblock.id, child_a.id])
        resp = logged_in_client.post(url)

        assert resp.status_code == 302
        assert resp.url == reverse("multiblock:manage", args=[multiblock.id])
        child_a.refresh_from_db()
        assert child_a.parentcontext_id == user_context.id
        assert [m.message for m in get_messages(resp.wsgi_request)] == ["Block moved out of the multiblock."]

    def test_second_post_is_404(self, logged_in_client, multiblock, child_a):
        url = reverse("multiblock:split_block", args=[multiblock.id, child_a.id])
        logged_in_client.post(url)

        assert logged_in_client.post(url).status_code == 404

    def test_get_not_allowed(self, logged_in_client, multiblock, child_a):
        url = reverse("multiblock:split_block", args=[multiblock.id, child_a.id])
        assert logged_in_client.get(url).status_code == 405

    def test_integrity_fault_is_reported(self, logged_in_client, monkeypatch, multiblock, child_a):
        def broken(parent, childid):
            raise IntegrityFault("no page")

        monkeypatch.setattr("multiblock.helper.split_block", broken)
        resp = logged_in_client.post(reverse("multiblock:split_block", args=[multiblock.id, child_a.id]))

        assert resp.status_code == 302
        messages = [m for m in get_messages(resp.wsgi_request)]
        assert len(messages) == 1
        assert messages[0].level_tag == "error"


class TestSplitBlockApi:

    def test_success(self, logged_in_client, user_context, multiblock, child_a):
        resp = logged_in_client.post(
            reverse("multiblock:split_block_api", args=[multiblock.id]),
            {"childid": child_a.id},
            content_type="application/json",
        )

        assert resp.status_code == 200
        assert resp.json() == {
            "status": "success",
            "blockid": child_a.id,
            "parentcontextid": user_context.id,
        }

    def test_missing_childid(self, logged_in_client, multiblock):
        resp = logged_in_client.post(
            reverse("multiblock:split_block_api", args=[multiblock.id]),
            {},
            content_type="application/json",
        )
        assert resp.status_code == 400

    def test_unknown_parent(self, logged_in_client, child_a):
        resp = logged_in_client.post(
            reverse("multiblock:split_block_api", args=[999]),
            {"childid": child_a.id},
            content_type="application/json",
        )
        assert resp.status_code == 404

    def test_second_call_is_404(self, logged_in_client, multiblock, child_a):
        url = reverse("multiblock:split_block_api", args=[multiblock.id])
        logged_in_client.post(url, {"childid": child_a.id}, content_type="application/json")

        resp = logged_in_client.post(url, {"childid": child_a.id}, content_type="application/json")
        assert resp.status_code == 404
        assert resp.json()["status"] == "error"

    def test_integrity_fault_is_conflict(self, logged_in_client, monkeypatch, multiblock, child_a):
        def broken(parent, childid):
            raise IntegrityFault("no page")

        monkeypatch.setattr("multiblock.helper.split_block", broken)
        resp = logged_in_client.post(
            reverse("multiblock:split_block_api", args=[multiblock.id]),
            {"childid": child_a.id},
            content_type="application/json",
        )
        assert resp.status_code == 409

    def test_requires_authentication(self, client, multiblock, child_a):
        resp = client.post(
            reverse("multiblock:split_block_api", args=[multiblock.id]),
            {"childid": child_a.id},
            content_type="application/json",
        )
        assert resp.status_code == 403
        child_a.refresh_from_db()
        assert child_a.parentcontext_id == multiblock.context.id


class TestContextBlocks:

    def test_lists_blocks_with_effective_position(self, logged_in_client, user_context, multiblock,
                                                  child_a, multiblock_position):
        logged_in_client.post(reverse("multiblock:split_block", args=[multiblock.id, child_a.id]))

        resp = logged_in_client.get(reverse("multiblock:context_blocks", args=[user_context.id]))

        assert resp.status_code == 200
        data = resp.json()
        assert data["contextid"] == user_context.id
        assert data["path"] == user_context.path_ids
        placed = {b["id"]: (b["blockname"], b["region"], b["weight"]) for b in data["blocks"]}
        assert placed == {
            multiblock.id: ("multiblock", "side-post", -2),
            child_a.id: ("html", "side-post", -2),
        }

    def test_unknown_context(self, logged_in_client):
        resp = logged_in_client.get(reverse("multiblock:context_blocks", args=[999]))
        assert resp.status_code == 404


class TestAdmin:

    def test_changelists_render(self, admin_client, multiblock, child_a, multiblock_position):
        for name in ("context", "blockinstance", "blockposition"):
            resp = admin_client.get(reverse(f"admin:multiblock_{name}_changelist"))
            assert resp.status_code == 200

    def test_block_change_page(self, admin_client, multiblock):
        resp = admin_client.get(reverse("admin:multiblock_blockinstance_change", args=[multiblock.id]))
        assert resp.status_code == 200
        assert BlockInstance.objects.filter(pk=multiblock.id).exists()
