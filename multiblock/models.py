from django.db import models, transaction
from django.urls import reverse
from django.utils.timezone import now

#************************
# Context levels
#************************
CONTEXT_SYSTEM    = 10
CONTEXT_USER      = 30
CONTEXT_COURSECAT = 40
CONTEXT_COURSE    = 50
CONTEXT_MODULE    = 70
CONTEXT_BLOCK     = 80

CONTEXTLEVEL_CHOICES = [
    (CONTEXT_SYSTEM,    'System'),
    (CONTEXT_USER,      'User'),
    (CONTEXT_COURSECAT, 'Course category'),
    (CONTEXT_COURSE,    'Course'),
    (CONTEXT_MODULE,    'Activity module'),
    (CONTEXT_BLOCK,     'Block'),
]


#****************
# Context tree
#****************
class ContextManager(models.Manager):

    def create_context(self, contextlevel, instanceid, parent=None, **kwargs):
        """Create a context node and materialise its path under `parent`."""
        with transaction.atomic():
            ctx = self.create(contextlevel=contextlevel, instanceid=instanceid, **kwargs)
            if parent is not None:
                ctx.path = f"{parent.path}/{ctx.id}"
                ctx.depth = parent.depth + 1
            else:
                ctx.path = f"/{ctx.id}"
                ctx.depth = 1
            ctx.save(update_fields=['path', 'depth'])
        return ctx

    def get_for_instance(self, contextlevel, instanceid):
        return self.get(contextlevel=contextlevel, instanceid=instanceid)


class Context(models.Model):
    """
    A node of the context hierarchy. `path` lists the ids from the root down
    to this node, e.g. "/1/5/9/14"; use `path_ids` rather than the raw string.
    """
    contextlevel = models.PositiveIntegerField(choices=CONTEXTLEVEL_CHOICES)
    instanceid   = models.PositiveIntegerField()
    path         = models.CharField(max_length=255, blank=True, default='', db_index=True)
    depth        = models.PositiveSmallIntegerField(default=0)

    objects = ContextManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['contextlevel', 'instanceid'],
                name='unique_context_instance',
            )
        ]

    @property
    def path_ids(self):
        return [int(part) for part in self.path.split('/') if part]

    @property
    def ancestor_ids(self):
        """Ids of the ancestors, root first, excluding this context."""
        return [cid for cid in self.path_ids if cid != self.id]

    @property
    def is_block(self):
        return self.contextlevel == CONTEXT_BLOCK

    def get_parent_context(self):
        ancestors = self.ancestor_ids
        if not ancestors:
            return None
        return Context.objects.get(pk=ancestors[-1])

    def get_url(self):
        # Blocks have no page of their own, they live on their parent's page.
        if self.is_block:
            parent = self.get_parent_context()
            if parent is not None:
                return parent.get_url()
        return reverse('multiblock:context_blocks', args=[self.id])

    def update_moved(self, newparent):
        """Re-root this context and everything below it under `newparent`."""
        old_path = self.path
        new_path = f"{newparent.path}/{self.id}"
        depth_delta = newparent.depth + 1 - self.depth

        with transaction.atomic():
            descendants = list(Context.objects.filter(path__startswith=f"{old_path}/"))
            for ctx in descendants:
                ctx.path = new_path + ctx.path[len(old_path):]
                ctx.depth += depth_delta
            Context.objects.bulk_update(descendants, ['path', 'depth'])

            self.path = new_path
            self.depth = newparent.depth + 1
            self.save(update_fields=['path', 'depth'])

    def __str__(self):
        return f"{self.get_contextlevel_display()} {self.instanceid} ({self.path})"


#************************
# Block instances
#************************
class BlockInstanceManager(models.Manager):

    def add_block(self, blockname, parentcontext, **fields):
        """Create a block on `parentcontext` together with its own block context."""
        with transaction.atomic():
            block = self.create(blockname=blockname, parentcontext=parentcontext, **fields)
            Context.objects.create_context(CONTEXT_BLOCK, block.id, parent=parentcontext)
        return block


class BlockInstance(models.Model):
    blockname         = models.CharField(max_length=40, db_index=True)
    parentcontext     = models.ForeignKey(
                            Context,
                            on_delete=models.CASCADE,
                            db_column='parentcontextid',
                            related_name='block_instances'
                        )
    showinsubcontexts = models.BooleanField(default=False)
    requiredbytheme   = models.BooleanField(default=False)
    pagetypepattern   = models.CharField(max_length=64, default='*')
    subpagepattern    = models.CharField(max_length=16, null=True, blank=True)
    defaultregion     = models.CharField(max_length=16, default='side-pre')
    defaultweight     = models.IntegerField(default=0)
    configdata        = models.TextField(blank=True, default='')
    timecreated       = models.DateTimeField(default=now)
    timemodified      = models.DateTimeField(default=now)

    objects = BlockInstanceManager()

    class Meta:
        ordering = ['defaultregion', 'defaultweight', 'id']

    @property
    def context(self):
        return Context.objects.get_for_instance(CONTEXT_BLOCK, self.id)

    def children(self):
        """Blocks hosted inside this block's context."""
        return BlockInstance.objects.filter(parentcontext=self.context)

    def effective_position(self, context):
        """Return (region, weight), preferring a BlockPosition override on `context`."""
        position = self.positions.filter(context=context).first()
        if position:
            return position.region, position.weight
        return self.defaultregion, self.defaultweight

    def __str__(self):
        return f"{self.blockname} #{self.pk}"


class BlockPosition(models.Model):
    """Per-context override of where a block is displayed."""
    blockinstance = models.ForeignKey(
                        BlockInstance,
                        on_delete=models.CASCADE,
                        related_name='positions'
                    )
    context       = models.ForeignKey(
                        Context,
                        on_delete=models.CASCADE,
                        db_column='contextid',
                        related_name='block_positions'
                    )
    pagetype      = models.CharField(max_length=64, default='*')
    subpage       = models.CharField(max_length=16, blank=True, default='')
    visible       = models.BooleanField(default=True)
    region        = models.CharField(max_length=16)
    weight        = models.IntegerField(default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['context', 'blockinstance'],
                name='unique_block_position',
            )
        ]

    def __str__(self):
        return f"{self.blockinstance} @ {self.context_id}: {self.region}/{self.weight}"
