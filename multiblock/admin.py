from django.contrib import admin

from .models import BlockInstance, BlockPosition, Context


@admin.register(Context)
class ContextAdmin(admin.ModelAdmin):
    list_display = ("id", "contextlevel", "instanceid", "path", "depth")
    list_filter = ("contextlevel",)
    search_fields = ("path",)


class BlockPositionInline(admin.TabularInline):
    model = BlockPosition
    extra = 0


@admin.register(BlockInstance)
class BlockInstanceAdmin(admin.ModelAdmin):
    list_display = ("id", "blockname", "parentcontext", "defaultregion", "defaultweight", "timemodified")
    list_filter = ("blockname", "defaultregion")
    search_fields = ("blockname",)
    inlines = [BlockPositionInline]


@admin.register(BlockPosition)
class BlockPositionAdmin(admin.ModelAdmin):
    list_display = ("blockinstance", "context", "region", "weight", "visible")
