from django.urls import path

from . import views

app_name = "multiblock"

urlpatterns = [
    # Multiblock management pages
    path("multiblock/<int:blockid>/manage/", views.manage_multiblock, name="manage"),
    path("multiblock/<int:blockid>/split/<int:childid>/", views.split_block_view, name="split_block"),

    # JSON endpoints
    path("api/multiblock/<int:blockid>/split/", views.split_block_api, name="split_block_api"),
    path("api/context/<int:contextid>/blocks/", views.context_blocks, name="context_blocks"),
]
