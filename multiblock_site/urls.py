from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # Delegate everything else to the multiblock app
    path('', include('multiblock.urls')),
]
