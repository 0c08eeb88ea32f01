from django.urls import path

from menubuilder.views import api

app_name = "menubuilder"

urlpatterns = [
    path("menus/<int:menu_id>/items/", api.menu_items, name="menu-items"),
    path("items/", api.create_item, name="item-create"),
    path("items/<int:pk>/", api.get_item, name="item-detail"),
    path("items/<int:pk>/update/", api.update_item, name="item-update"),
    path("items/<int:pk>/delete/", api.delete_item, name="item-delete"),
    path("items/<int:pk>/duplicate/", api.duplicate_item, name="item-duplicate"),
    path("item-types/<str:locale>/", api.item_types, name="item-types"),
]
