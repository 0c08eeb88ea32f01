from django.contrib import admin, messages
from django.db import transaction
from django.shortcuts import redirect
from django.utils.translation import gettext_lazy as _
from django_object_actions import DjangoObjectActions, action
from unfold.admin import ModelAdmin

from .forms import MenuItemForm
from .models import Menu, MenuItem
from .services.duplication import duplicate_item
from .services.ordering import lock_menu, next_order
from .services.tree import delete_item


class MenuItemAdminForm(MenuItemForm):
    # Unchecked checkboxes are simply missing from an HTML post.
    PRESENT_FIELDS = ()


@admin.register(Menu)
class MenuAdmin(ModelAdmin):
    list_display = ("name", "slug", "item_count", "created_at")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}

    @admin.display(description=_("Items"))
    def item_count(self, obj):
        return obj.items.count()


@admin.register(MenuItem)
class MenuItemAdmin(DjangoObjectActions, ModelAdmin):
    form = MenuItemAdminForm
    list_display = ("name", "menu", "parent", "order", "link_class", "enabled")
    list_filter = ("menu", "enabled")
    search_fields = ("name", "value")
    ordering = ("menu", "parent_id", "order")
    readonly_fields = ("order",)
    autocomplete_fields = ("parent",)

    fieldsets = (
        (_("General"), {"fields": ("menu", "parent", "order", "name", "enabled")}),
        (_("Link"), {"fields": ("link_class", "value", "target", "parameters", "data")}),
    )

    actions = ["duplicate_selected"]
    change_actions = ("duplicate_action",)

    def save_model(self, request, obj, form, change):
        # New items and items moved to another parent go to the end of the group.
        if not change or "parent" in form.changed_data:
            lock_menu(obj.menu_id)
            obj.order = next_order(obj.menu_id, obj.parent_id)
        super().save_model(request, obj, form, change)

    def delete_model(self, request, obj):
        delete_item(obj)

    @transaction.atomic
    def delete_queryset(self, request, queryset):
        for obj in queryset:
            # May already be gone as a descendant of an earlier row.
            if MenuItem.objects.filter(pk=obj.pk).exists():
                delete_item(obj)

    @action(label="Duplicate", description="Copy this item and its children")
    def duplicate_action(self, request, obj):
        clone = duplicate_item(obj)
        self.message_user(request, f"Duplicated as #{clone.pk}.", level=messages.SUCCESS)
        return redirect("admin:menubuilder_menuitem_change", clone.pk)

    @admin.action(description="Duplicate selected items")
    def duplicate_selected(self, request, queryset):
        count = 0
        for obj in queryset:
            duplicate_item(obj)
            count += 1
        self.message_user(request, f"Duplicated {count} item(s).", level=messages.SUCCESS)
