from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from menubuilder.linktypes import registry


class MenuItem(models.Model):
    """One node in a menu's tree.

    Ordering rules:
    - `order` is unique within the same (menu, parent) group at rest.
      Top-level items use parent=NULL and form their own group.
    - `menu` never changes after creation.

    There is deliberately no DB unique constraint on (menu, parent, order):
    shifting siblings is a single UPDATE ... SET order = order + 1, which some
    backends check row by row. The services in menubuilder.services keep the
    invariant instead.
    """

    class Target(models.TextChoices):
        SELF = "_self", _("Same window")
        BLANK = "_blank", _("New window")

    menu = models.ForeignKey(
        "menubuilder.Menu",
        on_delete=models.CASCADE,
        related_name="items",
    )
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        related_name="children",
        on_delete=models.CASCADE,
    )
    order = models.PositiveIntegerField(default=1)

    name = models.CharField(max_length=255)
    # Dotted path of the MenuLinkable that interprets value/data.
    link_class = models.CharField(max_length=255, db_column="class")
    value = models.CharField(max_length=1000, blank=True, default="")
    target = models.CharField(max_length=10, choices=Target.choices, default=Target.SELF)
    enabled = models.BooleanField(default=True)
    parameters = models.JSONField(null=True, blank=True)
    data = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    history = HistoricalRecords()

    class Meta:
        verbose_name = _("Menu item")
        verbose_name_plural = _("Menu items")
        ordering = ["menu_id", "parent_id", "order", "id"]
        indexes = [models.Index(fields=["menu", "parent", "order"], name="menuitem_sibling_order_idx")]

    def __str__(self):
        return self.name

    @property
    def link_type(self):
        """The registered MenuLinkable for this item, or None if unresolvable."""
        return registry.resolve(self.link_class)

    @property
    def href(self):
        link_type = self.link_type
        if link_type is None:
            return None
        return link_type.get_value(self.value, self.data, self.parameters)

    def to_dict(self):
        return {
            "id": self.id,
            "menu_id": self.menu_id,
            "parent_id": self.parent_id,
            "order": self.order,
            "name": self.name,
            "class": self.link_class,
            "value": self.value,
            "target": self.target,
            "enabled": self.enabled,
            "parameters": self.parameters,
            "data": self.data,
            "href": self.href,
        }
