from django.db import models
from django.utils.translation import gettext_lazy as _


class Menu(models.Model):
    """Named container owning a forest of MenuItems."""

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Menu")
        verbose_name_plural = _("Menus")
        ordering = ["name"]

    def __str__(self):
        return self.name
