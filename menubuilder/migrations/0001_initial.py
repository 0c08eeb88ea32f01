import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Menu",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Menu",
                "verbose_name_plural": "Menus",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=1)),
                ("name", models.CharField(max_length=255)),
                ("link_class", models.CharField(db_column="class", max_length=255)),
                ("value", models.CharField(blank=True, default="", max_length=1000)),
                ("target", models.CharField(choices=[("_self", "Same window"), ("_blank", "New window")], default="_self", max_length=10)),
                ("enabled", models.BooleanField(default=True)),
                ("parameters", models.JSONField(blank=True, null=True)),
                ("data", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("menu", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="items", to="menubuilder.menu")),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="children", to="menubuilder.menuitem")),
            ],
            options={
                "verbose_name": "Menu item",
                "verbose_name_plural": "Menu items",
                "ordering": ["menu_id", "parent_id", "order", "id"],
                "indexes": [models.Index(fields=["menu", "parent", "order"], name="menuitem_sibling_order_idx")],
            },
        ),
        migrations.CreateModel(
            name="HistoricalMenuItem",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=1)),
                ("name", models.CharField(max_length=255)),
                ("link_class", models.CharField(db_column="class", max_length=255)),
                ("value", models.CharField(blank=True, default="", max_length=1000)),
                ("target", models.CharField(choices=[("_self", "Same window"), ("_blank", "New window")], default="_self", max_length=10)),
                ("enabled", models.BooleanField(default=True)),
                ("parameters", models.JSONField(blank=True, null=True)),
                ("data", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                ("history_type", models.CharField(choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")], max_length=1)),
                ("history_user", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("menu", models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name="+", to="menubuilder.menu")),
                ("parent", models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name="+", to="menubuilder.menuitem")),
            ],
            options={
                "verbose_name": "historical Menu item",
                "verbose_name_plural": "historical Menu items",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
