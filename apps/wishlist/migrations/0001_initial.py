import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

from apps.wishlist.conf import get_wishlist_settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="StoredWishlist",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "identifier",
                    models.CharField(
                        help_text="External key the wishlist was stored under",
                        max_length=255,
                        unique=True,
                        verbose_name="Identifier",
                    ),
                ),
                (
                    "wishlist_instance",
                    models.CharField(
                        db_column="instance",
                        default="default",
                        help_text="Wishlist instance the content belongs to",
                        max_length=255,
                        verbose_name="Instance",
                    ),
                ),
                ("content", models.TextField(help_text="Serialized wishlist items", verbose_name="Content")),
            ],
            options={
                "verbose_name": "Stored wishlist",
                "verbose_name_plural": "Stored wishlists",
                "db_table": get_wishlist_settings().table,
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalStoredWishlist",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                (
                    "identifier",
                    models.CharField(
                        db_index=True,
                        help_text="External key the wishlist was stored under",
                        max_length=255,
                        verbose_name="Identifier",
                    ),
                ),
                (
                    "wishlist_instance",
                    models.CharField(
                        db_column="instance",
                        default="default",
                        help_text="Wishlist instance the content belongs to",
                        max_length=255,
                        verbose_name="Instance",
                    ),
                ),
                ("content", models.TextField(help_text="Serialized wishlist items", verbose_name="Content")),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical Stored wishlist",
                "verbose_name_plural": "historical Stored wishlists",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
