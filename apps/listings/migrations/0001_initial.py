import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Listing",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("image_src", models.URLField(max_length=500)),
                ("category", models.CharField(max_length=100)),
                ("room_count", models.PositiveSmallIntegerField(default=1)),
                ("bathroom_count", models.PositiveSmallIntegerField(default=1)),
                ("guest_count", models.PositiveSmallIntegerField(default=1)),
                ("country", models.CharField(max_length=100)),
                ("region", models.CharField(blank=True, max_length=100)),
                (
                    "latlng",
                    models.JSONField(blank=True, default=list, help_text="Coordinate pair [latitude, longitude]."),
                ),
                ("price", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["owner", "created_at"], name="listings_li_owner_i_5c1f0e_idx"),
                    models.Index(fields=["category"], name="listings_li_categor_3b7a2d_idx"),
                    models.Index(fields=["country"], name="listings_li_country_9e4c61_idx"),
                ],
            },
        ),
    ]
