import uuid

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True)),
                ("venue", models.JSONField(blank=True, null=True)),
                ("timezone", models.CharField(default="America/New_York", max_length=50)),
                ("start_date", models.DateTimeField(blank=True, null=True)),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("active", "Active"),
                            ("contingent", "Contingent"),
                            ("canceled", "Canceled"),
                            ("completed", "Completed"),
                            ("postponed", "Postponed"),
                        ],
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="events_event_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="Offer",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, max_length=100)),
                ("description", models.TextField(blank=True)),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=8)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("min_order_quantity", models.PositiveIntegerField(default=1)),
                ("max_order_quantity", models.PositiveIntegerField(default=50)),
                ("start_sale_date", models.DateTimeField(blank=True, null=True)),
                ("end_sale_date", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="offers",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["event"], name="events_offer_event_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(quantity__gte=0), name="offer_quantity_non_negative"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(price__gte=0), name="offer_price_non_negative"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(min_order_quantity__gte=1), name="offer_min_order_at_least_one"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(max_order_quantity__gte=models.F("min_order_quantity")),
                        name="offer_max_order_not_below_min",
                    ),
                ],
            },
        ),
    ]
