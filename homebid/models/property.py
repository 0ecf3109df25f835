from datetime import datetime, timezone
from uuid import uuid4

from tortoise import fields, models


class Property(models.Model):
    id = fields.UUIDField(pk=True, default=uuid4)
    title = fields.CharField(max_length=255)
    address = fields.CharField(max_length=255)
    city = fields.CharField(max_length=100)
    state = fields.CharField(max_length=50)
    zip_code = fields.CharField(max_length=10, index=True)
    description = fields.TextField()

    asking_price = fields.DecimalField(max_digits=12, decimal_places=2)
    beds = fields.IntField()
    baths = fields.DecimalField(max_digits=3, decimal_places=1)
    square_feet = fields.IntField()
    garage_spaces = fields.IntField(default=0)

    featured_image = fields.CharField(max_length=500)
    images = fields.JSONField(default=list)
    features = fields.JSONField(default=list)

    is_featured = fields.BooleanField(default=False)
    is_new_listing = fields.BooleanField(default=False)
    is_hot_property = fields.BooleanField(default=False)

    # Auction close
    end_date = fields.DatetimeField()
    view_count = fields.IntField(default=0)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "properties"

    def __str__(self):
        return f"{self.title} ({self.zip_code})"

    def is_closed(self, now: datetime) -> bool:
        end_date = self.end_date
        if end_date.tzinfo is None:
            end_date = end_date.replace(tzinfo=timezone.utc)
        return now > end_date
