from tortoise import fields
from tortoise.models import Model
from uuid import uuid4


class Bid(Model):
    id = fields.UUIDField(pk=True, default=uuid4)

    user = fields.ForeignKeyField("models.User", related_name="bids", on_delete=fields.CASCADE)
    property = fields.ForeignKeyField("models.Property", related_name="bids", on_delete=fields.CASCADE)

    amount = fields.DecimalField(max_digits=12, decimal_places=2)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "bids"

    async def save(self, *args, **kwargs):
        # Append-only: a bid row is written exactly once
        if self._saved_in_db:
            raise ValueError("Bids are immutable once placed")
        if self.amount is None or self.amount <= 0:
            raise ValueError("Amount must be greater than 0")
        await super().save(*args, **kwargs)

    async def delete(self, *args, **kwargs):
        raise ValueError("Bids cannot be deleted")
