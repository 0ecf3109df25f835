from uuid import uuid4

from tortoise import fields, models


class Visit(models.Model):
    id = fields.UUIDField(pk=True, default=uuid4)
    user = fields.ForeignKeyField("models.User", related_name="visits", on_delete=fields.CASCADE)
    property = fields.ForeignKeyField("models.Property", related_name="visits", on_delete=fields.CASCADE)

    visit_date = fields.DatetimeField()
    phone = fields.CharField(max_length=30, null=True)
    questions = fields.TextField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "visits"
