"""
Tortoise ORM models for users and their posts
"""
from tortoise.models import Model
from tortoise import fields


class User(Model):
    id = fields.IntField(pk=True)
    full_name = fields.CharField(max_length=255)
    email = fields.CharField(max_length=254, unique=True)
    username = fields.CharField(max_length=15, unique=True)
    date_of_birth = fields.DateField()
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "user"


class Post(Model):
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="posts", on_delete=fields.CASCADE)
    title = fields.CharField(max_length=20)
    description = fields.CharField(max_length=140)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "post"
