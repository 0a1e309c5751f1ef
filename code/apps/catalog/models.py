# apps/catalog/models.py
from __future__ import annotations

from django.db import models

from .validators import ExclusionValidator


class Game(models.Model):
    """
    Exclusion rules over strings and integer ranges.

    ``legacy_os`` and ``haunted_floors`` are intentionally looser/wider than
    their neighbours so tests can show the matcher catching both mistakes.
    """

    supported_os = models.CharField(max_length=32, blank=True, validators=[ExclusionValidator(["Mac", "Linux"])])
    legacy_os = models.CharField(max_length=32, blank=True, validators=[ExclusionValidator(["Mac"])])

    floors_with_enemies = models.IntegerField(null=True, blank=True, validators=[ExclusionValidator(range(5, 9))])
    haunted_floors = models.IntegerField(null=True, blank=True, validators=[ExclusionValidator(range(5, 10))])
    basement_levels = models.IntegerField(null=True, blank=True, validators=[ExclusionValidator(range(0, 3))])

    weapon = models.CharField(
        max_length=32,
        blank=True,
        validators=[ExclusionValidator(["pistol", "paintball gun", "stick"], message="You chose a puny weapon")],
    )

    class Meta:
        db_table = "game"

    def __str__(self) -> str:
        return f"game:{self.pk}"


class Account(models.Model):
    email = models.EmailField(blank=True, default="")
    password_digest = models.CharField(max_length=128, blank=True, default="")

    class Meta:
        db_table = "account"

    @property
    def password(self) -> str:
        # derived from the digest; there is nothing to assign
        return self.password_digest

    @property
    def api_token(self) -> str:
        return f"tok-{self.pk}"


class Part(models.Model):
    name = models.CharField(max_length=64)

    class Meta:
        db_table = "part"


class Robot(models.Model):
    arms = models.IntegerField()
    legs = models.IntegerField(error_messages={"null": "Robot has no legs", "blank": "Robot has no legs"})
    nickname = models.CharField(max_length=32, blank=True, default="")

    owner = models.ForeignKey(Account, on_delete=models.CASCADE, related_name="robots")
    parts = models.ManyToManyField(Part, blank=True, related_name="robots")

    class Meta:
        db_table = "robot"

    def __str__(self) -> str:
        return self.nickname or f"robot:{self.pk}"
