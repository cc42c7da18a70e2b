from django.core.validators import RegexValidator
from django.db import models

from .catalog import Arista, Rank, Role
from .scoring import ActivityType

signature_validator = RegexValidator(r"^#\S+$", "Signature must start with # and contain no spaces.")
birthday_validator = RegexValidator(r"^(0[1-9]|[12]\d|3[01])/(0[1-9]|1[0-2])$", "Birthday must use dd/mm format.")


class Member(models.Model):
    full_name = models.CharField(max_length=120)
    age = models.PositiveSmallIntegerField()
    birthday = models.CharField(max_length=5, validators=[birthday_validator])       # dd/mm
    face_claim = models.CharField(max_length=120)
    signature = models.CharField(max_length=64, unique=True, validators=[signature_validator])  # login handle, "#" prefixed
    facebook_link = models.URLField(max_length=255)
    motivation = models.TextField()
    role = models.CharField(max_length=8, choices=Role.choices, default=Role.USER)
    rank = models.CharField(max_length=32, choices=Rank.choices, default=Rank.ALMA_EN_TRANSITO)

    # Materialized from the member's activities; only services.recompute_stats writes these.
    total_trazos = models.PositiveBigIntegerField(default=0)
    total_words = models.PositiveBigIntegerField(default=0)
    total_activities = models.PositiveIntegerField(default=0)

    registration_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["-total_trazos", "id"], name="idx_member_trazos"),
            models.Index(fields=["-total_words", "id"], name="idx_member_words"),
        ]

    def __str__(self):
        return self.signature

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class Activity(models.Model):
    member = models.ForeignKey(Member, on_delete=models.CASCADE, related_name="activities")
    name = models.CharField(max_length=200)
    date = models.DateField()                                        # day the piece was written
    words = models.PositiveIntegerField()
    type = models.CharField(max_length=16, choices=ActivityType.choices)
    responses = models.PositiveIntegerField(default=0)
    link = models.URLField(max_length=500, blank=True, default="")
    description = models.TextField(blank=True, default="")
    arista = models.CharField(max_length=32, choices=Arista.choices)
    album = models.CharField(max_length=120)
    trazos = models.PositiveIntegerField(editable=False)             # fixed when the activity is scored
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["member", "-created_at"], name="idx_activity_member_created"),
        ]

    def __str__(self):
        return f"{self.name} ({self.type}, {self.trazos} trazos)"


class News(models.Model):
    title = models.CharField(max_length=200)
    content = models.TextField()
    author = models.ForeignKey(Member, on_delete=models.CASCADE, related_name="news")
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name_plural = "news"

    def __str__(self):
        return self.title


class Announcement(models.Model):
    title = models.CharField(max_length=200)
    content = models.TextField()
    author = models.ForeignKey(Member, on_delete=models.CASCADE, related_name="announcements")
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    def __str__(self):
        return self.title


class ActivityToDo(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField()
    arista = models.CharField(max_length=32, choices=Arista.choices)
    album = models.CharField(max_length=120)
    due_date = models.DateField(null=True, blank=True)
    author = models.ForeignKey(Member, on_delete=models.CASCADE, related_name="activities_to_do")
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name_plural = "activities to do"

    def __str__(self):
        return self.title
