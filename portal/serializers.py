# portal/serializers.py
import datetime as dt

from django.utils import timezone
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from .catalog import Arista, Rank, Role, albums_for, medal_for
from .models import Activity, ActivityToDo, Announcement, Member, News, signature_validator
from .scoring import ActivityType

# Largest count the activity columns (32-bit integers) can store.
MAX_COUNT = 2147483647


class AwareDateTimeField(serializers.DateTimeField):
    """
    Datetime field that ensures tz-aware UTC datetimes.
    - Accepts ISO strings with/without timezone; if naive → assume UTC.
    - Always outputs ISO in UTC.
    """
    def to_internal_value(self, value):
        d = super().to_internal_value(value)
        if d is None:
            return None
        if timezone.is_naive(d):
            d = timezone.make_aware(d, dt.timezone.utc)
        return d.astimezone(dt.timezone.utc)

    def to_representation(self, value):
        if value is None:
            return None
        if timezone.is_naive(value):
            value = timezone.make_aware(value, dt.timezone.utc)
        return super().to_representation(value.astimezone(dt.timezone.utc))


def normalize_signature(value: str) -> str:
    """Admins may type a signature with or without its leading '#'."""
    value = (value or "").strip()
    return value if value.startswith("#") else f"#{value}"


def _validate_album(attrs):
    arista = attrs.get("arista")
    album = attrs.get("album")
    if arista is not None and album not in albums_for(arista):
        raise serializers.ValidationError({"album": f"'{album}' is not an album of arista '{arista}'."})
    return attrs


# --- Members ---------------------------------------------------------------

class MemberRegisterSerializer(serializers.ModelSerializer):
    """
    Registration payload. Role, rank and the activity totals are never
    accepted from the client.
    """
    signature = serializers.CharField(
        max_length=64,
        validators=[
            signature_validator,
            UniqueValidator(queryset=Member.objects.all(), message="Esta firma ya está registrada"),
        ],
    )

    class Meta:
        model = Member
        fields = (
            "full_name",
            "age",
            "birthday",
            "face_claim",
            "signature",
            "facebook_link",
            "motivation",
        )


class MemberProfileUpdateSerializer(serializers.ModelSerializer):
    """Fields a member may edit on their own profile."""

    class Meta:
        model = Member
        fields = ("full_name", "age", "birthday", "facebook_link")


class MemberSerializer(serializers.ModelSerializer):
    registration_date = AwareDateTimeField(read_only=True)
    rank_label = serializers.CharField(source="get_rank_display", read_only=True)
    rank_medal = serializers.SerializerMethodField()

    class Meta:
        model = Member
        fields = (
            "id",
            "full_name",
            "age",
            "birthday",
            "face_claim",
            "signature",
            "facebook_link",
            "motivation",
            "role",
            "rank",
            "rank_label",
            "rank_medal",
            "total_trazos",
            "total_words",
            "total_activities",
            "registration_date",
        )
        read_only_fields = fields

    def get_rank_medal(self, obj):
        return medal_for(obj.rank)


class RankingEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = Member
        fields = (
            "id",
            "full_name",
            "signature",
            "rank",
            "total_trazos",
            "total_words",
            "total_activities",
        )
        read_only_fields = fields


# --- Activities ------------------------------------------------------------

class ActivityCreateSerializer(serializers.ModelSerializer):
    """
    Serializer for submitting an Activity.
    Notes:
      - trazos is never accepted; it is computed from type/words/responses.
      - responses defaults to 0; date defaults to today in the community time zone.
      - album must belong to the chosen arista.
    """
    member_id = serializers.IntegerField()
    words = serializers.IntegerField(min_value=0, max_value=MAX_COUNT)
    responses = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False, allow_null=True, default=0)
    date = serializers.DateField(required=False, allow_null=True)
    type = serializers.ChoiceField(choices=ActivityType.choices)
    arista = serializers.ChoiceField(choices=Arista.choices)

    class Meta:
        model = Activity
        fields = (
            "member_id",
            "name",
            "date",
            "words",
            "type",
            "responses",
            "link",
            "description",
            "arista",
            "album",
        )

    def validate_responses(self, v):
        return 0 if v is None else v

    def validate(self, attrs):
        return _validate_album(attrs)


class ActivitySerializer(serializers.ModelSerializer):
    member_id = serializers.IntegerField(read_only=True)
    created_at = AwareDateTimeField(read_only=True)

    class Meta:
        model = Activity
        fields = (
            "id",
            "member_id",
            "name",
            "date",
            "words",
            "type",
            "responses",
            "link",
            "description",
            "arista",
            "album",
            "trazos",
            "created_at",
        )
        read_only_fields = fields


class TrazosPreviewSerializer(serializers.Serializer):
    """Estimate payload. Any type string is accepted; unknown ones score as 'otro'."""
    type = serializers.CharField(allow_blank=True, trim_whitespace=False)
    words = serializers.IntegerField(min_value=0, max_value=MAX_COUNT)
    responses = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False, allow_null=True, default=0)


# --- Community content -----------------------------------------------------

class NewsCreateSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField()

    class Meta:
        model = News
        fields = ("author_id", "title", "content")


class NewsSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField(read_only=True)
    author_signature = serializers.CharField(source="author.signature", read_only=True)
    created_at = AwareDateTimeField(read_only=True)

    class Meta:
        model = News
        fields = ("id", "title", "content", "author_id", "author_signature", "created_at")
        read_only_fields = fields


class AnnouncementCreateSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField()

    class Meta:
        model = Announcement
        fields = ("author_id", "title", "content")


class AnnouncementSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField(read_only=True)
    author_signature = serializers.CharField(source="author.signature", read_only=True)
    created_at = AwareDateTimeField(read_only=True)

    class Meta:
        model = Announcement
        fields = ("id", "title", "content", "author_id", "author_signature", "created_at")
        read_only_fields = fields


class ActivityToDoCreateSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField()
    arista = serializers.ChoiceField(choices=Arista.choices)

    class Meta:
        model = ActivityToDo
        fields = ("author_id", "title", "description", "arista", "album", "due_date")

    def validate(self, attrs):
        return _validate_album(attrs)


class ActivityToDoSerializer(serializers.ModelSerializer):
    author_id = serializers.IntegerField(read_only=True)
    author_signature = serializers.CharField(source="author.signature", read_only=True)
    created_at = AwareDateTimeField(read_only=True)

    class Meta:
        model = ActivityToDo
        fields = (
            "id",
            "title",
            "description",
            "arista",
            "album",
            "due_date",
            "author_id",
            "author_signature",
            "created_at",
        )
        read_only_fields = fields


# --- Admin -----------------------------------------------------------------

class RankUpdateSerializer(serializers.Serializer):
    admin_id = serializers.IntegerField()
    signature = serializers.CharField()
    rank = serializers.ChoiceField(choices=Rank.choices)

    def validate_signature(self, v: str):
        return normalize_signature(v)


class RoleUpdateSerializer(serializers.Serializer):
    admin_id = serializers.IntegerField()
    signature = serializers.CharField()
    role = serializers.ChoiceField(choices=Role.choices)

    def validate_signature(self, v: str):
        return normalize_signature(v)
