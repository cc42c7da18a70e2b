# portal/services.py
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional

import pytz
from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.db import transaction
from django.db.models import Count, QuerySet, Sum
from django.shortcuts import get_object_or_404
from django.utils import timezone

from .catalog import Role
from .models import Activity, Member
from .scoring import compute_trazos

logger = logging.getLogger(__name__)

RANKING_FIELDS: Dict[str, str] = {
    "trazos": "total_trazos",
    "words": "total_words",
}


@dataclass(frozen=True)
class MemberStats:
    total_trazos: int
    total_words: int
    total_activities: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def community_today(now: Optional[dt.datetime] = None) -> dt.date:
    """Current calendar date in the community time zone (PORTAL_TIME_ZONE)."""
    tzinfo = pytz.timezone(settings.PORTAL_TIME_ZONE)
    now = now or timezone.now()
    if timezone.is_naive(now):
        now = timezone.make_aware(now, dt.timezone.utc)
    return now.astimezone(tzinfo).date()


def register_member(**attrs) -> Member:
    """Create a member; configured admin signatures register with the admin role."""
    signature = attrs["signature"]
    role = Role.ADMIN if signature in settings.PORTAL_ADMIN_SIGNATURES else Role.USER
    member = Member.objects.create(role=role, **attrs)
    logger.info("Registered member %s (id=%s, role=%s)", member.signature, member.id, member.role)
    return member


def recompute_stats(member_id: int) -> MemberStats:
    """
    Rebuild a member's cached totals from every activity they own.

    Always a full recount (sum of trazos, sum of words, number of activities)
    written in a single UPDATE; totals are never adjusted incrementally.
    Raises Member.DoesNotExist for unknown ids.
    """
    agg = Activity.objects.filter(member_id=member_id).aggregate(
        trazos=Sum("trazos"),
        words=Sum("words"),
        count=Count("id"),
    )
    stats = MemberStats(
        total_trazos=agg["trazos"] or 0,
        total_words=agg["words"] or 0,
        total_activities=agg["count"] or 0,
    )
    updated = Member.objects.filter(pk=member_id).update(**stats.as_dict())
    if not updated:
        raise Member.DoesNotExist(f"member {member_id} does not exist")
    logger.info(
        "Recomputed stats for member %s: trazos=%s words=%s activities=%s",
        member_id, stats.total_trazos, stats.total_words, stats.total_activities,
    )
    return stats


def create_activity(member_id: int, **attrs) -> Activity:
    """
    Score and persist one activity, then refresh the owner's totals.

    The member row is locked for the whole unit of work so overlapping
    submissions for the same member cannot lose an update; any failure rolls
    back both the insert and the stats write.
    """
    responses = attrs.pop("responses", None) or 0
    if attrs.get("date") is None:
        attrs["date"] = community_today()

    with transaction.atomic():
        member = Member.objects.select_for_update().get(pk=member_id)
        trazos = compute_trazos(attrs["type"], attrs["words"], responses)
        activity = Activity.objects.create(member=member, responses=responses, trazos=trazos, **attrs)
        recompute_stats(member.pk)

    logger.info(
        "Member %s submitted activity %s (%s, %s words) for %s trazos",
        member_id, activity.id, activity.type, activity.words, trazos,
    )
    return activity


def rank_members(metric: str, limit: Optional[int] = None) -> QuerySet:
    """
    Members ordered by a cumulative metric ("trazos" or "words"), highest first.

    Ties go to the earliest registered member (lowest id). The result is a lazy
    queryset capped at `limit` (PORTAL_RANKING_DEFAULT_LIMIT when omitted,
    never more than PORTAL_RANKING_MAX_LIMIT).
    """
    field = RANKING_FIELDS.get(metric)
    if field is None:
        raise ValueError("metric must be trazos|words")
    if limit is None:
        limit = settings.PORTAL_RANKING_DEFAULT_LIMIT
    if limit < 1:
        raise ValueError("limit must be >= 1")
    limit = min(limit, settings.PORTAL_RANKING_MAX_LIMIT)
    return Member.objects.order_by(f"-{field}", "id")[:limit]


def require_admin(member_id: int) -> Member:
    """Load the acting member, refusing anyone without the admin role."""
    member = get_object_or_404(Member, pk=member_id)
    if not member.is_admin:
        raise PermissionDenied("Admin access required.")
    return member


def set_rank(admin: Member, signature: str, rank: str) -> Member:
    """Set a member's rank label. Ranks are decided by admins, never by trazos."""
    member = get_object_or_404(Member, signature=signature)
    member.rank = rank
    member.save(update_fields=["rank"])
    logger.info("Admin %s set rank of %s to %s", admin.signature, member.signature, rank)
    return member


def set_role(admin: Member, signature: str, role: str) -> Member:
    member = get_object_or_404(Member, signature=signature)
    member.role = role
    member.save(update_fields=["role"])
    logger.info("Admin %s set role of %s to %s", admin.signature, member.signature, role)
    return member
