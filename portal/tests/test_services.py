# portal/tests/test_services.py
import datetime as dt
from io import StringIO

import pytest
from django.core.management import call_command
from django.db import DatabaseError

from portal import services
from portal.models import Activity, Member
from portal.services import MemberStats, community_today, create_activity, rank_members, recompute_stats


def _member(signature, **overrides):
    attrs = {
        "full_name": f"Autor {signature}",
        "age": 30,
        "birthday": "01/05",
        "face_claim": "x",
        "signature": signature,
        "facebook_link": "https://facebook.com/x",
        "motivation": "x",
    }
    attrs.update(overrides)
    return services.register_member(**attrs)


def _activity(member, type_="narrativa", words=750, responses=0):
    return create_activity(
        member.pk,
        name="pieza",
        date=dt.date(2025, 3, 1),
        words=words,
        type=type_,
        responses=responses,
        arista="galeria_del_alma",
        album="Obras del Ser",
    )


@pytest.mark.django_db
def test_create_activity_scores_and_refreshes_totals():
    m = _member("#luna")
    activity = _activity(m, "narrativa", 750)
    assert activity.trazos == 400

    m.refresh_from_db()
    assert (m.total_trazos, m.total_words, m.total_activities) == (400, 750, 1)


@pytest.mark.django_db
def test_recompute_is_idempotent():
    m = _member("#luna")
    _activity(m, "rol", 10, responses=7)
    _activity(m, "collage", 0)
    first = recompute_stats(m.pk)
    second = recompute_stats(m.pk)
    assert first == second == MemberStats(total_trazos=550, total_words=10, total_activities=2)


@pytest.mark.django_db
def test_recompute_repairs_drifted_totals():
    m = _member("#luna")
    _activity(m, "narrativa", 1000)
    Member.objects.filter(pk=m.pk).update(total_trazos=1, total_words=2, total_activities=3)

    stats = recompute_stats(m.pk)
    assert stats == MemberStats(total_trazos=500, total_words=1000, total_activities=1)
    m.refresh_from_db()
    assert m.total_trazos == 500


@pytest.mark.django_db
def test_recompute_without_activities_is_zero():
    m = _member("#luna")
    assert recompute_stats(m.pk) == MemberStats(0, 0, 0)


@pytest.mark.django_db
def test_recompute_unknown_member_raises():
    with pytest.raises(Member.DoesNotExist):
        recompute_stats(424242)


@pytest.mark.django_db
def test_failed_stats_write_rolls_back_the_activity(monkeypatch):
    m = _member("#luna")

    def boom(member_id):
        raise DatabaseError("stats write failed")

    monkeypatch.setattr(services, "recompute_stats", boom)
    with pytest.raises(DatabaseError):
        _activity(m)

    assert Activity.objects.filter(member=m).count() == 0
    m.refresh_from_db()
    assert m.total_activities == 0


@pytest.mark.django_db
def test_create_activity_defaults_date_and_responses():
    m = _member("#luna")
    activity = create_activity(
        m.pk,
        name="pieza",
        words=10,
        type="hilo",
        responses=None,
        arista="galeria_del_alma",
        album="Obras del Ser",
    )
    assert activity.responses == 0
    assert activity.trazos == 100
    assert activity.date == community_today()


def test_community_today_uses_portal_time_zone(settings):
    settings.PORTAL_TIME_ZONE = "America/Mexico_City"
    # 03:00 UTC is still the previous evening in Mexico City.
    now = dt.datetime(2025, 3, 2, 3, 0, tzinfo=dt.timezone.utc)
    assert community_today(now) == dt.date(2025, 3, 1)

    settings.PORTAL_TIME_ZONE = "Europe/Madrid"
    assert community_today(now) == dt.date(2025, 3, 2)


@pytest.mark.django_db
def test_register_member_assigns_admin_from_settings(settings):
    settings.PORTAL_ADMIN_SIGNATURES = ["#guardiana"]
    assert _member("#guardiana").is_admin
    assert not _member("#INELUDIBLE").is_admin


# --- Ranking ---------------------------------------------------------------

@pytest.mark.django_db
def test_rank_members_orders_descending_with_id_tiebreak():
    first = _member("#primero")
    second = _member("#segundo")
    third = _member("#tercero")
    _activity(first, "poemas", 10)       # 150
    _activity(second, "poemas", 10)      # 150, tie with first
    _activity(third, "pinturas", 5)      # 200

    ranking = list(rank_members("trazos"))
    assert [m.signature for m in ranking] == ["#tercero", "#primero", "#segundo"]
    assert len({m.pk for m in ranking}) == len(ranking)


@pytest.mark.django_db
def test_rank_members_is_lazy_and_restartable(django_assert_num_queries):
    for i in range(4):
        _activity(_member(f"#m{i}"), "drabble", 100 + i * 100)

    with django_assert_num_queries(0):
        qs = rank_members("words", 3)

    once = [m.pk for m in qs]
    again = [m.pk for m in rank_members("words", 3)]
    assert once == again
    assert len(once) == 3
    words = [m.total_words for m in qs]
    assert words == sorted(words, reverse=True)


@pytest.mark.django_db
def test_rank_members_limits(settings):
    settings.PORTAL_RANKING_DEFAULT_LIMIT = 2
    settings.PORTAL_RANKING_MAX_LIMIT = 3
    for i in range(5):
        _member(f"#m{i}")
    assert len(list(rank_members("trazos"))) == 2
    assert len(list(rank_members("trazos", 50))) == 3
    with pytest.raises(ValueError):
        rank_members("trazos", 0)
    with pytest.raises(ValueError):
        rank_members("likes")


# --- Maintenance command ---------------------------------------------------

@pytest.mark.django_db
def test_recompute_stats_command_fixes_drift():
    a = _member("#a")
    b = _member("#b")
    _activity(a, "narrativa", 500)
    _activity(b, "microcuento", 90)
    Member.objects.filter(pk=a.pk).update(total_trazos=0)

    out = StringIO()
    call_command("recompute_stats", stdout=out)
    assert "Recomputed 2 member(s), 1 corrected." in out.getvalue()
    a.refresh_from_db()
    assert a.total_trazos == 400


@pytest.mark.django_db
def test_recompute_stats_command_unknown_member():
    from django.core.management.base import CommandError

    with pytest.raises(CommandError):
        call_command("recompute_stats", "--member", "999", stdout=StringIO())


@pytest.mark.django_db
def test_totals_hold_sums_beyond_a_single_activity_column():
    m = _member("#prolifica")
    largest = 2147483647
    _activity(m, "microcuento", largest)
    _activity(m, "microcuento", largest)
    m.refresh_from_db()
    assert m.total_words == 2 * largest
    assert m.total_activities == 2
